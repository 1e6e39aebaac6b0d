#! -*- coding: utf8 -*-
import os
import sys

from loguru import logger


DEFAULT_FMT = "{time:YYYY-MM-DD HH:mm:ss.SSS} [{level}] ({process}:{thread.name}) [{module}:{line}] {message}"

def init_logging(filename=None, level="INFO", days=7, fmt=DEFAULT_FMT):
    logger.remove()
    if filename:
        if os.path.dirname(filename) and not os.path.exists(os.path.dirname(filename)):
            os.makedirs(os.path.dirname(filename))
        logger.add(filename, level=level, format=fmt, rotation="00:00", retention=f"{days} days")
    else:
        logger.add(sys.stderr, level=level, format=fmt)
