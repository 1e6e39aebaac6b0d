import time
import random
import asyncio
import functools

from loguru import logger as loguru_logger


RETRY_OPTIONS = {
    "tries": -1,
    "delay": 0,
    "jitter": 0,
    "backoff": 1,
    "max_delay": None,
    "exceptions": Exception,
    "logger": loguru_logger,
}


def _pop_options(kwargs):
    return {key: kwargs.pop(key, default) for key, default in RETRY_OPTIONS.items()}


def _next_delay(delay, opts):
    jitter = opts["jitter"]
    delay = delay * opts["backoff"] + (random.uniform(*jitter) if isinstance(jitter, tuple) else jitter)
    return min(delay, opts["max_delay"] or delay)


def _attempts(run, opts):
    """Receive each failure via throw() and answer with the delay to sleep; re-raise once tries run out."""
    tries, delay, attempt = opts["tries"], opts["delay"], 1
    wait = None
    name = getattr(run, "__qualname__", repr(run))
    while True:
        try:
            yield wait
        except opts["exceptions"] as e:
            tries -= 1
            if not tries:
                raise
            opts["logger"].warning(f"[{type(e).__name__}: {e}][{name}] retrying[{attempt}] in {delay} seconds...")
            attempt += 1
            wait, delay = delay, _next_delay(delay, opts)


def retry_call(run, *args, **kwargs):
    opts = _pop_options(kwargs)
    attempts = _attempts(run, opts)
    next(attempts)
    while True:
        try:
            return run(*args, **kwargs)
        except opts["exceptions"] as e:
            delay = attempts.throw(e)
            time.sleep(delay)


async def async_retry_call(run, *args, **kwargs):
    opts = _pop_options(kwargs)
    attempts = _attempts(run, opts)
    next(attempts)
    while True:
        try:
            return await run(*args, **kwargs)
        except opts["exceptions"] as e:
            delay = attempts.throw(e)
            await asyncio.sleep(delay)


def retry(exceptions=Exception, tries=-1, delay=0, max_delay=None, backoff=1, jitter=0, logger=loguru_logger):
    retry_kwargs = {
        "exceptions": exceptions, "tries": tries, "delay": delay, "max_delay": max_delay,
        "backoff": backoff, "jitter": jitter, "logger": logger,
    }

    def retry_decorator(f):
        if asyncio.iscoroutinefunction(f):
            @functools.wraps(f)
            async def async_wrapper(*args, **kwargs):
                return await async_retry_call(f, *args, **kwargs, **retry_kwargs)
            return async_wrapper

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            return retry_call(f, *args, **kwargs, **retry_kwargs)
        return wrapper

    return retry_decorator
