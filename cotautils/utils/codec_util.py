# -*- coding:utf-8 -*-

import re

import pyckb.core


def append0x(s_hex):
    return s_hex if s_hex.startswith("0x") else f"0x{s_hex}"


def remove0x(s_hex):
    return s_hex[2:] if s_hex.startswith("0x") else s_hex


def hexstr2bytes(s_hex):
    return bytes.fromhex(remove0x(s_hex))


def bytes2hexstr(b):
    return f"0x{bytes(b).hex()}"


def int2hexstr(n):
    return hex(n)


def hexstr2int(s_hex):
    return int(s_hex, 16)


def u32_hexstr(n):
    if not 0 <= n < 1 << 32:
        raise ValueError(f"U32 Overflow[{n}]")
    return f"0x{n:08x}"


def ckb_hash(data):
    return bytes(pyckb.core.hash(bytearray(data)))


def blake160(data):
    return ckb_hash(data)[:20]


def snake2camel(s):
    head, *tail = s.split("_")
    return head + "".join(w.title() for w in tail)


def camel2snake(s):
    return re.sub(r"(?<!^)(?=[A-Z])", "_", s).lower()


def to_camel_case(obj):
    if isinstance(obj, dict):
        return {snake2camel(k): to_camel_case(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [to_camel_case(v) for v in obj]
    return obj


def to_snake_case(obj):
    if isinstance(obj, dict):
        return {camel2snake(k): to_snake_case(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [to_snake_case(v) for v in obj]
    return obj
