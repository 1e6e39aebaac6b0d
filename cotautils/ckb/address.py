# -*- coding: utf-8 -*-

import pyckb.bech32
import pyckb.core

from ..utils.codec_util import hexstr2bytes, bytes2hexstr


HASH_TYPES = {"data": 0, "type": 1, "data1": 2, "data2": 4}

FORMAT_FULL = 0x00
FORMAT_SHORT = 0x01
FORMAT_FULL_DATA = 0x02
FORMAT_FULL_TYPE = 0x04

BECH32 = 0
BECH32M = 1

SECP256K1_BLAKE160_CODE_HASH = "0x9bd7e06f3ecf4be0f2fcd2188b23f1b9fcc88e5d4b65a8637b17723bbda3cce8"
SECP256K1_MULTISIG_CODE_HASH = "0x5c5069eb0857efc65e1bca0c07df34c31663b3622fd3876c876320fc9634e2a8"
ANYONE_CAN_PAY_CODE_HASH = {
    "ckb": "0xd369597ff47f29fbc0d47d2e3775370d1250b85140c670e4718af712983a2354",
    "ckt": "0x3419a1c09eb2567f6552ee7a8ecffd64155cffe0f1796e6e61ec088d740c1356",
}


def short_code_hash(hrp, index):
    if index == 0x00:
        return SECP256K1_BLAKE160_CODE_HASH
    if index == 0x01:
        return SECP256K1_MULTISIG_CODE_HASH
    if index == 0x02:
        return ANYONE_CAN_PAY_CODE_HASH[hrp]
    raise ValueError(f"Short Address Code Hash Index Error[{index}]")


def decode_payload(address: str):
    # short and deprecated full formats carry a bech32 checksum, the full format bech32m
    for variant in (BECH32M, BECH32):
        try:
            hrp, data = pyckb.bech32.bech32_decode(variant, address)
            return hrp, bytes(pyckb.bech32.bech32_re_arrange_8(data))
        except AssertionError:
            continue
    raise ValueError(f"Address Format Error[{address}]")


def address_to_script(address: str) -> dict:
    hrp, payload = decode_payload(address)
    if hrp not in ("ckb", "ckt") or len(payload) < 2:
        raise ValueError(f"Address Format Error[{address}]")

    fmt = payload[0]
    if fmt == FORMAT_SHORT:
        code_hash, hash_type, args = short_code_hash(hrp, payload[1]), "type", payload[2:]
    elif len(payload) < 34:
        raise ValueError(f"Address Payload Error[{address}]")
    elif fmt == FORMAT_FULL:
        code_hash, args = bytes2hexstr(payload[1:33]), payload[34:]
        hash_type = {v: k for k, v in HASH_TYPES.items()}.get(payload[33])
        if hash_type is None:
            raise ValueError(f"Address Hash Type Error[{address}]")
    elif fmt in (FORMAT_FULL_DATA, FORMAT_FULL_TYPE):
        code_hash, args = bytes2hexstr(payload[1:33]), payload[33:]
        hash_type = "data" if fmt == FORMAT_FULL_DATA else "type"
    else:
        raise ValueError(f"Address Format Type Error[{fmt}]")

    return {"codeHash": code_hash, "hashType": hash_type, "args": bytes2hexstr(args)}


def script_to_pyckb(script: dict):
    return pyckb.core.Script(
        bytearray(hexstr2bytes(script["codeHash"])),
        HASH_TYPES[script["hashType"]],
        bytearray(hexstr2bytes(script["args"])),
    )


def serialize_script(script: dict) -> str:
    return bytes2hexstr(script_to_pyckb(script).molecule())


def script_to_hash(script: dict) -> str:
    return bytes2hexstr(script_to_pyckb(script).hash())
