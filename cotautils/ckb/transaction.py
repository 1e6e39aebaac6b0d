# -*- coding: utf-8 -*-

import copy
import json

import pyckb.core
from eth_keys import keys

from .address import script_to_pyckb
from ..utils.codec_util import (
    hexstr2bytes,
    bytes2hexstr,
    hexstr2int,
    blake160,
    camel2snake,
    to_snake_case,
)


DEP_TYPES = {"code": 0, "depGroup": 1}
SIGNATURE_SIZE = 65


def _opt_bytes(value):
    if value is None or value in ("", "0x"):
        return None
    return bytearray(hexstr2bytes(value))


def out_point_to_pyckb(out_point):
    return pyckb.core.OutPoint(bytearray(hexstr2bytes(out_point["txHash"])), hexstr2int(out_point["index"]))


def serialize_out_point(out_point):
    tx_hash = hexstr2bytes(out_point["txHash"])
    index = hexstr2int(out_point["index"]).to_bytes(4, "little")
    return bytes2hexstr(tx_hash + index)


def out_point_tail(out_point):
    # the aggregator keys cells by the last 24 bytes of the serialized out point
    return bytes2hexstr(hexstr2bytes(serialize_out_point(out_point))[12:])


def witness_args_to_bytes(witness_args):
    return bytes(pyckb.core.WitnessArgs(
        _opt_bytes(witness_args.get("lock")),
        _opt_bytes(witness_args.get("inputType")),
        _opt_bytes(witness_args.get("outputType")),
    ).molecule())


def witness_to_bytes(witness):
    if isinstance(witness, dict):
        return witness_args_to_bytes(witness)
    return hexstr2bytes(witness)


def raw_transaction_to_pyckb(tx):
    cell_deps = [
        pyckb.core.CellDep(out_point_to_pyckb(dep["outPoint"]), DEP_TYPES[dep["depType"]])
        for dep in tx["cellDeps"]
    ]
    inputs = [
        pyckb.core.CellInput(hexstr2int(i["since"]), out_point_to_pyckb(i["previousOutput"]))
        for i in tx["inputs"]
    ]
    outputs = [
        pyckb.core.CellOutput(
            hexstr2int(o["capacity"]),
            script_to_pyckb(o["lock"]),
            script_to_pyckb(o["type"]) if o.get("type") else None,
        )
        for o in tx["outputs"]
    ]
    return pyckb.core.RawTransaction(
        hexstr2int(tx["version"]),
        cell_deps,
        [bytearray(hexstr2bytes(h)) for h in tx["headerDeps"]],
        inputs,
        outputs,
        [bytearray(hexstr2bytes(d)) for d in tx["outputsData"]],
    )


def transaction_hash(tx):
    return bytes2hexstr(raw_transaction_to_pyckb(tx).hash())


def private_key_to_lock_args(private_key):
    pubkey = keys.PrivateKey(hexstr2bytes(private_key)).public_key
    return bytes2hexstr(blake160(pubkey.to_compressed_bytes()))


def first_witness_args(tx):
    witness = tx["witnesses"][0]
    if isinstance(witness, dict):
        return pyckb.core.WitnessArgs(
            _opt_bytes(witness.get("lock")),
            _opt_bytes(witness.get("inputType")),
            _opt_bytes(witness.get("outputType")),
        )
    data = bytearray(hexstr2bytes(witness))
    if not data:
        return pyckb.core.WitnessArgs(None, None, None)
    return pyckb.core.WitnessArgs.molecule_decode(data)


def sighash_all_message(tx):
    """
    Message for secp256k1-blake160 sighash-all, assuming every input belongs
    to the signer's lock group. The first witness is hashed with its lock
    field zero-filled to the signature size.
    """
    placeholder = first_witness_args(tx)
    placeholder.lock = bytearray(SIGNATURE_SIZE)
    witnesses = [placeholder.molecule()] + [witness_to_bytes(w) for w in tx["witnesses"][1:]]

    sign_data = bytearray(raw_transaction_to_pyckb(tx).hash())
    for witness in witnesses:
        sign_data.extend(len(witness).to_bytes(8, "little"))
        sign_data.extend(witness)
    return bytes(pyckb.core.hash(sign_data))


def sign_transaction(tx, private_key):
    if not tx.get("witnesses"):
        raise ValueError("Transaction Witnesses Empty")
    signed = copy.deepcopy(tx)
    message = sighash_all_message(tx)
    signature = keys.PrivateKey(hexstr2bytes(private_key)).sign_msg_hash(message).to_bytes()

    witness_args = first_witness_args(tx)
    witness_args.lock = bytearray(signature)
    signed["witnesses"] = [bytes2hexstr(witness_args.molecule())]
    signed["witnesses"] += [bytes2hexstr(witness_to_bytes(w)) for w in tx["witnesses"][1:]]
    return signed


def to_rpc_transaction(tx):
    rpc_tx = to_snake_case(tx)
    for dep in rpc_tx["cell_deps"]:
        dep["dep_type"] = camel2snake(dep["dep_type"])
    return rpc_tx


def transaction_to_json(tx):
    return json.dumps(tx)
