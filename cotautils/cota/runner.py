# -*- coding: utf-8 -*-

import re
from contextlib import contextmanager

from loguru import logger

from .mint import generate_mint_cota_tx
from .service import Service
from .transfer import generate_transfer_cota_tx
from ..ckb.address import address_to_script, serialize_script
from ..ckb.transaction import private_key_to_lock_args, sign_transaction, transaction_to_json
from ..utils.errors import CotaError, StageError


TX_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


@contextmanager
def stage(name):
    logger.debug(f"Stage[{name}]")
    try:
        yield
    except StageError:
        raise
    except Exception as e:
        raise StageError(name, e) from e


async def sign_and_send(service, raw_tx, private_key, signer_lock, fixed_secp256k1_dep=False, wait=False):
    ckb = service.collector.get_ckb()

    with stage("load secp256k1 dep"):
        if fixed_secp256k1_dep:
            if not service.secp256k1_dep:
                raise CotaError("Secp256k1 Dep Not Configured")
            secp256k1_dep = dict(service.secp256k1_dep)
        else:
            secp256k1_dep = await service.collector.load_secp256k1_dep()
    raw_tx["cellDeps"].append(secp256k1_dep)

    with stage("check key"):
        lock_args = private_key_to_lock_args(private_key)
        if lock_args != signer_lock["args"].lower():
            raise CotaError(f"Private Key Not Match Lock[{lock_args} != {signer_lock['args']}]")

    with stage("sign transaction"):
        signed_tx = sign_transaction(raw_tx, private_key)
    print(transaction_to_json(signed_tx))

    with stage("send transaction"):
        tx_hash = await ckb.send_transaction(signed_tx, "passthrough")
        if not isinstance(tx_hash, str) or not TX_HASH_RE.match(tx_hash):
            raise CotaError(f"Tx Hash Format Error[{tx_hash}]")

    if wait:
        with stage("wait transaction"):
            await ckb.wait_for_transaction(tx_hash)
            logger.info(f"Transaction Committed[{tx_hash}]")
    return tx_hash


async def mint_cota_nft(config, issuer, cota_id, withdrawals, fixed_secp256k1_dep=False, wait=False):
    """
    Mint withdrawal records of ``cota_id`` from ``issuer`` to receivers.

    ``issuer`` is an account dict with ``address`` and ``private_key``;
    each withdrawal carries ``state``, ``characteristic`` and ``to_address``.
    Returns the submitted transaction hash.
    """
    with stage("load service"):
        service = Service.from_config(config)

    with stage("decode address"):
        mint_lock = address_to_script(issuer["address"])
        mint_cota_info = {
            "cotaId": cota_id,
            "withdrawals": [
                {
                    "state": w["state"],
                    "characteristic": w["characteristic"],
                    "toLockScript": serialize_script(address_to_script(w["to_address"])),
                }
                for w in withdrawals
            ],
        }

    with stage("generate transaction"):
        raw_tx = await generate_mint_cota_tx(service, mint_lock, mint_cota_info)

    tx_hash = await sign_and_send(
        service, raw_tx, issuer["private_key"], mint_lock,
        fixed_secp256k1_dep=fixed_secp256k1_dep, wait=wait,
    )
    logger.info(f"Mint cota nft tx has been sent with tx hash {tx_hash}")
    return tx_hash


async def transfer_cota_nft(config, sender, withdrawal_address, transfers, fixed_secp256k1_dep=False, wait=False):
    """
    Transfer NFTs held by ``sender``; ``withdrawal_address`` is the account
    that withdrew them to the sender. Each transfer carries ``cota_id``,
    ``token_index`` and ``to_address``.
    """
    with stage("load service"):
        service = Service.from_config(config)

    with stage("decode address"):
        cota_lock = address_to_script(sender["address"])
        withdrawal_lock = address_to_script(withdrawal_address)
        transfer_list = [
            {
                "cotaId": t["cota_id"],
                "tokenIndex": t["token_index"],
                "toLockScript": serialize_script(address_to_script(t["to_address"])),
            }
            for t in transfers
        ]

    with stage("generate transaction"):
        raw_tx = await generate_transfer_cota_tx(service, cota_lock, withdrawal_lock, transfer_list)

    tx_hash = await sign_and_send(
        service, raw_tx, sender["private_key"], cota_lock,
        fixed_secp256k1_dep=fixed_secp256k1_dep, wait=wait,
    )
    logger.info(f"Transfer cota nft tx has been sent with tx hash {tx_hash}")
    return tx_hash
