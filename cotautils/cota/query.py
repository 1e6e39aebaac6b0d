# -*- coding: utf-8 -*-

from loguru import logger

from .runner import stage
from .service import Service
from ..ckb.address import address_to_script, serialize_script, script_to_hash


async def query_account(config, address, cota_id=None, token_index=None, page=0, page_size=10):
    with stage("load service"):
        service = Service.from_config(config)
    aggregator = service.aggregator

    with stage("decode address"):
        lock = address_to_script(address)
        lock_script = serialize_script(lock)
        lock_hash = script_to_hash(lock)

    report = {"address": address, "lockHash": lock_hash}
    with stage("query aggregator"):
        report["aggregator"] = await aggregator.get_aggregator_info()
        report["registered"] = await aggregator.check_registered_lock_hashes([lock_hash])

        fetch = {"lockScript": lock_script, "page": page, "pageSize": page_size}
        if cota_id:
            fetch["cotaId"] = cota_id
        report["hold"] = await aggregator.get_hold_cota_nft(fetch)
        report["withdrawal"] = await aggregator.get_withdrawal_cota_nft(fetch)
        report["mint"] = await aggregator.get_mint_cota_nft(fetch)
        report["issuer"] = await aggregator.get_issuer_info({"lockScript": lock_script})

        if cota_id:
            report["define"] = await aggregator.get_define_info({"cotaId": cota_id})
        if cota_id and token_index:
            nft = {"lockScript": lock_script, "cotaId": cota_id, "tokenIndex": token_index}
            report["claimed"] = await aggregator.is_claimed(nft)
            report["sender"] = await aggregator.get_cota_nft_sender(nft)

    logger.info(f"Account[{address}] hold[{report['hold'].get('total')}] withdrawal[{report['withdrawal'].get('total')}]")
    return report
