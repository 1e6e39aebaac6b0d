# -*- coding: utf-8 -*-

from loguru import logger

from .service import COTA_ACTION_MINT
from ..ckb.address import serialize_script
from ..ckb.transaction import out_point_tail
from ..utils.codec_util import u32_hexstr, remove0x
from ..utils.errors import CotaError


async def assign_token_indexes(service, cota_id, withdrawals):
    define = await service.aggregator.get_define_info({"cotaId": cota_id})
    issued = define.get("issued")
    if issued is None:
        raise CotaError(f"Cota Id Not Defined[{cota_id}]")
    return [
        dict(withdrawal, tokenIndex=withdrawal.get("tokenIndex") or u32_hexstr(issued + idx))
        for idx, withdrawal in enumerate(withdrawals)
    ]


async def generate_mint_cota_tx(service, mint_lock, mint_cota_info, fee=None):
    cota_cell = await service.get_cota_cell(mint_lock)

    cota_id = mint_cota_info["cotaId"]
    withdrawals = await assign_token_indexes(service, cota_id, mint_cota_info["withdrawals"])
    mint_req = {
        "lockScript": serialize_script(mint_lock),
        "cotaId": cota_id,
        "outPoint": out_point_tail(cota_cell["outPoint"]),
        "withdrawals": withdrawals,
    }
    smt = await service.aggregator.generate_mint_cota_smt(mint_req)
    logger.info(f"Mint SMT Generated[{cota_id}] Tokens{[w['tokenIndex'] for w in withdrawals]} Block[{smt.get('blockNumber')}]")

    inputs = [{"previousOutput": cota_cell["outPoint"], "since": "0x0"}]
    return {
        "version": "0x0",
        "cellDeps": [dict(service.cota_cell_dep)],
        "headerDeps": [],
        "inputs": inputs,
        "outputs": [service.cota_output(cota_cell, fee)],
        "outputsData": [service.cota_output_data(cota_cell, smt["smtRootHash"])],
        "witnesses": [
            {"lock": "", "inputType": f"{COTA_ACTION_MINT}{remove0x(smt['mintSmtEntry'])}", "outputType": ""},
        ],
    }
