# -*- coding: utf-8 -*-

from loguru import logger

from .service import COTA_ACTION_TRANSFER
from ..ckb.address import serialize_script, script_to_hash
from ..ckb.transaction import out_point_tail
from ..utils.codec_util import remove0x


async def generate_transfer_cota_tx(service, cota_lock, withdrawal_lock, transfers, fee=None):
    cota_cell = await service.get_cota_cell(cota_lock)
    withdrawal_cota_cell = await service.get_cota_cell(withdrawal_lock)

    transfer_req = {
        "lockScript": serialize_script(cota_lock),
        "withdrawalLockHash": script_to_hash(withdrawal_lock),
        "transferOutPoint": out_point_tail(cota_cell["outPoint"]),
        "transfers": transfers,
    }
    smt = await service.aggregator.generate_transfer_cota_smt(transfer_req)
    logger.info(f"Transfer SMT Generated Tokens{[t['tokenIndex'] for t in transfers]} Block[{smt.get('blockNumber')}]")

    inputs = [{"previousOutput": cota_cell["outPoint"], "since": "0x0"}]
    withdrawal_cell_dep = {"outPoint": withdrawal_cota_cell["outPoint"], "depType": "code"}
    return {
        "version": "0x0",
        "cellDeps": [withdrawal_cell_dep, dict(service.cota_cell_dep)],
        "headerDeps": [],
        "inputs": inputs,
        "outputs": [service.cota_output(cota_cell, fee)],
        "outputsData": [service.cota_output_data(cota_cell, smt["smtRootHash"])],
        "witnesses": [
            {"lock": "", "inputType": f"{COTA_ACTION_TRANSFER}{remove0x(smt['transferSmtEntry'])}", "outputType": ""},
        ],
    }
