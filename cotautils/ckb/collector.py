# -*- coding: utf-8 -*-

from typing import Optional

from loguru import logger

from .rpc import CkbNodeRPC, CkbIndexerRPC
from ..utils.codec_util import to_snake_case
from ..utils.errors import CotaError


class Collector(object):


    def __init__(self, ckb_node_url: str, ckb_indexer_url: str, timeout: Optional[int] = 180):
        self.ckb = CkbNodeRPC(ckb_node_url, timeout=timeout)
        self.indexer = CkbIndexerRPC(ckb_indexer_url, timeout=timeout)


    def get_ckb(self) -> CkbNodeRPC:
        return self.ckb


    async def get_cells(self, lock: dict, type_script: Optional[dict] = None) -> list:
        search_key = {
            "script": to_snake_case(lock),
            "script_type": "lock",
        }
        if type_script:
            search_key["filter"] = {"script": to_snake_case(type_script)}
        result = await self.indexer.get_cells(search_key)
        cells = result.get("objects") or []
        logger.debug(f"Cells Found[{len(cells)}] lock[{lock['args']}]")
        return cells


    async def load_secp256k1_dep(self) -> dict:
        # the dep group lives in the second transaction of the genesis block
        genesis = await self.ckb.get_block_by_number(0)
        transactions = genesis.get("transactions") or []
        if len(transactions) < 2:
            raise CotaError("Genesis Dep Group Transaction Not Found")
        return {
            "outPoint": {"txHash": transactions[1]["hash"], "index": "0x0"},
            "depType": "depGroup",
        }
