# -*- coding: utf-8 -*-

from typing import Optional

from loguru import logger

from .transaction import to_rpc_transaction
from ..utils.async_requests_util import JsonRpcClient
from ..utils.codec_util import to_camel_case, hexstr2int, int2hexstr
from ..utils.errors import CotaError
from ..utils.retry import retry


class TransactionNotCommitted(CotaError):
    pass



class CkbNodeRPC(JsonRpcClient):


    async def get_tip_block_number(self) -> int:
        tip = await self.call("get_tip_block_number")
        return hexstr2int(tip)


    async def get_block_by_number(self, number: int) -> dict:
        block = await self.call("get_block_by_number", [int2hexstr(number)])
        if not block:
            raise CotaError(f"Block Not Found[{number}]")
        return to_camel_case(block)


    async def get_transaction(self, tx_hash: str) -> Optional[dict]:
        tx = await self.call("get_transaction", [tx_hash])
        return to_camel_case(tx) if tx else None


    async def send_transaction(self, tx: dict, outputs_validator: str = "passthrough") -> str:
        tx_hash = await self.call("send_transaction", [to_rpc_transaction(tx), outputs_validator])
        logger.debug(f"Transaction Sent[{tx_hash}]")
        return tx_hash


    @retry(exceptions=TransactionNotCommitted, tries=30, delay=5)
    async def wait_for_transaction(self, tx_hash: str) -> dict:
        tx = await self.get_transaction(tx_hash)
        status = (tx or {}).get("txStatus", {}).get("status")
        if status == "rejected":
            raise CotaError(f"Transaction Rejected[{tx_hash}][{tx['txStatus'].get('reason')}]")
        if status != "committed":
            raise TransactionNotCommitted(f"Transaction Not Committed[{tx_hash}][{status}]")
        return tx



class CkbIndexerRPC(JsonRpcClient):


    async def get_tip(self) -> dict:
        return to_camel_case(await self.call("get_tip"))


    async def get_cells(self, search_key: dict, order: str = "asc", limit: int = 100, after: Optional[str] = None) -> dict:
        params = [search_key, order, int2hexstr(limit)]
        if after:
            params.append(after)
        result = await self.call("get_cells", params)
        return to_camel_case(result)
