# -*- coding: utf-8 -*-

from typing import Optional

from ..utils.async_requests_util import JsonRpcClient
from ..utils.codec_util import to_camel_case, to_snake_case


class Aggregator(object):
    """
    Client of the CoTA aggregator: the registry service answers registration
    queries, the cota service builds SMT entries and serves NFT queries.
    Params are given in camelCase and results come back in camelCase.
    """

    def __init__(self, registry_url: str, cota_url: str, timeout: Optional[int] = 180):
        self.registry = JsonRpcClient(registry_url, timeout=timeout)
        self.cota = JsonRpcClient(cota_url, timeout=timeout)


    async def _registry_call(self, method, params):
        return to_camel_case(await self.registry.call(method, to_snake_case(params)))


    async def _cota_call(self, method, params):
        return to_camel_case(await self.cota.call(method, to_snake_case(params)))


    async def check_registered_lock_hashes(self, lock_hashes: list) -> dict:
        return await self._registry_call("check_registered_lock_hashes", lock_hashes)


    async def generate_mint_cota_smt(self, params: dict) -> dict:
        return await self._cota_call("generate_mint_cota_smt", params)


    async def generate_transfer_cota_smt(self, params: dict) -> dict:
        return await self._cota_call("generate_transfer_cota_smt", params)


    async def get_hold_cota_nft(self, params: dict) -> dict:
        return await self._cota_call("get_hold_cota_nft", params)


    async def get_withdrawal_cota_nft(self, params: dict) -> dict:
        return await self._cota_call("get_withdrawal_cota_nft", params)


    async def get_mint_cota_nft(self, params: dict) -> dict:
        return await self._cota_call("get_mint_cota_nft", params)


    async def is_claimed(self, params: dict) -> dict:
        return await self._cota_call("is_claimed", params)


    async def get_cota_nft_sender(self, params: dict) -> dict:
        return await self._cota_call("get_cota_nft_sender", params)


    async def get_define_info(self, params: dict) -> dict:
        return await self._cota_call("get_define_info", params)


    async def get_issuer_info(self, params: dict) -> dict:
        return await self._cota_call("get_issuer_info", params)


    async def get_aggregator_info(self) -> dict:
        return await self._cota_call("get_aggregator_info", [])
