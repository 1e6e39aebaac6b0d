# -*- coding: utf-8 -*-

import aiohttp
import itertools
import json
from typing import Union, Optional

from loguru import logger

from .errors import RpcError


class AsyncRequestClient(object):


    def __init__(self, timeout: Optional[int] = 180):
        self.timeout = timeout

    async def make_request(
        self, endpoint: str, method: str, api: str,
        payload: Union[None, dict, list] = None,
        headers: Optional[dict] = None,
        proxy: Union[None, str] = None,
        timeout: Optional[int] = None,
    ) -> Union[dict, list, str]:

        endpoint, api = endpoint.rstrip("/"), api.lstrip("/")
        headers = headers or {}
        api_url = f"{endpoint}/{api}" if api else endpoint
        timeout = timeout or self.timeout
        kwargs = {
            "timeout": aiohttp.ClientTimeout(total=timeout),
            "proxy": proxy,
        }
        if method.upper() == "GET":
            kwargs["params"] = payload
        else:
            kwargs["json"] = payload

        async with aiohttp.ClientSession(headers=headers) as session:
            async with session.request(method, api_url, **kwargs) as response:
                response.raise_for_status()
                if response.content_type == "application/json":
                    body = await response.json()
                else:
                    body = await response.text()
        return body



class JsonRpcClient(AsyncRequestClient):

    _ids = itertools.count(1)

    def __init__(self, endpoint: str, timeout: Optional[int] = 180):
        self.endpoint = endpoint
        super(JsonRpcClient, self).__init__(timeout=timeout)


    async def call(self, method: str, params: Union[None, list, dict] = None):
        payload = {
            "id": next(self._ids),
            "jsonrpc": "2.0",
            "method": method,
            "params": params if params is not None else [],
        }
        logger.debug(f"RPC[{self.endpoint}] => {method}")
        body = await self.make_request(self.endpoint, "POST", "", payload=payload)
        if isinstance(body, str):
            body = json.loads(body)
        if body.get("error"):
            error = body["error"]
            raise RpcError(method, error.get("code"), error.get("message"), error.get("data"))
        return body.get("result")
