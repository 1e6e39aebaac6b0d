"""
Fixtures faking the CKB node, CKB indexer and the CoTA aggregator at the
HTTP layer, so everything above ``AsyncRequestClient.make_request`` runs.
"""

from pathlib import Path

import pytest

from cotautils.ckb.address import SECP256K1_BLAKE160_CODE_HASH
from cotautils.ckb.transaction import private_key_to_lock_args
from cotautils.utils.async_requests_util import AsyncRequestClient
from cotautils.utils.config_util import load_network_config


REPO_ROOT = Path(__file__).resolve().parents[1]
CONFIG_PATH = REPO_ROOT / "cota_nft" / "cota.yaml"

NODE_URL = "http://localhost:8114"
INDEXER_URL = "http://localhost:8116"
REGISTRY_URL = "http://localhost:3050"
COTA_URL = "http://localhost:3030"

COTA_ID = "0x096b5d210b3b32fab6f8fbd937e21b06b5d91e86"
CHARACTERISTIC = "0x0505050505050505050505050505050505050505"
SENT_TX_HASH = "0x" + "aa" * 32
GENESIS_DEP_TX_HASH = "0x" + "02" * 32
SMT_ROOT_HASH = "cd" * 32
COTA_CELL_CAPACITY = 200 * 10 ** 8

PRIVATE_KEYS = {
    "issuer": "0xc5bd09c9b954559c70a77d68bde95369e2ce910556ddc20f739080cde3b62ef2",
    "receiver1": "0xaa3bafdf2dc710aa408d81d8f577d820e77be682bdf870e0ceef6a7fdbd7cea4",
    "receiver2": "0x02365419c63e3f2e5ca75f2be80a38e3da4eb9a844b4963bc2444ab72b38c6d2",
}

# testnet short addresses of the keys above
ADDRESSES = {
    "issuer": "ckt1qyq0scej4vn0uka238m63azcel7cmcme7f2sxj5ska",
    "receiver1": "ckt1qyqrq7vdeh5a8rnp4n2tuuu08p5uw8a5qdtqrpvdsg",
    "receiver2": "ckt1qyqz8vxeyrv4nur4j27ktp34fmwnua9wuyqqggd748",
}


class RpcFailure(object):

    def __init__(self, code, message):
        self.code = code
        self.message = message


class FakeRpc(object):
    """Routes JSON-RPC payloads to handlers keyed by (endpoint, method)."""

    def __init__(self):
        self.handlers = {}
        self.calls = []

    def on(self, endpoint, method, handler):
        self.handlers[(endpoint, method)] = handler if callable(handler) else (lambda params, value=handler: value)

    def params(self, method):
        return [params for _, m, params in self.calls if m == method]

    async def make_request(self, client, endpoint, method, api, payload=None, **kwargs):
        rpc_method, params = payload["method"], payload["params"]
        self.calls.append((endpoint, rpc_method, params))
        handler = self.handlers.get((endpoint, rpc_method))
        if handler is None:
            raise AssertionError(f"No fake for {endpoint} {rpc_method}")
        result = handler(params)
        if isinstance(result, RpcFailure):
            return {"jsonrpc": "2.0", "id": payload["id"], "error": {"code": result.code, "message": result.message}}
        return {"jsonrpc": "2.0", "id": payload["id"], "result": result}


def lock_for(name):
    return {
        "codeHash": SECP256K1_BLAKE160_CODE_HASH,
        "hashType": "type",
        "args": private_key_to_lock_args(PRIVATE_KEYS[name]),
    }


def snake_script(script):
    return {"code_hash": script["codeHash"], "hash_type": script["hashType"], "args": script["args"]}


def cota_cell(lock, type_script, tx_hash, data="0x00"):
    return {
        "output": {
            "capacity": hex(COTA_CELL_CAPACITY),
            "lock": snake_script(lock),
            "type": type_script,
        },
        "output_data": data,
        "out_point": {"tx_hash": tx_hash, "index": "0x0"},
        "block_number": "0x10",
        "tx_index": "0x1",
    }


@pytest.fixture
def config():
    return load_network_config(CONFIG_PATH)


@pytest.fixture
def accounts():
    return {
        name: {"address": f"{name}-address", "private_key": key}
        for name, key in PRIVATE_KEYS.items()
    }


@pytest.fixture
def testnet_accounts():
    return {
        name: {"address": ADDRESSES[name], "private_key": key}
        for name, key in PRIVATE_KEYS.items()
    }


@pytest.fixture
def fake_addresses(monkeypatch):
    """Resolve the ``<name>-address`` strings of ``accounts`` to key-derived locks."""
    import cotautils.cota.runner as runner
    import cotautils.cota.query as query

    def address_to_script(address):
        name = address.rsplit("-", 1)[0]
        if name not in PRIVATE_KEYS:
            raise ValueError(f"Address Format Error[{address}]")
        return lock_for(name)

    monkeypatch.setattr(runner, "address_to_script", address_to_script)
    monkeypatch.setattr(query, "address_to_script", address_to_script)
    return address_to_script


@pytest.fixture
def fake_rpc(monkeypatch, config):
    fake = FakeRpc()

    async def make_request(client, endpoint, method, api, payload=None, **kwargs):
        return await fake.make_request(client, endpoint, method, api, payload=payload, **kwargs)

    monkeypatch.setattr(AsyncRequestClient, "make_request", make_request)

    cota_type = snake_script(config["cotaTypeScript"])
    cells = {}
    for idx, name in enumerate(PRIVATE_KEYS, start=1):
        cells[lock_for(name)["args"]] = cota_cell(lock_for(name), cota_type, "0x" + f"{idx:02x}" * 32)
    fake.cells = cells

    def get_cells(params):
        args = params[0]["script"]["args"]
        return {"objects": [cells[args]] if args in cells else [], "last_cursor": "0x"}

    fake.on(INDEXER_URL, "get_cells", get_cells)
    fake.on(NODE_URL, "get_block_by_number", {
        "header": {"number": "0x0"},
        "transactions": [{"hash": "0x" + "01" * 32}, {"hash": GENESIS_DEP_TX_HASH}],
    })
    fake.on(NODE_URL, "send_transaction", SENT_TX_HASH)
    fake.on(COTA_URL, "get_define_info", {"total": 100, "issued": 26, "configure": "0x00", "block_number": 1})
    fake.on(COTA_URL, "generate_mint_cota_smt", {
        "smt_root_hash": SMT_ROOT_HASH,
        "mint_smt_entry": "ef" * 16,
        "block_number": 1,
    })
    fake.on(COTA_URL, "generate_transfer_cota_smt", {
        "smt_root_hash": SMT_ROOT_HASH,
        "transfer_smt_entry": "12" * 16,
        "withdraw_block_hash": "34" * 32,
        "block_number": 1,
    })
    return fake
