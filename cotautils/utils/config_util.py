# -*- coding: utf-8 -*-

import os
import re
import yaml
from pathlib import Path

from .codec_util import to_camel_case
from .errors import ConfigError


ACCOUNTS_ENV = "COTA_ACCOUNTS"
PRIVATE_KEY_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


def load_yaml(path):
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config Not Found[{path}]")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_network_config(path, chain="ckb", network="testnet"):
    conf = load_yaml(path)
    if chain not in conf or network not in conf[chain]:
        raise ConfigError(f"BlockChain Not Support[{chain}:{network}]")
    return to_camel_case(conf[chain][network])


def load_accounts(path):
    path = os.environ.get(ACCOUNTS_ENV) or path
    accounts = load_yaml(path).get("accounts") or {}
    for name, account in accounts.items():
        if "address" not in account:
            raise ConfigError(f"Account Address Missing[{name}]")
        private_key = account.get("private_key")
        if private_key and not PRIVATE_KEY_RE.match(str(private_key)):
            raise ConfigError(f"Account Private Key Format Error[{name}]")
    return accounts


def get_account(accounts, name, signer=False):
    if name not in accounts:
        raise ConfigError(f"Account Not Found[{name}]")
    account = accounts[name]
    if signer and not account.get("private_key"):
        raise ConfigError(f"Account Private Key Missing[{name}]")
    return account
