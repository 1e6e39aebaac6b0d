# -*- coding: utf-8 -*-

import asyncio
import sys
from pathlib import Path

from loguru import logger

from cotautils.cota.runner import mint_cota_nft
from cotautils.utils.common_util import init_logging
from cotautils.utils.config_util import load_network_config, load_accounts, get_account
from cotautils.utils.errors import CotaError


CONFIG_PATH = Path(Path(__file__).parents[0].resolve(), "cota.yaml")
ACCOUNTS_PATH = Path(Path(__file__).parents[0].resolve(), "accounts.yaml")


async def main():

    """
    1. accounts.yaml: fill in the issuer private key (see accounts.example.yaml)
    2. cota_id: the collection defined by the issuer
    3. withdrawals: one entry per minted NFT, token indexes follow the issued count
    """

    init_logging()

    config = load_network_config(CONFIG_PATH)
    accounts = load_accounts(ACCOUNTS_PATH)
    issuer = get_account(accounts, "issuer", signer=True)

    cota_id = "0x096b5d210b3b32fab6f8fbd937e21b06b5d91e86"
    withdrawals = [
        {
            "state": "0x00",
            "characteristic": "0x0505050505050505050505050505050505050505",
            "to_address": get_account(accounts, "receiver1")["address"],
        },
        {
            "state": "0x00",
            "characteristic": "0x0505050505050505050505050505050505050505",
            "to_address": get_account(accounts, "receiver2")["address"],
        },
    ]
    await mint_cota_nft(config, issuer, cota_id, withdrawals)



if __name__ == "__main__":
    try:
        asyncio.run(main())
    except CotaError as e:
        logger.error(e)
        sys.exit(1)
