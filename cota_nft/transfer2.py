# -*- coding: utf-8 -*-

import asyncio
import sys
from pathlib import Path

from loguru import logger

from cotautils.cota.runner import transfer_cota_nft
from cotautils.utils.common_util import init_logging
from cotautils.utils.config_util import load_network_config, load_accounts, get_account
from cotautils.utils.errors import CotaError


CONFIG_PATH = Path(Path(__file__).parents[0].resolve(), "cota.yaml")
ACCOUNTS_PATH = Path(Path(__file__).parents[0].resolve(), "accounts.yaml")


async def main():

    """
    receiver2 -> receiver1, the secp256k1 dep is loaded from the genesis block.
    """

    init_logging()

    config = load_network_config(CONFIG_PATH)
    accounts = load_accounts(ACCOUNTS_PATH)
    sender = get_account(accounts, "receiver2", signer=True)

    transfers = [
        {
            "cota_id": "0x096b5d210b3b32fab6f8fbd937e21b06b5d91e86",
            "token_index": "0x00000015",
            "to_address": get_account(accounts, "receiver1")["address"],
        },
    ]
    await transfer_cota_nft(config, sender, get_account(accounts, "issuer")["address"], transfers)



if __name__ == "__main__":
    try:
        asyncio.run(main())
    except CotaError as e:
        logger.error(e)
        sys.exit(1)
