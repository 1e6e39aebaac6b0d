# -*- coding: utf-8 -*-

import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

from cotautils.cota.query import query_account
from cotautils.utils.common_util import init_logging
from cotautils.utils.config_util import load_network_config, load_accounts, get_account
from cotautils.utils.errors import CotaError


CONFIG_PATH = Path(Path(__file__).parents[0].resolve(), "cota.yaml")
ACCOUNTS_PATH = Path(Path(__file__).parents[0].resolve(), "accounts.yaml")


async def main():

    init_logging()

    config = load_network_config(CONFIG_PATH)
    accounts = load_accounts(ACCOUNTS_PATH)

    # receiver2 holds 0x0000001a once transfer1 went through
    account, token_index = "receiver2", "0x0000001a"
    report = await query_account(
        config,
        get_account(accounts, account)["address"],
        cota_id="0x096b5d210b3b32fab6f8fbd937e21b06b5d91e86",
        token_index=token_index,
    )
    print(json.dumps(report, indent=2))



if __name__ == "__main__":
    try:
        asyncio.run(main())
    except CotaError as e:
        logger.error(e)
        sys.exit(1)
