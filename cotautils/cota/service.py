# -*- coding: utf-8 -*-

from loguru import logger

from .aggregator import Aggregator
from ..ckb.collector import Collector
from ..utils.codec_util import snake2camel, hexstr2int, int2hexstr, hexstr2bytes
from ..utils.errors import CotaError, ConfigError


DEFAULT_FEE = 1000
CELL_DATA_VERSION_SIZE = 1

# witness input type action bytes
COTA_ACTION_MINT = "0x02"
COTA_ACTION_TRANSFER = "0x06"


def _cell_dep(conf):
    return {
        "outPoint": {"txHash": conf["outPoint"]["txHash"], "index": conf["outPoint"]["index"]},
        "depType": snake2camel(conf.get("depType", "dep_group")),
    }


class Service(object):


    def __init__(self, collector, aggregator, cota_type_script, cota_cell_dep, fee=DEFAULT_FEE, secp256k1_dep=None):
        self.collector = collector
        self.aggregator = aggregator
        self.cota_type_script = cota_type_script
        self.cota_cell_dep = cota_cell_dep
        self.secp256k1_dep = secp256k1_dep
        self.fee = fee


    @classmethod
    def from_config(cls, config):
        try:
            timeout = config.get("timeout", 180)
            collector = Collector(config["ckbNodeUrl"], config["ckbIndexerUrl"], timeout=timeout)
            aggregator = Aggregator(config["registryUrl"], config["cotaUrl"], timeout=timeout)
            secp256k1_dep = _cell_dep(config["secp256k1Dep"]) if config.get("secp256k1Dep") else None
            return cls(
                collector,
                aggregator,
                dict(config["cotaTypeScript"]),
                _cell_dep(config["cotaCellDep"]),
                fee=int(config.get("fee", DEFAULT_FEE)),
                secp256k1_dep=secp256k1_dep,
            )
        except KeyError as e:
            raise ConfigError(f"Network Config Missing[{e.args[0]}]") from e


    async def get_cota_cell(self, lock):
        cells = await self.collector.get_cells(lock, self.cota_type_script)
        if not cells:
            raise CotaError(f"Cota Cell Not Found[{lock['args']}]")
        return cells[0]


    def cota_output(self, cota_cell, fee=None):
        output = dict(cota_cell["output"])
        capacity = hexstr2int(output["capacity"]) - (self.fee if fee is None else fee)
        if capacity <= 0:
            raise CotaError(f"Cota Cell Capacity Not Enough[{output['capacity']}]")
        output["capacity"] = int2hexstr(capacity)
        return output


    def cota_output_data(self, cota_cell, smt_root_hash):
        data = hexstr2bytes(cota_cell.get("outputData") or "0x00")
        version = data[:CELL_DATA_VERSION_SIZE].hex() or "00"
        root = smt_root_hash[2:] if smt_root_hash.startswith("0x") else smt_root_hash
        logger.debug(f"Cota Cell Data Version[{version}] Root[{root}]")
        return f"0x{version}{root}"
