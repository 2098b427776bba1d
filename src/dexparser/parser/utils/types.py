"""Core data types for the DEX parser."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from dexparser.domain.enums import TxType
from dexparser.eventlog.types import LogEntry


class Asset(BaseModel):
    """One leg of a pool movement."""

    addr: str = ""
    amount: str = ""  # signed base-unit integer; "" = leg untouched


class Pair(BaseModel):
    """AMM pool. `assets` order is fixed at creation."""

    contract_addr: str
    lp_addr: str = ""
    assets: list[str]


# contract_addr -> Pair, owned by one block/transaction pass
PairRegistry = dict[str, Pair]


class ParsedTx(BaseModel):
    """Canonical record produced from one match."""

    type: TxType
    hash: str = ""
    timestamp: datetime | None = None
    sender: str = ""
    contract_addr: str = ""
    assets: list[Asset] = [Asset(), Asset()]
    lp_addr: str = ""
    lp_amount: str = ""
    commission_amount: str = ""
    tax_amount: Asset | None = None  # columbus swaps
    refund_assets: list[Asset] | None = None  # v2 provide only
    meta: dict[str, Any] = {}


class RawTx(BaseModel):
    """Transaction as delivered by the source store."""

    hash: str
    timestamp: datetime | None = None
    sender: str = ""
    log_entries: list[LogEntry] = []


class PoolInfo(BaseModel):
    """Pool reserves + LP supply at a height."""

    contract_addr: str
    assets: list[Asset]
    total_share: str = "0"
