from enum import Enum


class TxType(str, Enum):
    """Canonical record kinds produced from AMM event logs."""

    CREATE_PAIR = "create_pair"
    SWAP = "swap"
    PROVIDE = "provide"
    INITIAL_PROVIDE = "initial_provide"
    WITHDRAW = "withdraw"
    TRANSFER = "transfer"
