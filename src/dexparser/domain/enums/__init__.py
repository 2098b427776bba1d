from dexparser.domain.enums.dex_type import DexType
from dexparser.domain.enums.log_type import LogType
from dexparser.domain.enums.parse_error import ParseErrorType
from dexparser.domain.enums.tx_type import TxType

__all__ = [
    "DexType",
    "LogType",
    "ParseErrorType",
    "TxType",
]
