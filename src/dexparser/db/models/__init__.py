from dexparser.db.models.pair import PairRecord
from dexparser.db.models.pair_validation_exception import PairValidationException
from dexparser.db.models.parse_error_record import ParseErrorRecord
from dexparser.db.models.parsed_tx import ParsedTxRecord
from dexparser.db.models.pool_info import PoolInfoRecord
from dexparser.db.models.synced_height import SyncedHeight

__all__ = [
    "PairRecord",
    "PairValidationException",
    "ParseErrorRecord",
    "ParsedTxRecord",
    "PoolInfoRecord",
    "SyncedHeight",
]
