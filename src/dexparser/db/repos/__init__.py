from dexparser.db.repos.pair_repo import PairRepo
from dexparser.db.repos.parse_error_repo import ParseErrorRepo

__all__ = ["PairRepo", "ParseErrorRepo"]
