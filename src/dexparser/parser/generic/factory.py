"""CreatePairMapper: factory `create_pair` event -> new Pair record."""

from dexparser.domain.enums import TxType
from dexparser.eventlog.types import Match
from dexparser.exceptions import StructuralMismatchError
from dexparser.parser.generic.base import BaseMapper
from dexparser.parser.utils.types import Asset, ParsedTx

CREATE_PAIR_MATCHED_LEN = 5
PAIR_IDX = 2
PAIR_ADDR_IDX = 3
LP_ADDR_IDX = 4


class CreatePairMapper(BaseMapper):
    MAPPER_NAME = "CreatePairMapper"

    def map(self, match: Match) -> list[ParsedTx]:
        self.check_result(match, TxType.CREATE_PAIR.value, CREATE_PAIR_MATCHED_LEN)

        assets = match[PAIR_IDX].value.split("-")
        if len(assets) != 2 or not all(assets):
            raise StructuralMismatchError(TxType.CREATE_PAIR.value, f"expected 2 assets, got pair({match[PAIR_IDX].value})")

        return [ParsedTx(
            type=TxType.CREATE_PAIR,
            contract_addr=match[PAIR_ADDR_IDX].value,
            assets=[Asset(addr=assets[0]), Asset(addr=assets[1])],
            lp_addr=match[LP_ADDR_IDX].value,
        )]
