"""InitialProvideMapper: LP minted to the pair itself on its first provision."""

from dexparser.domain.enums import TxType
from dexparser.eventlog.types import Match
from dexparser.parser.generic.base import BaseMapper
from dexparser.parser.utils.types import ParsedTx
from dexparser.rules.common import WASM_CONTRACT_KEY

INITIAL_PROVIDE_MATCHED_LEN = 4


class InitialProvideMapper(BaseMapper):
    MAPPER_NAME = "InitialProvideMapper"

    def map(self, match: Match) -> list[ParsedTx]:
        self.check_result(match, TxType.INITIAL_PROVIDE.value, INITIAL_PROVIDE_MATCHED_LEN)
        fields = self.to_fields(match, TxType.INITIAL_PROVIDE.value)
        return [ParsedTx(
            type=TxType.INITIAL_PROVIDE,
            contract_addr=fields["to"],
            lp_addr=fields[WASM_CONTRACT_KEY],
            lp_amount=fields["amount"],
        )]
