"""Base mapper/parser interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime

from dexparser.eventlog.finder import LogFinder
from dexparser.eventlog.types import LogEntry, Match
from dexparser.eventlog.utils import result_to_item_map
from dexparser.exceptions import StructuralMismatchError
from dexparser.parser.utils.types import ParsedTx


class BaseMapper(ABC):
    """Minimal interface all mappers must implement."""

    MAPPER_NAME: str = "BaseMapper"

    def __init__(self, post_event_attr_len: int = 0) -> None:
        # trailing attributes appended to every sub-event (msg_index on SDK v0.50 chains)
        self.post_event_attr_len = post_event_attr_len

    @abstractmethod
    def map(self, match: Match) -> list[ParsedTx]:
        """Turn one match into zero or more ParsedTx. Empty list = not pool-relevant."""

    def check_result(self, match: Match, action: str, expected_len: int) -> None:
        """Validate match length and that every captured value is present."""
        want = expected_len + self.post_event_attr_len
        if len(match) != want:
            raise StructuralMismatchError(action, f"{self.MAPPER_NAME} found({len(match)}) expected({want})")
        for attr in match:
            if attr.value == "":
                raise StructuralMismatchError(action, f"{self.MAPPER_NAME} empty value for key({attr.key})")

    def to_fields(self, match: Match, action: str) -> dict[str, str]:
        """Key -> value view of a match. Duplicated keys are a structural error."""
        try:
            items = result_to_item_map(match)
        except ValueError as e:
            raise StructuralMismatchError(action, f"{self.MAPPER_NAME} {e}") from e
        return {key: attr.value for key, attr in items.items()}


class Parser:
    """Finder + Mapper. Stamps hash/timestamp on every produced record."""

    def __init__(self, finder: LogFinder, mapper: BaseMapper) -> None:
        self.finder = finder
        self.mapper = mapper

    def parse(self, logs: Sequence[LogEntry], hash: str = "", timestamp: datetime | None = None) -> list[ParsedTx]:
        txs: list[ParsedTx] = []
        for match in self.finder.find_from_logs(logs):
            for tx in self.mapper.map(match):
                tx.hash = hash
                tx.timestamp = timestamp
                txs.append(tx)
        return txs
