"""Declarative rules describing an ordered attribute sub-sequence."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from dexparser.eventlog.types import Attribute
from dexparser.exceptions import ConfigError

Filter = None | str | Callable[[str], bool]


@dataclass(frozen=True)
class RuleItem:
    """One position of a rule: attribute key plus a value filter.

    filter semantics:
        None      -> any value
        str       -> exact equality
        callable  -> predicate on the value
    """

    key: str
    filter: Filter = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ConfigError("rule item key cannot be empty")
        if self.filter is not None and not isinstance(self.filter, str) and not callable(self.filter):
            raise ConfigError(f"rule item({self.key}) filter must be None, str or callable")

    def match(self, attr: Attribute) -> bool:
        if attr.key != self.key:
            return False
        if self.filter is None:
            return True
        if isinstance(self.filter, str):
            return attr.value == self.filter
        return bool(self.filter(attr.value))


@dataclass(frozen=True)
class Rule:
    """Immutable rule. `until` marks the key that starts a new sub-event."""

    type: str
    items: tuple[RuleItem, ...]
    until: str | None = None

    def __post_init__(self) -> None:
        if not self.items:
            raise ConfigError("rule must have at least one item")


def one_of(*values: str) -> Callable[[str], bool]:
    allowed = frozenset(values)
    return lambda v: v in allowed


def member_of(addresses: Iterable[str]) -> Callable[[str], bool]:
    """Filter accepting only addresses in a snapshot of the given set."""
    snapshot = frozenset(addresses)
    return lambda v: v in snapshot
