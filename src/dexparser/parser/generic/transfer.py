"""Transfer mappers: native bank transfers and CW20 `transfer`/`transfer_from` into or out of a pair.

A transfer is pool-relevant only when exactly one side is a known pair.
Tokens the pair doesn't hold are kept in `meta[token]` and the pair is
flagged so pool validation can tolerate the drift.
"""

from collections.abc import Iterable

from dexparser.domain.enums import TxType
from dexparser.eventlog.types import Match
from dexparser.eventlog.utils import sort_segments
from dexparser.exceptions import AmbiguousTransferError, StructuralMismatchError
from dexparser.parser.generic.base import BaseMapper
from dexparser.parser.utils.amounts import negate, parse_coins
from dexparser.parser.utils.types import Asset, Pair, PairRegistry, ParsedTx
from dexparser.rules.common import TRANSFER_KEYS, ActionLayout


def pair_by(registry: PairRegistry, sender: str, recipient: str) -> tuple[Pair, bool] | None:
    """Return (pair, is_outflow) for the pair side of a transfer, None when neither side is a pair."""
    from_pair = registry.get(sender)
    to_pair = registry.get(recipient)
    if from_pair is not None and to_pair is not None:
        raise AmbiguousTransferError(sender, recipient)
    if from_pair is not None:
        return from_pair, True
    if to_pair is not None:
        return to_pair, False
    return None


class _TransferMapperMixin(BaseMapper):
    def __init__(self, registry: PairRegistry, flagged: set[str] | None = None, post_event_attr_len: int = 0) -> None:
        super().__init__(post_event_attr_len)
        self.registry = registry
        self.flagged = flagged if flagged is not None else set()

    def _to_parsed_tx(self, pair: Pair, sender: str, recipient: str, legs: Iterable[Asset], outflow: bool) -> ParsedTx:
        assets = [Asset(addr=addr) for addr in pair.assets]
        meta: dict = {"recipient": recipient}
        for leg in legs:
            amount = negate(leg.amount) if outflow else leg.amount
            if leg.addr in pair.assets:
                assets[pair.assets.index(leg.addr)] = Asset(addr=leg.addr, amount=amount)
            else:
                meta[leg.addr] = amount
                self.flagged.add(pair.contract_addr)

        return ParsedTx(
            type=TxType.TRANSFER,
            sender=sender,
            contract_addr=pair.contract_addr,
            assets=assets,
            meta=meta,
        )


class TransferMapper(_TransferMapperMixin):
    """Native `transfer` events: recipient / sender / amount (multi-coin)."""

    MAPPER_NAME = "TransferMapper"

    def map(self, match: Match) -> list[ParsedTx]:
        self.check_result(match, TxType.TRANSFER.value, len(TRANSFER_KEYS))
        fields = self.to_fields(match, TxType.TRANSFER.value)
        sender, recipient = fields["sender"], fields["recipient"]

        found = pair_by(self.registry, sender, recipient)
        if found is None:
            return []
        pair, outflow = found
        return [self._to_parsed_tx(pair, sender, recipient, parse_coins(fields["amount"]), outflow)]


class WasmTransferMapper(_TransferMapperMixin):
    """CW20 `transfer` / `transfer_from` sub-events. The token is the emitting contract."""

    MAPPER_NAME = "WasmTransferMapper"

    def __init__(
        self,
        layout: ActionLayout,
        registry: PairRegistry,
        flagged: set[str] | None = None,
        post_event_attr_len: int = 0,
    ) -> None:
        super().__init__(registry, flagged, post_event_attr_len)
        self.layout = layout

    def map(self, match: Match) -> list[ParsedTx]:
        if self.layout.sort_segments:
            match = sort_segments(match, self.layout.contract_key)

        fields = self.to_fields(match, TxType.TRANSFER.value)
        action = fields.get("action", "")
        if action not in self.layout.fields:
            raise StructuralMismatchError(action, f"expected action in {sorted(self.layout.fields)}")
        self.check_result(match, action, self.layout.expected_len(action, fields))
        for key in self.layout.fields[action]:
            if key not in fields:
                raise StructuralMismatchError(action, f"missing key({key})")

        sender, recipient = fields["from"], fields["to"]
        found = pair_by(self.registry, sender, recipient)
        if found is None:
            return []
        pair, outflow = found

        token = fields[self.layout.contract_key]
        leg = Asset(addr=token, amount=fields["amount"])
        return [self._to_parsed_tx(pair, sender, recipient, [leg], outflow)]
