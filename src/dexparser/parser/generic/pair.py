"""Pair action mapping: swap / provide_liquidity / withdraw_liquidity.

PairActionMapper resolves the pair and validates the match shape, then hands the
fields to a PairActionStrategy. Chain versions subclass the strategy and override
only the actions whose semantics differ.
"""

from dexparser.domain.enums import TxType
from dexparser.eventlog.types import Match
from dexparser.eventlog.utils import sort_segments
from dexparser.exceptions import StructuralMismatchError, UnknownPairError
from dexparser.parser.generic.base import BaseMapper
from dexparser.parser.utils.amounts import negate, order_by_pair, parse_assets, sub, to_int
from dexparser.parser.utils.types import Asset, Pair, PairRegistry, ParsedTx
from dexparser.rules.common import PROVIDE_ACTION, SWAP_ACTION, WITHDRAW_ACTION, ActionLayout


class PairActionStrategy:
    """Default semantics shared by every fork.

    Handler method signature:
        def _handle_xxx(self, fields, pair) -> ParsedTx
    """

    STRATEGY_NAME: str = "default"
    ACTION_HANDLERS: dict[str, str] = {
        SWAP_ACTION: "_handle_swap",
        PROVIDE_ACTION: "_handle_provide",
        WITHDRAW_ACTION: "_handle_withdraw",
    }

    def handle(self, action: str, fields: dict[str, str], pair: Pair) -> ParsedTx:
        handler_name = self.ACTION_HANDLERS.get(action)
        if handler_name is None:
            raise StructuralMismatchError(
                action, f"{self.STRATEGY_NAME} strategy: action must be one of {sorted(self.ACTION_HANDLERS)}"
            )
        return getattr(self, handler_name)(fields, pair)

    @staticmethod
    def _empty_assets(pair: Pair) -> list[Asset]:
        return [Asset(addr=pair.assets[0]), Asset(addr=pair.assets[1])]

    @staticmethod
    def _swap_slots(fields: dict[str, str], pair: Pair) -> tuple[int, int]:
        offer_idx = 1 if fields["offer_asset"] == pair.assets[1] else 0
        return offer_idx, 1 - offer_idx

    def _handle_swap(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        offer_idx, return_idx = self._swap_slots(fields, pair)
        assets = self._empty_assets(pair)
        assets[offer_idx].amount = str(to_int(fields["offer_amount"]))
        assets[return_idx].amount = negate(fields["return_amount"])

        return ParsedTx(
            type=TxType.SWAP,
            sender=fields.get("sender", ""),
            contract_addr=pair.contract_addr,
            assets=assets,
            commission_amount=fields["commission_amount"],
        )

    def _handle_provide(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        assets = order_by_pair(parse_assets(fields["assets"]), pair.assets)
        return ParsedTx(
            type=TxType.PROVIDE,
            sender=fields.get("sender", ""),
            contract_addr=pair.contract_addr,
            assets=assets,
            lp_addr=pair.lp_addr,
            lp_amount=fields["share"],
        )

    def _refunded(self, refund_assets: str, pair: Pair) -> list[Asset]:
        """Withdrawn legs, negated and in pair order."""
        refunded = parse_assets(refund_assets)
        return order_by_pair([Asset(addr=a.addr, amount=negate(a.amount)) for a in refunded], pair.assets)

    def _handle_withdraw(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        return ParsedTx(
            type=TxType.WITHDRAW,
            sender=fields.get("sender", ""),
            contract_addr=pair.contract_addr,
            assets=self._refunded(fields["refund_assets"], pair),
            lp_addr=pair.lp_addr,
            lp_amount=fields["withdrawn_share"],
        )


class RefundReconcilingStrategy(PairActionStrategy):
    """v2 pairs emit `refund_assets` on provide.

    CW20 legs are pulled from the provider once, already net of the refund, while
    the event reports the requested amount. Native legs are refunded separately
    by a bank transfer, so they stay as reported.
    """

    STRATEGY_NAME = "refund_reconciling"

    def __init__(self, cw20_prefix: str) -> None:
        self.cw20_prefix = cw20_prefix

    def is_cw20(self, addr: str) -> bool:
        return addr.startswith(self.cw20_prefix)

    def _handle_provide(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        provided = order_by_pair(parse_assets(fields["assets"]), pair.assets)
        refunded = order_by_pair(parse_assets(fields["refund_assets"]), pair.assets)

        applied: list[Asset] = []
        for p, r in zip(provided, refunded):
            if p.addr != r.addr:
                raise StructuralMismatchError(PROVIDE_ACTION, "provide and refund assets must be in the same order")
            if self.is_cw20(p.addr):
                applied.append(Asset(addr=p.addr, amount=sub(p.amount, r.amount)))
            else:
                applied.append(p)

        return ParsedTx(
            type=TxType.PROVIDE,
            sender=fields.get("sender", ""),
            contract_addr=pair.contract_addr,
            assets=applied,
            lp_addr=pair.lp_addr,
            lp_amount=fields["share"],
            refund_assets=refunded,
        )


class PairActionMapper(BaseMapper):
    """Match of a pair contract sub-event -> one ParsedTx."""

    MAPPER_NAME = "PairActionMapper"

    def __init__(
        self,
        strategy: PairActionStrategy,
        layout: ActionLayout,
        registry: PairRegistry,
        post_event_attr_len: int = 0,
    ) -> None:
        super().__init__(post_event_attr_len)
        self.strategy = strategy
        self.layout = layout
        self.registry = registry

    def map(self, match: Match) -> list[ParsedTx]:
        if len(match) < 2:
            raise StructuralMismatchError("pair", f"results length must be at least 2, found({len(match)})")
        if self.layout.sort_segments:
            match = sort_segments(match, self.layout.contract_key)

        contract_addr, action = match[0].value, match[1].value
        pair = self.registry.get(contract_addr)
        if pair is None:
            raise UnknownPairError(contract_addr)

        if action not in self.layout.fields:
            raise StructuralMismatchError(action, f"action must be one of {sorted(self.layout.fields)}")
        fields = self.to_fields(match, action)
        self.check_result(match, action, self.layout.expected_len(action, fields))
        for key in self.layout.fields[action]:
            if key not in fields:
                raise StructuralMismatchError(action, f"missing key({key})")

        return [self.strategy.handle(action, fields, pair)]
