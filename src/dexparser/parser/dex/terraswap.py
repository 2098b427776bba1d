"""Terraswap profiles: phoenix/pisco, columbus-4 (v1) and columbus-5 (v2)."""

from decimal import Decimal

from dexparser.domain.enums import DexType, LogType
from dexparser.parser.dex.base import DexProfile
from dexparser.parser.generic.pair import PairActionStrategy, RefundReconcilingStrategy
from dexparser.parser.utils.amounts import mul_truncate, negate, order_by_pair, parse_assets, to_int
from dexparser.parser.utils.types import Asset, Pair, ParsedTx
from dexparser.rules import terraswap as ts
from dexparser.rules.common import (
    COL4_CONTRACT_KEY,
    PAIR_LAYOUT,
    PROVIDE_ACTION,
    SORTED_TRANSFER_KEYS,
    SWAP_ACTION,
    ActionLayout,
)

# withdrawals on columbus-4 were paid out net of a protocol fee the event does not report
COLUMBUS_V1_WITHDRAW_FACTOR = Decimal("0.9939285487078243")

COLUMBUS_V2_PAIR_LAYOUT = ActionLayout(
    contract_key=PAIR_LAYOUT.contract_key,
    fields=PAIR_LAYOUT.fields,
    optional={SWAP_ACTION: ("tax_amount",), PROVIDE_ACTION: ("refund_assets",)},
)


class _TaxedSwapMixin:
    """Swap whose return leg also paid a stability tax, reported as `tax_amount`."""

    def _handle_swap(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        tx = super()._handle_swap(fields, pair)
        tax = fields.get("tax_amount")
        if tax is None:
            return tx

        _, return_idx = self._swap_slots(fields, pair)
        leg = tx.assets[return_idx]
        leg.amount = str(-(to_int(fields["return_amount"]) + to_int(tax)))
        tx.tax_amount = Asset(addr=leg.addr, amount=tax)
        return tx


class ColumbusV1Strategy(_TaxedSwapMixin, PairActionStrategy):
    STRATEGY_NAME = "columbus_v1"

    def _refunded(self, refund_assets: str, pair: Pair) -> list[Asset]:
        refunded = parse_assets(refund_assets)
        legs = [Asset(addr=a.addr, amount=negate(mul_truncate(a.amount, COLUMBUS_V1_WITHDRAW_FACTOR))) for a in refunded]
        return order_by_pair(legs, pair.assets)


class ColumbusV2Strategy(_TaxedSwapMixin, RefundReconcilingStrategy):
    """columbus-5 pairs: tax on some swaps, refund_assets on newer provides."""

    STRATEGY_NAME = "columbus_v2"

    def _handle_provide(self, fields: dict[str, str], pair: Pair) -> ParsedTx:
        if "refund_assets" not in fields:
            return PairActionStrategy._handle_provide(self, fields, pair)
        return super()._handle_provide(fields, pair)


class PhoenixProfile(DexProfile):
    """Terra 2 mainnet (phoenix) and testnet (pisco)."""

    PROTOCOL = DexType.TERRASWAP
    CW20_PREFIX = ts.CW20_PREFIX
    TRANSFER_SORT_KEYS = SORTED_TRANSFER_KEYS

    def default_factory_address(self) -> str | None:
        return ts.factory_address_of(self.chain_id)

    def pair_strategy(self, height: int) -> PairActionStrategy:
        return PairActionStrategy()


class ColumbusV1Profile(DexProfile):
    """columbus-4: contract events are `from_contract` keyed by `contract_address`."""

    PROTOCOL = DexType.TERRASWAP
    LOG_TYPE = LogType.FROM_CONTRACT
    CONTRACT_KEY = COL4_CONTRACT_KEY
    CW20_PREFIX = ts.CW20_PREFIX
    HAS_INITIAL_PROVIDE = False

    def default_factory_address(self) -> str | None:
        return ts.factory_address_of(self.chain_id)

    def pair_strategy(self, height: int) -> PairActionStrategy:
        return ColumbusV1Strategy()

    def pair_layout(self, height: int) -> ActionLayout:
        return ts.COL4_PAIR_LAYOUT

    def wasm_transfer_layout(self, height: int) -> ActionLayout:
        return ts.COL4_WASM_TRANSFER_LAYOUT


class ColumbusV2Profile(DexProfile):
    """columbus-5 (Terra Classic after the wasm upgrade)."""

    PROTOCOL = DexType.TERRASWAP
    CW20_PREFIX = ts.CW20_PREFIX
    TRANSFER_SORT_KEYS = SORTED_TRANSFER_KEYS

    def default_factory_address(self) -> str | None:
        return ts.factory_address_of(self.chain_id)

    def pair_strategy(self, height: int) -> PairActionStrategy:
        return ColumbusV2Strategy(self.CW20_PREFIX)

    def pair_layout(self, height: int) -> ActionLayout:
        return COLUMBUS_V2_PAIR_LAYOUT


def terraswap_profile(chain_id: str, factory_address: str | None = None) -> DexProfile:
    if chain_id == ts.COLUMBUS_V1_CHAIN_ID:
        return ColumbusV1Profile(chain_id, factory_address)
    if chain_id == ts.COLUMBUS_V2_CHAIN_ID:
        return ColumbusV2Profile(chain_id, factory_address)
    return PhoenixProfile(chain_id, factory_address)
