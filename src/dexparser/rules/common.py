"""Rule templates shared by every DEX fork.

Each factory returns a fresh immutable Rule; address filters are baked in from
the pair set passed at call time.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from dexparser.domain.enums import LogType
from dexparser.eventlog.rule import Rule, RuleItem, member_of, one_of
from dexparser.exceptions import ConfigError

WASM_CONTRACT_KEY = "_contract_address"
COL4_CONTRACT_KEY = "contract_address"

SWAP_ACTION = "swap"
PROVIDE_ACTION = "provide_liquidity"
WITHDRAW_ACTION = "withdraw_liquidity"
PAIR_ACTIONS = (SWAP_ACTION, PROVIDE_ACTION, WITHDRAW_ACTION)

WASM_TRANSFER_ACTION = "transfer"
WASM_TRANSFER_FROM_ACTION = "transfer_from"
MINT_ACTION = "mint"

# Attribute keys after the (contract, action) prefix, per action.
SWAP_FIELDS = (
    "ask_asset", "commission_amount", "offer_amount", "offer_asset",
    "receiver", "return_amount", "sender", "spread_amount",
)
PROVIDE_FIELDS = ("assets", "receiver", "sender", "share")
PROVIDE_V2_FIELDS = ("assets", "receiver", "refund_assets", "sender", "share")
WITHDRAW_FIELDS = ("refund_assets", "sender", "withdrawn_share")

WASM_TRANSFER_FIELDS = ("amount", "from", "to")
WASM_TRANSFER_FROM_FIELDS = ("amount", "by", "from", "to")

TRANSFER_KEYS = ("recipient", "sender", "amount")
SORTED_TRANSFER_KEYS = ("amount", "recipient", "sender")


@dataclass(frozen=True)
class ActionLayout:
    """Expected attribute keys of an `until`-extended match, by action."""

    contract_key: str
    fields: dict[str, tuple[str, ...]] = field(default_factory=dict)
    # keys some deployments emit only sometimes (columbus-5 tax, refund)
    optional: dict[str, tuple[str, ...]] = field(default_factory=dict)
    sort_segments: bool = False

    def expected_len(self, action: str, present: Iterable[str] = ()) -> int:
        # contract + action + fields
        extra = set(self.optional.get(action, ())) & set(present)
        return 2 + len(self.fields[action]) + len(extra)


PAIR_LAYOUT = ActionLayout(
    contract_key=WASM_CONTRACT_KEY,
    fields={SWAP_ACTION: SWAP_FIELDS, PROVIDE_ACTION: PROVIDE_FIELDS, WITHDRAW_ACTION: WITHDRAW_FIELDS},
)
PAIR_V2_LAYOUT = ActionLayout(
    contract_key=WASM_CONTRACT_KEY,
    fields={SWAP_ACTION: SWAP_FIELDS, PROVIDE_ACTION: PROVIDE_V2_FIELDS, WITHDRAW_ACTION: WITHDRAW_FIELDS},
)
WASM_TRANSFER_LAYOUT = ActionLayout(
    contract_key=WASM_CONTRACT_KEY,
    fields={WASM_TRANSFER_ACTION: WASM_TRANSFER_FIELDS, WASM_TRANSFER_FROM_ACTION: WASM_TRANSFER_FROM_FIELDS},
)

# dezswap / starfleit emit attributes in arbitrary order within each sub-event
SORTED_PAIR_LAYOUT = replace(PAIR_LAYOUT, sort_segments=True)
SORTED_PAIR_V2_LAYOUT = replace(PAIR_V2_LAYOUT, sort_segments=True)
SORTED_WASM_TRANSFER_LAYOUT = replace(WASM_TRANSFER_LAYOUT, sort_segments=True)


def create_pair_rule(factory_address: str | None, log_type: str = LogType.WASM, contract_key: str = WASM_CONTRACT_KEY) -> Rule:
    if not factory_address:
        raise ConfigError("no factory address")
    return Rule(type=log_type, items=(
        RuleItem(contract_key, factory_address),
        RuleItem("action", "create_pair"),
        RuleItem("pair"),
        RuleItem(contract_key),
        RuleItem("liquidity_token_addr"),
    ))


def pair_common_rule(pairs: Iterable[str], log_type: str = LogType.WASM, contract_key: str = WASM_CONTRACT_KEY) -> Rule:
    return Rule(type=log_type, until=contract_key, items=(
        RuleItem(contract_key, member_of(pairs)),
        RuleItem("action", one_of(*PAIR_ACTIONS)),
    ))


def wasm_transfer_rule(log_type: str = LogType.WASM, contract_key: str = WASM_CONTRACT_KEY) -> Rule:
    return Rule(type=log_type, until=contract_key, items=(
        RuleItem(contract_key),
        RuleItem("action", one_of(WASM_TRANSFER_ACTION, WASM_TRANSFER_FROM_ACTION)),
    ))


def transfer_rule(keys: tuple[str, ...] = TRANSFER_KEYS) -> Rule:
    return Rule(type=LogType.TRANSFER, items=tuple(RuleItem(k) for k in keys))


def initial_provide_rule(pairs: Iterable[str]) -> Rule:
    # LP for the first provision is minted to the pair itself
    return Rule(type=LogType.WASM, items=(
        RuleItem(WASM_CONTRACT_KEY),
        RuleItem("action", MINT_ACTION),
        RuleItem("amount"),
        RuleItem("to", member_of(pairs)),
    ))
