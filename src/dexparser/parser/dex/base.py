"""DexProfile: per (protocol, chain version) recipe for building parsers.

Subclasses define:
    PROTOCOL: DexType of the deployment
    LOG_TYPE / CONTRACT_KEY: where contract events live and how the contract is keyed
    CW20_PREFIX: bech32 prefix of CW20 token contracts on the chain
    TRANSFER_SORT_KEYS: set when native `transfer` attributes arrive unordered
"""

from abc import ABC, abstractmethod

from dexparser.domain.enums import DexType, LogType
from dexparser.eventlog.finder import LogFinder
from dexparser.eventlog.types import LogEntry
from dexparser.eventlog.utils import sort_attributes
from dexparser.exceptions import ConfigError, UnsupportedChainError
from dexparser.parser.generic.base import Parser
from dexparser.parser.generic.factory import CreatePairMapper
from dexparser.parser.generic.initial_provide import InitialProvideMapper
from dexparser.parser.generic.pair import PairActionMapper, PairActionStrategy, RefundReconcilingStrategy
from dexparser.parser.generic.transfer import TransferMapper, WasmTransferMapper
from dexparser.parser.utils.types import PairRegistry
from dexparser.rules.common import (
    PAIR_LAYOUT,
    SORTED_PAIR_LAYOUT,
    SORTED_PAIR_V2_LAYOUT,
    SORTED_WASM_TRANSFER_LAYOUT,
    TRANSFER_KEYS,
    WASM_CONTRACT_KEY,
    WASM_TRANSFER_LAYOUT,
    ActionLayout,
    create_pair_rule,
    initial_provide_rule,
    pair_common_rule,
    transfer_rule,
    wasm_transfer_rule,
)


class DexProfile(ABC):
    """Builds the five parsers for one deployment, bound to a registry snapshot."""

    PROTOCOL: DexType = DexType.TERRASWAP
    LOG_TYPE: str = LogType.WASM
    CONTRACT_KEY: str = WASM_CONTRACT_KEY
    CW20_PREFIX: str = ""
    TRANSFER_SORT_KEYS: tuple[str, ...] | None = None
    HAS_INITIAL_PROVIDE: bool = True

    def __init__(self, chain_id: str, factory_address: str | None = None) -> None:
        self.chain_id = chain_id
        self.factory_address = factory_address or self.default_factory_address()
        if not self.factory_address:
            raise ConfigError(f"no {self.PROTOCOL.value} factory address for chain({chain_id})")

    @property
    def name(self) -> str:
        return f"{self.PROTOCOL.value}/{type(self).__name__}"

    @abstractmethod
    def default_factory_address(self) -> str | None:
        """Factory contract of the chain when none is configured."""

    @abstractmethod
    def pair_strategy(self, height: int) -> PairActionStrategy:
        """Pair action semantics in force at `height`."""

    def post_event_attr_len(self, height: int) -> int:
        return 0

    def pair_layout(self, height: int) -> ActionLayout:
        return PAIR_LAYOUT

    def wasm_transfer_layout(self, height: int) -> ActionLayout:
        return WASM_TRANSFER_LAYOUT

    # -- parsers --

    def create_pair_parser(self, height: int) -> Parser:
        rule = create_pair_rule(self.factory_address, log_type=self.LOG_TYPE, contract_key=self.CONTRACT_KEY)
        return Parser(LogFinder(rule), CreatePairMapper())

    def pair_action_parser(self, registry: PairRegistry, height: int) -> Parser:
        rule = pair_common_rule(registry.keys(), log_type=self.LOG_TYPE, contract_key=self.CONTRACT_KEY)
        mapper = PairActionMapper(
            self.pair_strategy(height),
            self.pair_layout(height),
            registry,
            post_event_attr_len=self.post_event_attr_len(height),
        )
        return Parser(LogFinder(rule), mapper)

    def initial_provide_parser(self, registry: PairRegistry, height: int) -> Parser | None:
        if not self.HAS_INITIAL_PROVIDE:
            return None
        return Parser(LogFinder(initial_provide_rule(registry.keys())), InitialProvideMapper())

    def wasm_transfer_parser(self, registry: PairRegistry, height: int, flagged: set[str]) -> Parser:
        rule = wasm_transfer_rule(log_type=self.LOG_TYPE, contract_key=self.CONTRACT_KEY)
        mapper = WasmTransferMapper(
            self.wasm_transfer_layout(height),
            registry,
            flagged,
            post_event_attr_len=self.post_event_attr_len(height),
        )
        return Parser(LogFinder(rule), mapper)

    def transfer_parser(self, registry: PairRegistry, height: int, flagged: set[str]) -> Parser:
        rule = transfer_rule(self.TRANSFER_SORT_KEYS or TRANSFER_KEYS)
        return Parser(LogFinder(rule), TransferMapper(registry, flagged))

    def prepare_entry(self, entry: LogEntry) -> LogEntry:
        """Normalize an entry before the transfer parser sees it."""
        if self.TRANSFER_SORT_KEYS and entry.type == LogType.TRANSFER:
            return LogEntry(type=entry.type, attributes=sort_attributes(entry.attributes, self.TRANSFER_SORT_KEYS))
        return entry


class HeightVersionedProfile(DexProfile):
    """Pairs upgraded in place at a chain-specific height (v2 adds `refund_assets` on provide).

    Subclasses define:
        V2_HEIGHT: chain id prefix -> first v2 height
        FACTORY_ADDRESS: chain id prefix -> factory contract
    """

    V2_HEIGHT: dict[str, int] = {}
    FACTORY_ADDRESS: dict[str, str] = {}

    def __init__(self, chain_id: str, factory_address: str | None = None) -> None:
        self.prefix = chain_id.split("-")[0]
        if self.prefix not in self.V2_HEIGHT:
            raise UnsupportedChainError(chain_id)
        super().__init__(chain_id, factory_address)

    def default_factory_address(self) -> str | None:
        return self.FACTORY_ADDRESS.get(self.prefix)

    def is_v2(self, height: int) -> bool:
        return height >= self.V2_HEIGHT[self.prefix]

    def pair_strategy(self, height: int) -> PairActionStrategy:
        if self.is_v2(height):
            return RefundReconcilingStrategy(self.CW20_PREFIX)
        return PairActionStrategy()

    def pair_layout(self, height: int) -> ActionLayout:
        return SORTED_PAIR_V2_LAYOUT if self.is_v2(height) else SORTED_PAIR_LAYOUT

    def wasm_transfer_layout(self, height: int) -> ActionLayout:
        return SORTED_WASM_TRANSFER_LAYOUT
