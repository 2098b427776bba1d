"""Abstract source of raw chain data for the runner."""

from abc import ABC, abstractmethod

from dexparser.parser.utils.types import Pair, PoolInfo, RawTx


class SourceDataStore(ABC):
    """Strategy interface for reading blocks and pool state from a node."""

    @abstractmethod
    async def get_source_synced_height(self) -> int:
        """Latest height the node has."""

    @abstractmethod
    async def get_source_txs(self, height: int) -> list[RawTx]:
        """Successful txs of a block, in block order, with logs flattened per event type."""

    @abstractmethod
    async def get_pool_infos(self, height: int, pairs: list[Pair]) -> list[PoolInfo]:
        """Reserves and LP supply of every given pair at `height`."""
