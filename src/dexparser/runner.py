"""DexRunner: drives the parser block by block from the local synced height to the node's height."""

import logging
import traceback

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from dexparser.db.repos.pair_repo import PairRepo
from dexparser.db.repos.parse_error_repo import ParseErrorRepo
from dexparser.domain.enums import ParseErrorType, TxType
from dexparser.exceptions import DexParserError, PoolValidationError, RemoteHeightError
from dexparser.infra.source.base import SourceDataStore
from dexparser.parser.app import DexApp
from dexparser.parser.utils.amounts import to_int
from dexparser.parser.utils.types import Pair, ParsedTx, PoolInfo, RawTx

logger = logging.getLogger(__name__)


def _pool_mismatch(actual: PoolInfo, expected: PoolInfo) -> str | None:
    for idx, exp_asset in enumerate(expected.assets):
        if to_int(exp_asset.amount) != to_int(actual.assets[idx].amount):
            return (
                f"pool({actual.contract_addr}) asset({exp_asset.addr}) amount mismatch: "
                f"actual({actual.assets[idx].amount}), expected({exp_asset.amount})"
            )
    if to_int(expected.total_share) != to_int(actual.total_share):
        return (
            f"pool({actual.contract_addr}) total share mismatch: "
            f"actual({actual.total_share}), expected({expected.total_share})"
        )
    return None


def _created_pairs(txs: list[ParsedTx]) -> list[Pair]:
    return [
        Pair(contract_addr=tx.contract_addr, lp_addr=tx.lp_addr, assets=[tx.assets[0].addr, tx.assets[1].addr])
        for tx in txs
        if tx.type == TxType.CREATE_PAIR
    ]


class DexRunner:
    """One sync pass per `run()` call. Each block is committed on its own."""

    def __init__(
        self,
        app: DexApp,
        source: SourceDataStore,
        session_factory: async_sessionmaker[AsyncSession],
        same_height_tolerance: int = 3,
        pool_snapshot_interval: int = 100,
        validation_interval: int = 100,
    ) -> None:
        self.app = app
        self.source = source
        self._session_factory = session_factory
        self.same_height_tolerance = same_height_tolerance
        self.pool_snapshot_interval = pool_snapshot_interval
        self.validation_interval = validation_interval

        self.last_src_height = 0
        self.same_height_count = 0

    @property
    def chain_id(self) -> str:
        return self.app.chain_id

    async def run(self) -> None:
        async with self._session_factory() as session:
            local_synced = await PairRepo(session, self.chain_id).get_synced_height()
            await session.commit()

        src_height = await self.source.get_source_synced_height()
        if src_height < local_synced:
            raise RemoteHeightError(f"remote height({src_height}) is less than local synced height({local_synced})")
        self.check_remote_height(src_height)

        # re-check on restart so a failed validation is not skipped
        if local_synced % self.validation_interval == 0:
            pools = await self._pool_infos(local_synced)
            await self.validate(0, local_synced, pools)

        logger.info("Current synced height: %d, remote node height: %d", local_synced, src_height)
        for height in range(local_synced + 1, src_height + 1):
            await self.process_height(height)

    def check_remote_height(self, src_height: int) -> None:
        """Fail once the node reports the same height more than `same_height_tolerance` times in a row."""
        if src_height == self.last_src_height:
            self.same_height_count += 1
            if self.same_height_count > self.same_height_tolerance:
                raise RemoteHeightError(
                    f"remote node height({src_height}) remains the same for {self.same_height_count} consecutive times"
                )
        else:
            self.same_height_count = 0
        self.last_src_height = src_height

    async def process_height(self, height: int) -> None:
        txs = await self.source.get_source_txs(height)

        async with self._session_factory() as session:
            registry = await PairRepo(session, self.chain_id).get_pairs()

        parsed: list[ParsedTx] = []
        for tx in txs:
            parsed.extend(await self._parse_tx(tx, height, registry))

        pools: list[PoolInfo] = []
        if height % self.pool_snapshot_interval == 0:
            pools = await self.source.get_pool_infos(height, list(registry.values()))

        # one transaction per block; an exception leaves synced height untouched
        async with self._session_factory() as session:
            await PairRepo(session, self.chain_id).insert(height, parsed, pools, _created_pairs(parsed))
            await session.commit()

        logger.info("Height %d: %d txs, %d records", height, len(txs), len(parsed))

        if height % self.validation_interval == 0:
            if not pools:
                pools = await self.source.get_pool_infos(height, list(registry.values()))
            await self.validate(0, height, pools)

    async def _parse_tx(self, tx: RawTx, height: int, registry: dict[str, Pair]) -> list[ParsedTx]:
        try:
            return self.app.parse_txs(tx, height, registry)
        except Exception as e:
            logger.exception("Failed to parse tx %s at height %d", tx.hash, height)
            error_type = e.ERROR_TYPE if isinstance(e, DexParserError) else ParseErrorType.INTERNAL_PARSE_ERROR
            await self._record_error(height, tx.hash, error_type, str(e), traceback.format_exc())
            raise

    async def _record_error(self, height: int, tx_hash: str, error_type: ParseErrorType, message: str, stack_trace: str) -> None:
        async with self._session_factory() as session:
            await ParseErrorRepo(session).create(self.chain_id, height, tx_hash, error_type.value, message, stack_trace)
            await session.commit()

    async def _pool_infos(self, height: int) -> list[PoolInfo]:
        async with self._session_factory() as session:
            pairs = await PairRepo(session, self.chain_id).get_pairs()
        return await self.source.get_pool_infos(height, list(pairs.values()))

    async def validate(self, from_height: int, to_height: int, expected: list[PoolInfo]) -> None:
        """Compare pool state summed from parsed txs with the node's snapshot."""
        if not expected:
            logger.info("No pool info found at height %d", to_height)
            return

        async with self._session_factory() as session:
            repo = PairRepo(session, self.chain_id)
            actual = await repo.parsed_pools_info(from_height, to_height)
            exceptions = set(await repo.validation_exception_list())

            expected_pools = {p.contract_addr: p for p in expected if p.contract_addr not in exceptions}
            for pool in actual:
                if pool.contract_addr in exceptions:
                    continue
                exp = expected_pools.pop(pool.contract_addr, None)
                if exp is None:
                    raise PoolValidationError(f"unexpected pool({pool.contract_addr}) found")

                mismatch = _pool_mismatch(pool, exp)
                if mismatch is None:
                    continue
                if not self.app.is_validation_exception_candidate(pool.contract_addr):
                    raise PoolValidationError(mismatch)

                logger.warning("Adding pair %s to validation exceptions: %s", pool.contract_addr, mismatch)
                await repo.insert_pair_validation_exception(self.chain_id, pool.contract_addr)

            await session.commit()

        if expected_pools:
            raise PoolValidationError(f"expected pools({sorted(expected_pools)}) not found")
