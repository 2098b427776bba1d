import json
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dexparser.db.models.pair import PairRecord
from dexparser.db.models.pair_validation_exception import PairValidationException
from dexparser.db.models.parsed_tx import ParsedTxRecord
from dexparser.db.models.pool_info import PoolInfoRecord
from dexparser.db.models.synced_height import SyncedHeight
from dexparser.domain.enums import TxType
from dexparser.exceptions import SyncedHeightMismatchError
from dexparser.parser.utils.amounts import to_int
from dexparser.parser.utils.types import Asset, Pair, ParsedTx, PoolInfo

# LP supply moves: provide mints, withdraw burns
_LP_SIGN = {
    TxType.PROVIDE.value: 1,
    TxType.INITIAL_PROVIDE.value: 1,
    TxType.WITHDRAW.value: -1,
}


def _dumps(value) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value, default=str)


class PairRepo:
    """Chain-scoped persistence for pairs, parsed txs, pool snapshots and sync progress.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession, chain_id: str) -> None:
        self._session = session
        self._chain_id = chain_id

    async def get_synced_height(self) -> int:
        """Return the synced height, creating the chain's row at 0 on first use."""
        row = await self._synced_height_row()
        if row is None:
            row = SyncedHeight(chain_id=self._chain_id, height=0)
            self._session.add(row)
            await self._session.flush()
        return row.height

    async def get_pairs(self) -> dict[str, Pair]:
        result = await self._session.execute(
            select(PairRecord).where(PairRecord.chain_id == self._chain_id).order_by(PairRecord.id)
        )
        return {
            r.contract: Pair(contract_addr=r.contract, lp_addr=r.lp, assets=[r.asset0, r.asset1])
            for r in result.scalars().all()
        }

    async def insert(self, height: int, txs: list[ParsedTx], pools: list[PoolInfo], pairs: list[Pair]) -> None:
        """Write one block and advance synced height from `height - 1` to `height`."""
        synced = await self._session.execute(
            select(SyncedHeight).where(SyncedHeight.chain_id == self._chain_id, SyncedHeight.height == height - 1)
        )
        row = synced.scalar_one_or_none()
        if row is None:
            raise SyncedHeightMismatchError(self._chain_id, height)

        self._session.add_all([self._to_pair_record(p) for p in pairs])
        self._session.add_all([self._to_parsed_tx_record(height, tx) for tx in txs])
        self._session.add_all([self._to_pool_info_record(height, pool) for pool in pools])
        row.height = height
        await self._session.flush()

    async def parsed_pools_info(self, from_height: int, to_height: int) -> list[PoolInfo]:
        """Pool state implied by parsed txs in [from_height, to_height], per contract."""
        result = await self._session.execute(
            select(ParsedTxRecord)
            .where(
                ParsedTxRecord.chain_id == self._chain_id,
                ParsedTxRecord.height >= from_height,
                ParsedTxRecord.height <= to_height,
            )
            .order_by(ParsedTxRecord.id)
        )

        sums: dict[str, dict] = {}
        for r in result.scalars().all():
            pool = sums.setdefault(r.contract, {"asset0": r.asset0, "asset1": r.asset1, "amount0": 0, "amount1": 0, "lp": 0})
            pool["asset0"] = pool["asset0"] or r.asset0
            pool["asset1"] = pool["asset1"] or r.asset1
            pool["amount0"] += to_int(r.asset0_amount)
            pool["amount1"] += to_int(r.asset1_amount)
            pool["lp"] += _LP_SIGN.get(r.type, 0) * to_int(r.lp_amount)

        return [
            PoolInfo(
                contract_addr=contract,
                assets=[Asset(addr=p["asset0"], amount=str(p["amount0"])), Asset(addr=p["asset1"], amount=str(p["amount1"]))],
                total_share=str(p["lp"]),
            )
            for contract, p in sums.items()
        ]

    async def validation_exception_list(self) -> list[str]:
        result = await self._session.execute(
            select(PairValidationException.contract).where(PairValidationException.chain_id == self._chain_id)
        )
        return list(result.scalars().all())

    async def insert_pair_validation_exception(self, chain_id: str, contract_addr: str) -> PairValidationException:
        record = PairValidationException(chain_id=chain_id, contract=contract_addr)
        self._session.add(record)
        await self._session.flush()
        return record

    # -- helpers --

    async def _synced_height_row(self) -> Optional[SyncedHeight]:
        result = await self._session.execute(select(SyncedHeight).where(SyncedHeight.chain_id == self._chain_id))
        return result.scalar_one_or_none()

    def _to_pair_record(self, pair: Pair) -> PairRecord:
        return PairRecord(
            chain_id=self._chain_id,
            contract=pair.contract_addr,
            asset0=pair.assets[0],
            asset1=pair.assets[1],
            lp=pair.lp_addr,
        )

    def _to_parsed_tx_record(self, height: int, tx: ParsedTx) -> ParsedTxRecord:
        return ParsedTxRecord(
            chain_id=self._chain_id,
            height=height,
            timestamp=tx.timestamp,
            hash=tx.hash,
            sender=tx.sender,
            type=tx.type.value,
            contract=tx.contract_addr,
            asset0=tx.assets[0].addr,
            asset0_amount=tx.assets[0].amount,
            asset1=tx.assets[1].addr,
            asset1_amount=tx.assets[1].amount,
            lp=tx.lp_addr,
            lp_amount=tx.lp_amount,
            commission_amount=tx.commission_amount,
            tax_amount=_dumps(tx.tax_amount.model_dump()) if tx.tax_amount else None,
            refund_assets=_dumps([a.model_dump() for a in tx.refund_assets]) if tx.refund_assets else None,
            meta=_dumps(tx.meta) if tx.meta else None,
        )

    def _to_pool_info_record(self, height: int, pool: PoolInfo) -> PoolInfoRecord:
        return PoolInfoRecord(
            chain_id=self._chain_id,
            height=height,
            contract=pool.contract_addr,
            asset0_amount=pool.assets[0].amount,
            asset1_amount=pool.assets[1].amount,
            lp_amount=pool.total_share,
        )
