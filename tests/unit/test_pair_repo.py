import json

import pytest
from sqlalchemy import select

from dexparser.db.models.parsed_tx import ParsedTxRecord
from dexparser.db.models.pool_info import PoolInfoRecord
from dexparser.db.repos.pair_repo import PairRepo
from dexparser.db.repos.parse_error_repo import ParseErrorRepo
from dexparser.domain.enums import TxType
from dexparser.exceptions import SyncedHeightMismatchError
from dexparser.parser.utils.types import Asset, Pair, ParsedTx, PoolInfo

CHAIN = "dimension_37-1"
PAIR = Pair(contract_addr="xpla1pair", lp_addr="xpla1lp", assets=["xpla1token", "axpla"])


def _tx(type: TxType, amount0: str = "", amount1: str = "", lp_amount: str = "", **kwargs) -> ParsedTx:
    return ParsedTx(
        type=type,
        hash=kwargs.pop("hash", "H"),
        contract_addr=PAIR.contract_addr,
        assets=[Asset(addr="xpla1token", amount=amount0), Asset(addr="axpla", amount=amount1)],
        lp_addr=PAIR.lp_addr,
        lp_amount=lp_amount,
        **kwargs,
    )


class TestSyncedHeight:
    async def test_created_at_zero(self, session):
        repo = PairRepo(session, CHAIN)
        assert await repo.get_synced_height() == 0
        assert await repo.get_synced_height() == 0

    async def test_chains_are_independent(self, session):
        await PairRepo(session, CHAIN).get_synced_height()
        await PairRepo(session, CHAIN).insert(1, [], [], [])
        assert await PairRepo(session, "cube_47-5").get_synced_height() == 0
        assert await PairRepo(session, CHAIN).get_synced_height() == 1


class TestInsert:
    async def test_insert_advances_height(self, session):
        repo = PairRepo(session, CHAIN)
        await repo.get_synced_height()

        create = ParsedTx(
            type=TxType.CREATE_PAIR, hash="C", contract_addr=PAIR.contract_addr, lp_addr=PAIR.lp_addr,
            assets=[Asset(addr="xpla1token"), Asset(addr="axpla")],
        )
        await repo.insert(1, [create], [], [PAIR])
        await session.commit()

        assert await repo.get_synced_height() == 1
        assert await repo.get_pairs() == {PAIR.contract_addr: PAIR}

    async def test_out_of_order_rejected(self, session):
        repo = PairRepo(session, CHAIN)
        await repo.get_synced_height()
        with pytest.raises(SyncedHeightMismatchError):
            await repo.insert(2, [], [], [])

    async def test_missing_row_rejected(self, session):
        with pytest.raises(SyncedHeightMismatchError):
            await PairRepo(session, CHAIN).insert(1, [], [], [])

    async def test_typed_fields_and_meta_stored_as_json(self, session):
        repo = PairRepo(session, CHAIN)
        await repo.get_synced_height()
        tx = _tx(
            TxType.SWAP, "100", "-90",
            tax_amount=Asset(addr="axpla", amount="3"),
            meta={"recipient": "xpla1user", "ibc/XYZ": "5"},
        )
        pool = PoolInfo(contract_addr=PAIR.contract_addr, assets=[Asset(addr="xpla1token", amount="100"), Asset(addr="axpla", amount="90")], total_share="95")
        await repo.insert(1, [tx], [pool], [])

        record = (await session.execute(select(ParsedTxRecord))).scalar_one()
        assert record.asset0_amount == "100"
        assert record.asset1_amount == "-90"
        assert json.loads(record.tax_amount) == {"addr": "axpla", "amount": "3"}
        assert record.refund_assets is None
        assert json.loads(record.meta)["ibc/XYZ"] == "5"

        snapshot = (await session.execute(select(PoolInfoRecord))).scalar_one()
        assert snapshot.height == 1
        assert snapshot.lp_amount == "95"


class TestParsedPoolsInfo:
    async def test_sums_amounts_and_lp(self, session):
        repo = PairRepo(session, CHAIN)
        await repo.get_synced_height()
        await repo.insert(1, [_tx(TxType.PROVIDE, "2000", "2000", "1000")], [], [PAIR])
        await repo.insert(2, [_tx(TxType.SWAP, "-950", "1000")], [], [])
        await repo.insert(3, [_tx(TxType.WITHDRAW, "-105", "-300", "100"), _tx(TxType.TRANSFER, "", "7")], [], [])

        pools = await repo.parsed_pools_info(0, 3)
        assert pools == [
            PoolInfo(
                contract_addr=PAIR.contract_addr,
                assets=[Asset(addr="xpla1token", amount="945"), Asset(addr="axpla", amount="2707")],
                total_share="900",
            )
        ]

    async def test_height_range(self, session):
        repo = PairRepo(session, CHAIN)
        await repo.get_synced_height()
        await repo.insert(1, [_tx(TxType.PROVIDE, "10", "10", "10")], [], [PAIR])
        await repo.insert(2, [_tx(TxType.PROVIDE, "5", "5", "5")], [], [])

        pools = await repo.parsed_pools_info(0, 1)
        assert pools[0].total_share == "10"


class TestValidationExceptions:
    async def test_insert_and_list(self, session):
        repo = PairRepo(session, CHAIN)
        assert await repo.validation_exception_list() == []
        await repo.insert_pair_validation_exception(CHAIN, "xpla1pair")
        await repo.insert_pair_validation_exception("cube_47-5", "xpla1other")
        assert await repo.validation_exception_list() == ["xpla1pair"]


class TestParseErrorRepo:
    async def test_create_and_summary(self, session):
        repo = ParseErrorRepo(session)
        await repo.create(CHAIN, 10, "H1", "StructuralMismatchError", "swap: found(3) expected(10)")
        await repo.create(CHAIN, 11, "H2", "StructuralMismatchError", "provide_liquidity: missing key(share)")
        await repo.create(CHAIN, 12, "H3", "UnknownPairError", "no pair(xpla1x)", "Traceback ...")

        errors = await repo.list_errors(CHAIN)
        assert len(errors) == 3
        assert await repo.get_summary(CHAIN) == {"StructuralMismatchError": 2, "UnknownPairError": 1}
        assert await repo.list_errors(CHAIN, resolved=True) == []
