import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from dexparser.db.models import PairRecord, ParseErrorRecord, ParsedTxRecord, SyncedHeight

CHAIN = "dimension_37-1"


class TestPairRecord:
    async def test_create_pair(self, session):
        pair = PairRecord(chain_id=CHAIN, contract="xpla1pair", asset0="xpla1token", asset1="axpla", lp="xpla1lp")
        session.add(pair)
        await session.commit()
        await session.refresh(pair)

        assert pair.id is not None
        assert pair.created_at is not None

    def test_columns(self):
        assert set(PairRecord.__table__.columns.keys()) == {
            "id", "chain_id", "contract", "asset0", "asset1", "lp", "created_at", "updated_at",
        }

    async def test_contract_unique_per_chain(self, session):
        session.add(PairRecord(chain_id=CHAIN, contract="xpla1pair", asset0="a", asset1="b", lp="l"))
        session.add(PairRecord(chain_id="cube_47-5", contract="xpla1pair", asset0="a", asset1="b", lp="l"))
        await session.commit()

        session.add(PairRecord(chain_id=CHAIN, contract="xpla1pair", asset0="a", asset1="b", lp="l"))
        with pytest.raises(IntegrityError):
            await session.commit()


class TestSyncedHeight:
    async def test_one_row_per_chain(self, session):
        session.add(SyncedHeight(chain_id=CHAIN))
        await session.commit()

        session.add(SyncedHeight(chain_id=CHAIN, height=5))
        with pytest.raises(IntegrityError):
            await session.commit()

    async def test_height_defaults_to_zero(self, session):
        row = SyncedHeight(chain_id=CHAIN)
        session.add(row)
        await session.commit()
        await session.refresh(row)
        assert row.height == 0


class TestParsedTxRecord:
    async def test_optional_columns_default(self, session):
        record = ParsedTxRecord(chain_id=CHAIN, height=1, hash="H", type="swap", contract="xpla1pair")
        session.add(record)
        await session.commit()
        await session.refresh(record)

        assert record.sender == ""
        assert record.tax_amount is None
        assert record.refund_assets is None


class TestParseErrorRecord:
    async def test_uuid_and_unresolved(self, session):
        record = ParseErrorRecord(chain_id=CHAIN, height=1, tx_hash="H", error_type="InternalParseError")
        session.add(record)
        await session.commit()
        await session.refresh(record)

        assert isinstance(record.id, uuid.UUID)
        assert record.resolved is False
