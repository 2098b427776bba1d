from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, BigIntPrimaryKey, TimestampMixin


class PairRecord(BigIntPrimaryKey, TimestampMixin, Base):
    """AMM pool known to the parser. Asset order is the canonical one from create_pair."""

    __tablename__ = "pairs"
    __table_args__ = (UniqueConstraint("chain_id", "contract", name="uq_pairs_chain_contract"),)

    chain_id: Mapped[str] = mapped_column(String(50))
    contract: Mapped[str] = mapped_column(String(128))
    asset0: Mapped[str] = mapped_column(String(128))
    asset1: Mapped[str] = mapped_column(String(128))
    lp: Mapped[str] = mapped_column(String(128))
