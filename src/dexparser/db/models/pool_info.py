from sqlalchemy import BigInteger, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, BigIntPrimaryKey, TimestampMixin


class PoolInfoRecord(BigIntPrimaryKey, TimestampMixin, Base):
    """Pool reserves and LP supply snapshot read from the node."""

    __tablename__ = "pool_infos"
    __table_args__ = (Index("ix_pool_infos_chain_height", "chain_id", "height"),)

    chain_id: Mapped[str] = mapped_column(String(50))
    height: Mapped[int] = mapped_column(BigInteger)
    contract: Mapped[str] = mapped_column(String(128))
    asset0_amount: Mapped[str] = mapped_column(String(80))
    asset1_amount: Mapped[str] = mapped_column(String(80))
    lp_amount: Mapped[str] = mapped_column(String(80))
