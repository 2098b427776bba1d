from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, BigIntPrimaryKey, TimestampMixin


class SyncedHeight(BigIntPrimaryKey, TimestampMixin, Base):
    """Last fully parsed height per chain. Exactly one row per chain_id."""

    __tablename__ = "synced_heights"

    chain_id: Mapped[str] = mapped_column(String(50), unique=True)
    height: Mapped[int] = mapped_column(BigInteger, default=0)
