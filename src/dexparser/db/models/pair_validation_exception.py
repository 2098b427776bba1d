from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, BigIntPrimaryKey, TimestampMixin


class PairValidationException(BigIntPrimaryKey, TimestampMixin, Base):
    """Pair excluded from pool validation (holds tokens outside its two assets)."""

    __tablename__ = "pair_validation_exceptions"
    __table_args__ = (UniqueConstraint("chain_id", "contract", name="uq_pair_validation_exceptions_chain_contract"),)

    chain_id: Mapped[str] = mapped_column(String(50))
    contract: Mapped[str] = mapped_column(String(128))
