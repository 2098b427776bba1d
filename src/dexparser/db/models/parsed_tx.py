from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, BigIntPrimaryKey, TimestampMixin


class ParsedTxRecord(BigIntPrimaryKey, TimestampMixin, Base):
    """One ParsedTx. Amounts are signed base-unit integers kept as strings."""

    __tablename__ = "parsed_txs"
    __table_args__ = (
        Index("ix_parsed_txs_chain_height", "chain_id", "height"),
        Index("ix_parsed_txs_chain_contract", "chain_id", "contract"),
    )

    chain_id: Mapped[str] = mapped_column(String(50))
    height: Mapped[int] = mapped_column(BigInteger)
    timestamp: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)
    hash: Mapped[str] = mapped_column(String(100), index=True)
    sender: Mapped[str] = mapped_column(String(128), default="")
    type: Mapped[str] = mapped_column(String(20))
    contract: Mapped[str] = mapped_column(String(128))
    asset0: Mapped[str] = mapped_column(String(128), default="")
    asset0_amount: Mapped[str] = mapped_column(String(80), default="")
    asset1: Mapped[str] = mapped_column(String(128), default="")
    asset1_amount: Mapped[str] = mapped_column(String(80), default="")
    lp: Mapped[str] = mapped_column(String(128), default="")
    lp_amount: Mapped[str] = mapped_column(String(80), default="")
    commission_amount: Mapped[str] = mapped_column(String(80), default="")
    tax_amount: Mapped[Optional[str]] = mapped_column(Text, default=None)  # JSON Asset
    refund_assets: Mapped[Optional[str]] = mapped_column(Text, default=None)  # JSON list[Asset]
    meta: Mapped[Optional[str]] = mapped_column(Text, default=None)  # JSON
