from typing import Optional

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dexparser.db.session import Base, TimestampMixin, UUIDPrimaryKey


class ParseErrorRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Transaction that failed to parse. The run stops on it."""

    __tablename__ = "parse_error_records"

    chain_id: Mapped[str] = mapped_column(String(50))
    height: Mapped[int] = mapped_column(BigInteger)
    tx_hash: Mapped[str] = mapped_column(String(100), index=True)
    error_type: Mapped[str] = mapped_column(String(50))
    message: Mapped[Optional[str]] = mapped_column(Text, default=None)
    stack_trace: Mapped[Optional[str]] = mapped_column(Text, default=None)
    resolved: Mapped[bool] = mapped_column(default=False)
