from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from dexparser.db.models.parse_error_record import ParseErrorRecord


class ParseErrorRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        chain_id: str,
        height: int,
        tx_hash: str,
        error_type: str,
        message: str,
        stack_trace: Optional[str] = None,
    ) -> ParseErrorRecord:
        record = ParseErrorRecord(
            chain_id=chain_id,
            height=height,
            tx_hash=tx_hash,
            error_type=error_type,
            message=message,
            stack_trace=stack_trace,
        )
        self._session.add(record)
        await self._session.flush()
        return record

    async def list_errors(self, chain_id: str, resolved: Optional[bool] = None, limit: int = 50) -> list[ParseErrorRecord]:
        q = select(ParseErrorRecord).where(ParseErrorRecord.chain_id == chain_id)
        if resolved is not None:
            q = q.where(ParseErrorRecord.resolved == resolved)
        result = await self._session.execute(q.order_by(ParseErrorRecord.created_at.desc()).limit(limit))
        return list(result.scalars().all())

    async def get_summary(self, chain_id: str) -> dict[str, int]:
        result = await self._session.execute(
            select(ParseErrorRecord.error_type, func.count())
            .where(ParseErrorRecord.chain_id == chain_id, ParseErrorRecord.resolved == False)  # noqa: E712
            .group_by(ParseErrorRecord.error_type)
        )
        return dict(result.all())
