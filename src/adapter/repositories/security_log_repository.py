from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import case, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.security_log_repository import ISecurityLogRepository
from src.domain.entities import SecurityLog, Severity


class SecurityLogRepository(ISecurityLogRepository):
    """SecurityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, event: SecurityLog) -> SecurityLog:
        """Create a new security event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def get_by_id(self, event_id: UUID) -> Optional[SecurityLog]:
        stmt = select(SecurityLog).where(SecurityLog.id == event_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, event: SecurityLog) -> SecurityLog:
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

    async def get_recent(self, limit: int = 100) -> List[SecurityLog]:
        stmt = select(SecurityLog).order_by(SecurityLog.timestamp.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_unresolved(
        self, severity: Optional[Severity] = None, limit: int = 100
    ) -> List[SecurityLog]:
        stmt = select(SecurityLog).where(SecurityLog.resolved == False)
        if severity is not None:
            stmt = stmt.where(SecurityLog.severity == severity)
        stmt = stmt.order_by(SecurityLog.timestamp.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_ip(self, ip: str, limit: int = 50) -> List[SecurityLog]:
        stmt = (
            select(SecurityLog)
            .where(SecurityLog.ip == ip)
            .order_by(SecurityLog.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_critical(self) -> List[SecurityLog]:
        stmt = (
            select(SecurityLog)
            .where(
                SecurityLog.severity == Severity.critical,
                SecurityLog.resolved == False,
            )
            .order_by(SecurityLog.timestamp.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_stats(self, since: datetime) -> List[Dict[str, Any]]:
        """Per-type counts since a timestamp, most frequent first"""
        count = func.count(SecurityLog.id)
        stmt = (
            select(
                SecurityLog.type,
                count,
                func.sum(case((SecurityLog.severity == Severity.critical, 1), else_=0)),
                func.sum(case((SecurityLog.severity == Severity.high, 1), else_=0)),
            )
            .where(SecurityLog.timestamp >= since)
            .group_by(SecurityLog.type)
            .order_by(count.desc())
        )
        result = await self.session.execute(stmt)
        return [
            {
                "type": event_type.value if hasattr(event_type, "value") else event_type,
                "count": total,
                "critical_count": int(critical or 0),
                "high_count": int(high or 0),
            }
            for event_type, total, critical, high in result.all()
        ]
