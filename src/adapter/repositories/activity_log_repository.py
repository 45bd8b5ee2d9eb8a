from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.domain.entities import ActivityAction, ActivityLog


class ActivityLogRepository(IActivityLogRepository):
    """ActivityLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: ActivityLog) -> ActivityLog:
        """Create a new activity entry (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_recent(self, limit: int = 50) -> List[ActivityLog]:
        stmt = select(ActivityLog).order_by(ActivityLog.timestamp.desc()).limit(limit)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_admin(self, admin_id: UUID, limit: int = 50) -> List[ActivityLog]:
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.admin_id == admin_id)
            .order_by(ActivityLog.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_action(self, action: ActivityAction, limit: int = 100) -> List[ActivityLog]:
        stmt = (
            select(ActivityLog)
            .where(ActivityLog.action == action)
            .order_by(ActivityLog.timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
