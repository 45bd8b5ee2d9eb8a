from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.admin_session_repository import IAdminSessionRepository
from src.domain.base import utc_now
from src.domain.entities import AdminSession


class AdminSessionRepository(IAdminSessionRepository):
    """AdminSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[AdminSession]:
        """Get session by ID"""
        stmt = select(AdminSession).where(AdminSession.id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, session_obj: AdminSession) -> AdminSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: AdminSession) -> AdminSession:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def revoke_all_by_admin_id(self, admin_id: UUID) -> int:
        """Revoke all active sessions of an admin"""
        stmt = (
            update(AdminSession)
            .where(AdminSession.admin_id == admin_id, AdminSession.revoked == False)
            .values(revoked=True, revoked_at=utc_now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
