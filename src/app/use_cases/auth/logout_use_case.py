"""
Admin Logout Use Case

Revokes the server-side session the request came in on.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import LogoutResponse


class AdminLogoutUseCase:
    """
    Business Rules:
    - Only a session owned by the caller is revoked
    - Token-only callers have nothing to revoke; logout still succeeds
    - all_sessions revokes every session of the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, admin_id: UUID, session_id: Optional[str] = None, all_sessions: bool = False
    ) -> Result[LogoutResponse]:
        async with self.uow:
            if all_sessions:
                count = await self.uow.admin_sessions.revoke_all_by_admin_id(admin_id)
                await self.uow.commit()
                return Return.ok(LogoutResponse(sessions_revoked=count))

            count = 0
            parsed_id = _parse_uuid(session_id)
            if parsed_id is not None:
                session = await self.uow.admin_sessions.get_by_id(parsed_id)
                if session is not None and session.admin_id == admin_id and not session.revoked:
                    session.revoke(utc_now())
                    await self.uow.admin_sessions.update(session)
                    await self.uow.commit()
                    count = 1

            return Return.ok(LogoutResponse(sessions_revoked=count))


def _parse_uuid(value: Optional[str]) -> Optional[UUID]:
    if not value:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None
