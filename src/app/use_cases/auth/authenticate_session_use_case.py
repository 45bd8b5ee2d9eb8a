"""
Authenticate Session Use Case

Turns a server-side session id into an AdminPrincipal.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AdminPrincipal


class AuthenticateSessionUseCase:
    """
    Business Rules:
    - Missing, unknown, revoked or expired sessions are UNAUTHENTICATED
    - If the admin is gone or inactive the session entry is revoked so the
      cookie cannot be replayed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: Optional[str]) -> Result[AdminPrincipal]:
        if not session_id:
            return Return.err(Error("UNAUTHENTICATED", "Admin session required"))

        try:
            parsed_id = UUID(session_id)
        except ValueError:
            return Return.err(Error("UNAUTHENTICATED", "Invalid or expired session"))

        async with self.uow:
            now = utc_now()
            session = await self.uow.admin_sessions.get_by_id(parsed_id)
            if session is None or not session.is_valid(now):
                return Return.err(Error("UNAUTHENTICATED", "Invalid or expired session"))

            admin = await self.uow.admins.get_by_id(session.admin_id)

            if admin is None:
                session.revoke(now)
                await self.uow.admin_sessions.update(session)
                await self.uow.commit()
                return Return.err(
                    Error("UNAUTHENTICATED", "Invalid session - admin not found")
                )

            if not admin.is_active:
                session.revoke(now)
                await self.uow.admin_sessions.update(session)
                await self.uow.commit()
                return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

            return Return.ok(AdminPrincipal.from_entity(admin))
