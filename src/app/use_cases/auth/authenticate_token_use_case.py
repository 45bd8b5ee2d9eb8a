"""
Authenticate Token Use Case

Turns a bearer token into an AdminPrincipal.
"""

from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import verify_admin_token
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AdminPrincipal, SecurityEventType, Severity

INVALID_OR_EXPIRED = Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")


class AuthenticateTokenUseCase:
    """
    Business Rules:
    - Bad signature, malformed token and expiry all surface as
      INVALID_OR_EXPIRED_TOKEN; the specific reason goes to the security log
    - The admin named by the token must still exist and be active
    """

    def __init__(self, uow: UnitOfWork, audit: AuditService, config=None):
        self.uow = uow
        self.audit = audit
        self.config = config or ApplicationConfig

    async def execute(
        self, token: str, ip: Optional[str] = None, user_agent: Optional[str] = None
    ) -> Result[AdminPrincipal]:
        verified = verify_admin_token(token, self.config)
        admin_id = None
        if verified.is_ok():
            try:
                admin_id = UUID(str(verified.value["id"]))
            except ValueError:
                verified = Return.err(Error("INVALID_TOKEN", "Token subject is not a valid id"))

        if verified.is_err():
            await self.audit.record_security_event(
                SecurityEventType.invalid_token,
                "Invalid admin token provided",
                ip=ip,
                severity=Severity.medium,
                user_agent=user_agent,
                details={"reason": verified.error.code, "error": verified.error.message},
            )
            return Return.err(INVALID_OR_EXPIRED)

        async with self.uow:
            admin = await self.uow.admins.get_by_id(admin_id)

            if admin is None:
                return Return.err(Error("UNAUTHENTICATED", "Invalid token - admin not found"))

            if not admin.is_active:
                return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

            return Return.ok(AdminPrincipal.from_entity(admin))
