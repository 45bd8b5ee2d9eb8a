"""
Admin Login Use Case

Checks credentials, runs the account lockout state machine and issues an
admin token (and optionally a server-side session).
"""

from datetime import timedelta
from typing import Optional

import bcrypt

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_admin_token
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import (
    ActivityAction,
    Admin,
    AdminPrincipal,
    AdminSession,
    SecurityEventType,
    Severity,
    TargetType,
)
from .dtos import LoginCommand, LoginResponse

BCRYPT_ROUNDS = 10

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class AdminLoginUseCase:
    """
    Use case for admin login and token issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A locked account is refused before the password is checked
    - Each wrong password increments login_attempts; reaching the threshold
      locks the account for the lockout duration
    - A failure after an expired lock restarts the counter at 1
    - An inactive account is refused even with the right password
    - Success resets the counter, clears the lock, records last login/IP
    """

    def __init__(self, uow: UnitOfWork, audit: AuditService, config=None):
        self.uow = uow
        self.audit = audit
        self.config = config or ApplicationConfig
        self.lockout_threshold = self.config.LOCKOUT_THRESHOLD
        self.lockout_duration = timedelta(hours=self.config.LOCKOUT_DURATION_HOURS)
        self.session_ttl = timedelta(days=self.config.SESSION_TTL_DAYS)

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute admin login use case.

        Args:
            command: Credentials plus request IP / user agent

        Returns:
            Result with LoginResponse, or Error INVALID_CREDENTIALS,
            ACCOUNT_LOCKED or ACCOUNT_INACTIVE
        """
        email = normalize_email(command.email)

        async with self.uow:
            admin = await self.uow.admins.get_by_email(email)

            if admin is None:
                # Hash anyway so unknown emails take as long as wrong passwords
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(BCRYPT_ROUNDS))
                await self._failed_login(command, email, reason="unknown_email")
                return Return.err(INVALID_CREDENTIALS)

            now = utc_now()

            if admin.is_locked(now):
                await self.audit.record_security_event(
                    SecurityEventType.account_lockout,
                    "Login attempt on locked admin account",
                    ip=command.ip,
                    severity=Severity.high,
                    user_agent=command.user_agent,
                    details={
                        "admin_id": admin.id,
                        "email": email,
                        "locked_until": admin.locked_until,
                    },
                )
                return Return.err(
                    Error(
                        "ACCOUNT_LOCKED",
                        "Account is temporarily locked. Please try again later.",
                    )
                )

            if not bcrypt.checkpw(command.password.encode(), admin.password_hash.encode()):
                just_locked = admin.register_failed_login(
                    now, self.lockout_threshold, self.lockout_duration
                )
                await self.uow.admins.update(admin)
                await self.uow.commit()

                await self._failed_login(
                    command,
                    email,
                    reason="wrong_password",
                    admin=admin,
                )
                if just_locked:
                    await self.audit.record_security_event(
                        SecurityEventType.account_lockout,
                        f"Admin account locked after {admin.login_attempts} failed logins",
                        ip=command.ip,
                        severity=Severity.high,
                        user_agent=command.user_agent,
                        details={
                            "admin_id": admin.id,
                            "email": email,
                            "locked_until": admin.locked_until,
                        },
                    )
                return Return.err(INVALID_CREDENTIALS)

            if not admin.is_active:
                return Return.err(Error("ACCOUNT_INACTIVE", "Account is inactive"))

            admin.reset_login_attempts()
            admin.record_login(now, command.ip)
            await self.uow.admins.update(admin)

            session = None
            if command.use_session:
                session = AdminSession(
                    admin_id=admin.id,
                    ip=command.ip,
                    user_agent=command.user_agent,
                    expires_at=now + self.session_ttl,
                )
                session = await self.uow.admin_sessions.create(session)

            await self.uow.commit()

            principal = AdminPrincipal.from_entity(admin)
            session_id = str(session.id) if session else None

        await self.audit.record_activity(
            admin_id=principal.id,
            action=ActivityAction.admin_login,
            target_type=TargetType.admin,
            ip=command.ip,
            user_agent=command.user_agent,
            target_id=str(principal.id),
            details={"method": "session" if session_id else "token"},
        )

        return Return.ok(
            LoginResponse(
                token=generate_admin_token(principal, config=self.config),
                expires_in=self.config.TOKEN_TTL_HOURS * 3600,
                admin=principal,
                session_id=session_id,
            )
        )

    async def _failed_login(
        self,
        command: LoginCommand,
        email: str,
        reason: str,
        admin: Optional[Admin] = None,
    ) -> None:
        details = {"email": email, "reason": reason}
        if admin is not None:
            details["admin_id"] = admin.id
            details["login_attempts"] = admin.login_attempts
        await self.audit.record_security_event(
            SecurityEventType.failed_login,
            "Failed admin login attempt",
            ip=command.ip,
            severity=Severity.low,
            user_agent=command.user_agent,
            details=details,
        )
