"""
Admin Entity

Credential store for the moderation back office, plus the principal that
is attached to authenticated requests.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import AdminRole


class Admin(SQLModel, table=True):
    """
    Admin entity - a back-office account.

    Business Rules:
    - Email is unique, stored trimmed and lower-cased
    - Password stored as bcrypt hash, never serialised
    - An inactive admin is rejected by every authentication path
    - Locked iff locked_until is set and in the future
    - Never hard-deleted; deactivate via is_active
    """

    __tablename__ = "admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    role: AdminRole = Field(default=AdminRole.viewer)
    avatar: Optional[str] = Field(default=None, max_length=500)

    is_active: bool = Field(default=True)
    two_factor_enabled: bool = Field(default=False)
    two_factor_secret: Optional[str] = Field(default=None, max_length=255)

    # Audit metadata
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    last_ip: Optional[str] = Field(default=None, max_length=64)

    # Lockout state
    login_attempts: int = Field(default=0)
    locked_until: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_admin_role_active", "role", "is_active"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def is_locked(self, now: datetime) -> bool:
        return self.locked_until is not None and self.locked_until > now

    def register_failed_login(
        self, now: datetime, threshold: int, duration: timedelta
    ) -> bool:
        """
        Account for one failed credential check.

        A lock that has already expired restarts the counter at 1 without
        re-locking. Otherwise the counter is incremented and the account is
        locked for `duration` once it reaches `threshold`.

        Returns:
            True if this failure locked the account
        """
        if self.locked_until is not None and self.locked_until <= now:
            self.login_attempts = 1
            self.locked_until = None
            return False

        self.login_attempts += 1
        if self.login_attempts >= threshold and not self.is_locked(now):
            self.locked_until = now + duration
            return True
        return False

    def reset_login_attempts(self) -> None:
        self.login_attempts = 0
        self.locked_until = None

    def record_login(self, now: datetime, ip: Optional[str]) -> None:
        self.last_login = now
        self.last_ip = ip


class AdminPrincipal(BaseModel):
    """Authenticated admin attached to a request. Carries no secrets."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: AdminRole
    avatar: Optional[str] = None
    is_active: bool
    two_factor_enabled: bool = False
    last_login: Optional[datetime] = None
    last_ip: Optional[str] = None

    @classmethod
    def from_entity(cls, admin: Admin) -> "AdminPrincipal":
        return cls(
            id=admin.id,
            email=admin.email,
            first_name=admin.first_name,
            last_name=admin.last_name,
            role=admin.role,
            avatar=admin.avatar,
            is_active=admin.is_active,
            two_factor_enabled=admin.two_factor_enabled,
            last_login=admin.last_login,
            last_ip=admin.last_ip,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
