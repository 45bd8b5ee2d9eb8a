"""
AdminSession Entity

Server-side session store entry referenced by the admin session cookie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class AdminSession(SQLModel, table=True):
    """
    AdminSession entity - the cookie holds only the session id.

    Business Rules:
    - Valid iff not revoked and not past expires_at
    - Revoked when the admin logs out, disappears or is deactivated
    """

    __tablename__ = "admin_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    admin_id: UUID = Field(foreign_key="admins.id", nullable=False, index=True)

    ip: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (Index("idx_admin_session_expires_at", "expires_at"),)

    def is_valid(self, now: datetime) -> bool:
        return not self.revoked and self.expires_at > now

    def revoke(self, now: datetime) -> None:
        self.revoked = True
        self.revoked_at = now
