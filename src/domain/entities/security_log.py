"""
SecurityLog Entity

Anomalous or failed access events.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import SecurityEventType, Severity


class SecurityLog(SQLModel, table=True):
    """
    SecurityLog entity - one security-relevant event.

    Business Rules:
    - severity is fixed at creation
    - The only mutation is the one-way unresolved -> resolved transition
    """

    __tablename__ = "security_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    type: SecurityEventType
    severity: Severity = Field(default=Severity.medium)
    message: str = Field(max_length=1000)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip: str = Field(max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)
    user_id: Optional[UUID] = Field(default=None)

    resolved: bool = Field(default=False)
    resolved_by: Optional[UUID] = Field(default=None, foreign_key="admins.id")
    resolved_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_security_type", "type"),
        Index("idx_security_severity", "severity"),
        Index("idx_security_ip", "ip"),
        Index("idx_security_resolved", "resolved"),
    )

    def resolve(self, admin_id: UUID, now: datetime) -> bool:
        """Mark resolved. Returns False if it was already resolved."""
        if self.resolved:
            return False
        self.resolved = True
        self.resolved_by = admin_id
        self.resolved_at = now
        return True
