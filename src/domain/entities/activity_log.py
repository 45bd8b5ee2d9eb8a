"""
ActivityLog Entity

Immutable record of a successful admin mutation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import ActivityAction, TargetType


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity - what an admin did, written only after the
    action succeeded (or, for unauthorized_access, when it was refused).

    Business Rules:
    - Immutable (never updated or deleted)
    - details carries a request snapshot with secrets redacted
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    admin_id: UUID = Field(foreign_key="admins.id", nullable=False)
    action: ActivityAction
    target_type: TargetType
    target_id: Optional[str] = Field(default=None, max_length=64)
    details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    ip: str = Field(max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    timestamp: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_activity_admin_id", "admin_id"),
        Index("idx_activity_action", "action"),
        Index("idx_activity_target", "target_type", "target_id"),
    )
