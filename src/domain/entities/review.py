"""
Review Entity

A worker's review of a state they worked in on a J-1 program.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now
from .enums import Gender


class Review(SQLModel, table=True):
    """
    Review entity.

    Business Rules:
    - Only approved reviews are visible on the public site
    - Reviews are auto-approved; moderators may reject or delete them
    """

    __tablename__ = "reviews"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(index=True)
    user_first_name: str = Field(max_length=100)
    user_gender: Gender = Field(default=Gender.unknown)

    state: str = Field(max_length=64, index=True)
    job_title: str = Field(max_length=200)
    employer: str = Field(default="", max_length=200)
    city: str = Field(default="", max_length=100)
    wages: float = Field(ge=0)
    hours_per_week: int = Field(ge=1, le=80)
    rating: int = Field(ge=1, le=5)
    experience: str = Field(max_length=2000)
    times_used: int = Field(default=1, ge=1, le=10)

    tos_accepted: bool = Field(default=False)
    tos_accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    is_approved: bool = Field(default=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_review_state_user", "state", "user_id"),)
