"""
Review Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import Gender


class ReviewInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_first_name: str
    user_gender: Gender
    state: str
    job_title: str
    employer: str
    city: str
    wages: float
    hours_per_week: int
    rating: int
    experience: str
    times_used: int
    is_approved: bool
    created_at: datetime


class ReviewsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    reviews: List[ReviewInfo]


class ReviewResponse(BaseModel):
    success: bool = True
    message: str
    review: Optional[ReviewInfo] = None


class StateStats(BaseModel):
    state: str
    review_count: int
    avg_rating: float
    avg_wage: float


class StateStatsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    stats: StateStats


class AllStatesStatsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    stats: List[StateStats]


class StateAnalytics(BaseModel):
    state: str
    total_visitors: int
    avg_revisit: float


class StateAnalyticsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    analytics: List[StateAnalytics]
