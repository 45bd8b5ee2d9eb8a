"""
Review Use Cases
"""

from .list_reviews_use_case import ListReviewsUseCase
from .moderate_review_use_case import ModerateReviewUseCase
from .get_review_stats_use_case import GetReviewStatsUseCase
from .dtos import (
    AllStatesStatsResponse,
    ReviewInfo,
    ReviewResponse,
    ReviewsResponse,
    StateAnalyticsResponse,
    StateStatsResponse,
)

__all__ = [
    "ListReviewsUseCase",
    "ModerateReviewUseCase",
    "GetReviewStatsUseCase",
    "AllStatesStatsResponse",
    "ReviewInfo",
    "ReviewResponse",
    "ReviewsResponse",
    "StateAnalyticsResponse",
    "StateStatsResponse",
]
