"""
List Reviews Use Case
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ReviewInfo, ReviewsResponse


class ListReviewsUseCase:
    """
    Business Rules:
    - The public site passes approved=True; moderators may see everything
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        state: Optional[str] = None,
        approved: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ReviewsResponse]:
        async with self.uow:
            reviews = await self.uow.reviews.list(
                state=state, approved=approved, limit=limit, offset=offset
            )
            return Return.ok(
                ReviewsResponse(reviews=[ReviewInfo.model_validate(r) for r in reviews])
            )
