"""
Moderate Review Use Case

Approve, reject or delete a review.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ReviewInfo, ReviewResponse

REVIEW_NOT_FOUND = Error("REVIEW_NOT_FOUND", "Review not found")


class ModerateReviewUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def set_approval(self, review_id: UUID, approved: bool) -> Result[ReviewResponse]:
        async with self.uow:
            review = await self.uow.reviews.get_by_id(review_id)
            if review is None:
                return Return.err(REVIEW_NOT_FOUND)

            review.is_approved = approved
            review = await self.uow.reviews.update(review)
            await self.uow.commit()

            return Return.ok(
                ReviewResponse(
                    message="Review approved" if approved else "Review rejected",
                    review=ReviewInfo.model_validate(review),
                )
            )

    async def delete(self, review_id: UUID) -> Result[ReviewResponse]:
        async with self.uow:
            review = await self.uow.reviews.get_by_id(review_id)
            if review is None:
                return Return.err(REVIEW_NOT_FOUND)

            await self.uow.reviews.delete(review)
            await self.uow.commit()

        return Return.ok(ReviewResponse(message="Review deleted"))
