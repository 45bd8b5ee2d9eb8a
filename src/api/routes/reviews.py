"""
Review Moderation Routes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.activity import log_activity
from src.api.utils.context import AdminContext
from src.api.utils.roles import require_moderator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reviews import (
    ListReviewsUseCase,
    ModerateReviewUseCase,
    ReviewResponse,
    ReviewsResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import ActivityAction, TargetType

router = APIRouter(prefix="/admin/reviews")


@router.get("", status_code=status.HTTP_200_OK, response_model=ReviewsResponse)
async def list_reviews(
    state: Optional[str] = None,
    approved: Optional[bool] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListReviewsUseCase(uow).execute(
        state=state, approved=approved, limit=limit, offset=offset
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{id}/approve", status_code=status.HTTP_200_OK, response_model=ReviewResponse)
@log_activity(ActivityAction.review_approve, TargetType.review)
async def approve_review(
    id: UUID,
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ModerateReviewUseCase(uow).set_approval(id, approved=True)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{id}/reject", status_code=status.HTTP_200_OK, response_model=ReviewResponse)
@log_activity(ActivityAction.review_reject, TargetType.review)
async def reject_review(
    id: UUID,
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ModerateReviewUseCase(uow).set_approval(id, approved=False)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{id}", status_code=status.HTTP_200_OK, response_model=ReviewResponse)
@log_activity(ActivityAction.review_delete, TargetType.review)
async def delete_review(
    id: UUID,
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: REVIEW_NOT_FOUND
    """
    result = await ModerateReviewUseCase(uow).delete(id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
