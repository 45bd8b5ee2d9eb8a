"""
Public Review Routes

Read-only listings for the public site. Switched off (503) while
REVIEW_API_ENABLED is false. Every /api route shares the public rate limit.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from libs.result import Error
from src.api.error import ClientError, raise_for_error
from src.api.utils.rate_limit import public_rate_limit
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reviews import (
    AllStatesStatsResponse,
    GetReviewStatsUseCase,
    ListReviewsUseCase,
    ReviewsResponse,
    StateAnalyticsResponse,
    StateStatsResponse,
)
from src.depends import get_unit_of_work


async def require_review_api(request: Request) -> None:
    if not request.app.state.config.REVIEW_API_ENABLED:
        raise ClientError(
            Error(
                "FEATURE_UNAVAILABLE",
                "Review features are under development. Database integration required.",
            ),
            extra={"underDevelopment": True},
        )


router = APIRouter(
    prefix="/reviews",
    dependencies=[Depends(public_rate_limit), Depends(require_review_api)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=ReviewsResponse)
async def list_public_reviews(
    state: Optional[str] = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Approved reviews only."""
    result = await ListReviewsUseCase(uow).execute(
        state=state, approved=True, limit=limit, offset=offset
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=AllStatesStatsResponse)
async def all_states_stats(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetReviewStatsUseCase(uow).for_all_states()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/analytics", status_code=status.HTTP_200_OK, response_model=StateAnalyticsResponse
)
async def state_analytics(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Unique visitors and average revisits per state, busiest first."""
    result = await GetReviewStatsUseCase(uow).state_analytics()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/stats/{state}", status_code=status.HTTP_200_OK, response_model=StateStatsResponse)
async def state_stats(state: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetReviewStatsUseCase(uow).for_state(state)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
