"""
Get Review Stats Use Case

Approved-review averages and visitor analytics per state.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import (
    AllStatesStatsResponse,
    StateAnalytics,
    StateAnalyticsResponse,
    StateStats,
    StateStatsResponse,
)


class GetReviewStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def for_state(self, state: str) -> Result[StateStatsResponse]:
        async with self.uow:
            row = await self.uow.reviews.get_state_stats(state)
        return Return.ok(StateStatsResponse(stats=StateStats(**row)))

    async def for_all_states(self) -> Result[AllStatesStatsResponse]:
        async with self.uow:
            rows = await self.uow.reviews.get_all_states_stats()
        return Return.ok(AllStatesStatsResponse(stats=[StateStats(**row) for row in rows]))

    async def state_analytics(self) -> Result[StateAnalyticsResponse]:
        """
        Visitors per state over approved, ToS-accepted reviews.

        A user who reviewed the same state several times is one visitor;
        avg_revisit averages their times_used.
        """
        async with self.uow:
            rows = await self.uow.reviews.get_state_analytics()
        return Return.ok(
            StateAnalyticsResponse(analytics=[StateAnalytics(**row) for row in rows])
        )
