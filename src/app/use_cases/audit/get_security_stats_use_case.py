"""
Get Security Stats Use Case
"""

from datetime import timedelta

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import SecurityStat, SecurityStatsResponse


class GetSecurityStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, days: int = 7) -> Result[SecurityStatsResponse]:
        since = utc_now() - timedelta(days=days)
        async with self.uow:
            rows = await self.uow.security_logs.get_stats(since)

        return Return.ok(
            SecurityStatsResponse(days=days, stats=[SecurityStat(**row) for row in rows])
        )
