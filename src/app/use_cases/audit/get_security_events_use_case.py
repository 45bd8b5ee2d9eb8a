"""
Get Security Events Use Case
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Severity
from .dtos import SecurityEventInfo, SecurityEventsResponse


class GetSecurityEventsUseCase:
    """
    Business Rules:
    - critical: unresolved critical events only
    - unresolved: unresolved events, optionally of one severity
    - ip: events from one address
    - otherwise the most recent events
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        unresolved: bool = False,
        critical: bool = False,
        severity: Optional[Severity] = None,
        ip: Optional[str] = None,
        limit: int = 100,
    ) -> Result[SecurityEventsResponse]:
        async with self.uow:
            if critical:
                events = await self.uow.security_logs.get_critical()
            elif unresolved:
                events = await self.uow.security_logs.get_unresolved(severity, limit=limit)
            elif ip:
                events = await self.uow.security_logs.get_by_ip(ip, limit=limit)
            else:
                events = await self.uow.security_logs.get_recent(limit=limit)

            return Return.ok(
                SecurityEventsResponse(
                    events=[SecurityEventInfo.model_validate(e) for e in events]
                )
            )
