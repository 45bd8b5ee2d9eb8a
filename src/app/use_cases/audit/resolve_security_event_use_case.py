"""
Resolve Security Event Use Case

The one permitted mutation of a security event.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import ResolveSecurityEventResponse, SecurityEventInfo


class ResolveSecurityEventUseCase:
    """
    Business Rules:
    - unresolved -> resolved only; resolving twice is a conflict
    - Records who resolved it and when; severity and payload never change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, event_id: UUID, admin_id: UUID
    ) -> Result[ResolveSecurityEventResponse]:
        async with self.uow:
            event = await self.uow.security_logs.get_by_id(event_id)
            if event is None:
                return Return.err(
                    Error("SECURITY_EVENT_NOT_FOUND", "Security event not found")
                )

            if not event.resolve(admin_id, utc_now()):
                return Return.err(
                    Error("ALREADY_RESOLVED", "Security event is already resolved")
                )

            event = await self.uow.security_logs.update(event)
            await self.uow.commit()

            return Return.ok(
                ResolveSecurityEventResponse(event=SecurityEventInfo.model_validate(event))
            )
