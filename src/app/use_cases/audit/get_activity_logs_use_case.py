"""
Get Activity Logs Use Case

Recent admin activity, optionally narrowed to one admin or one action.
"""

from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityAction
from .dtos import ActivityLogInfo, ActivityLogsResponse


class GetActivityLogsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        admin_id: Optional[UUID] = None,
        action: Optional[ActivityAction] = None,
        limit: int = 50,
    ) -> Result[ActivityLogsResponse]:
        async with self.uow:
            if admin_id is not None:
                entries = await self.uow.activity_logs.get_by_admin(admin_id, limit=limit)
            elif action is not None:
                entries = await self.uow.activity_logs.get_by_action(action, limit=limit)
            else:
                entries = await self.uow.activity_logs.get_recent(limit=limit)

            return Return.ok(
                ActivityLogsResponse(
                    activity=[ActivityLogInfo.model_validate(e) for e in entries]
                )
            )
