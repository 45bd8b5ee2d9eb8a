from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.context import AdminContext
from src.api.utils.roles import require_moderator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import ActivityLogsResponse, GetActivityLogsUseCase
from src.depends import get_unit_of_work
from src.domain.entities import ActivityAction

router = APIRouter(prefix="/admin/activity")


@router.get("", status_code=status.HTTP_200_OK, response_model=ActivityLogsResponse)
async def list_activity(
    admin_id: Optional[UUID] = None,
    action: Optional[ActivityAction] = None,
    limit: int = Query(50, ge=1, le=500),
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Recent admin activity, newest first; filter by admin or action."""
    result = await GetActivityLogsUseCase(uow).execute(
        admin_id=admin_id, action=action, limit=limit
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value
