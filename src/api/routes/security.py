"""
Security Log Routes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.api.utils.activity import log_activity
from src.api.utils.context import AdminContext
from src.api.utils.roles import require_moderator, require_super_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    GetSecurityEventsUseCase,
    GetSecurityStatsUseCase,
    ResolveSecurityEventResponse,
    ResolveSecurityEventUseCase,
    SecurityEventsResponse,
    SecurityStatsResponse,
)
from src.depends import get_unit_of_work
from src.domain.entities import ActivityAction, Severity, TargetType

router = APIRouter(prefix="/admin/security")


@router.get("/events", status_code=status.HTTP_200_OK, response_model=SecurityEventsResponse)
async def list_security_events(
    unresolved: bool = False,
    critical: bool = False,
    severity: Optional[Severity] = None,
    ip: Optional[str] = None,
    limit: int = Query(100, ge=1, le=500),
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetSecurityEventsUseCase(uow).execute(
        unresolved=unresolved, critical=critical, severity=severity, ip=ip, limit=limit
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=SecurityStatsResponse)
async def security_stats(
    days: int = Query(7, ge=1, le=365),
    ctx: AdminContext = Depends(require_moderator),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Event counts per type over the last `days` days."""
    result = await GetSecurityStatsUseCase(uow).execute(days=days)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/events/{id}/resolve",
    status_code=status.HTTP_200_OK,
    response_model=ResolveSecurityEventResponse,
)
@log_activity(ActivityAction.settings_update, TargetType.system)
async def resolve_security_event(
    id: UUID,
    ctx: AdminContext = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resolve Security Event

    Raises:
        - 404 Not Found: SECURITY_EVENT_NOT_FOUND
        - 409 Conflict: ALREADY_RESOLVED
    """
    result = await ResolveSecurityEventUseCase(uow).execute(id, ctx.admin.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
