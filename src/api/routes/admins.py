"""
Admin Management Routes - super admins only
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.activity import log_activity
from src.api.utils.context import AdminContext
from src.api.utils.roles import require_super_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admins import (
    AdminResponse,
    AdminsResponse,
    CreateAdminCommand,
    CreateAdminUseCase,
    ListAdminsUseCase,
    UpdateAdminCommand,
    UpdateAdminUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import ActivityAction, AdminRole, TargetType

router = APIRouter(prefix="/admin/admins")


class CreateAdminRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: AdminRole = AdminRole.viewer


@router.get("", status_code=status.HTTP_200_OK, response_model=AdminsResponse)
async def list_admins(
    ctx: AdminContext = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAdminsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AdminResponse)
@log_activity(ActivityAction.admin_create, TargetType.admin)
async def create_admin(
    body: CreateAdminRequest,
    ctx: AdminContext = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Admin

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = CreateAdminCommand(**body.model_dump())
    result = await CreateAdminUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{id}", status_code=status.HTTP_200_OK, response_model=AdminResponse)
@log_activity(ActivityAction.admin_update, TargetType.admin)
async def update_admin(
    id: UUID,
    body: UpdateAdminCommand,
    ctx: AdminContext = Depends(require_super_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Admin - role, is_active, unlock

    Raises:
        - 400 Bad Request: CANNOT_MODIFY_SELF
        - 404 Not Found: ADMIN_NOT_FOUND
    """
    result = await UpdateAdminUseCase(uow).execute(ctx.admin.id, id, body)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
