"""
Admin Management DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import AdminPrincipal, AdminRole


class CreateAdminCommand(BaseModel):
    email: str
    password: str
    first_name: str
    last_name: str
    role: AdminRole = AdminRole.viewer


class UpdateAdminCommand(BaseModel):
    """Fields left as None are not changed"""

    role: Optional[AdminRole] = None
    is_active: Optional[bool] = None
    unlock: bool = False


class AdminResponse(BaseModel):
    success: bool = True
    message: str
    admin: AdminPrincipal


class AdminsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    admins: List[AdminPrincipal]
