"""
Admin Management Use Cases
"""

from .list_admins_use_case import ListAdminsUseCase
from .create_admin_use_case import CreateAdminUseCase
from .update_admin_use_case import UpdateAdminUseCase
from .dtos import AdminResponse, AdminsResponse, CreateAdminCommand, UpdateAdminCommand

__all__ = [
    "ListAdminsUseCase",
    "CreateAdminUseCase",
    "UpdateAdminUseCase",
    "AdminResponse",
    "AdminsResponse",
    "CreateAdminCommand",
    "UpdateAdminCommand",
]
