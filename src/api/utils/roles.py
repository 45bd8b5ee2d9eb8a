"""
Role Gate

Third stage of the admin request chain.
"""

from typing import Iterable, Optional, Union

from fastapi import Depends, Request

from libs.result import Error
from src.api.error import ClientError
from src.api.utils.context import AdminContext
from src.api.utils.rate_limit import admin_rate_limit
from src.app.services.audit_service import AuditService
from src.depends import get_audit_service
from src.domain.entities import (
    ActivityAction,
    AdminPrincipal,
    AdminRole,
    SecurityEventType,
    Severity,
    TargetType,
)


class RoleGate:
    """
    Dependency that admits only the given roles.

    A refused admin always leaves one unauthorized_access activity entry and
    one unauthorized_access security event (medium) behind before the 403.

    Returns:
        AdminContext for the handler
    """

    def __init__(self, allowed_roles: Union[AdminRole, str, Iterable[Union[AdminRole, str]]]):
        if isinstance(allowed_roles, (AdminRole, str)):
            allowed_roles = [allowed_roles]
        self.allowed_roles = [AdminRole(role) for role in allowed_roles]

    async def __call__(
        self,
        request: Request,
        admin: Optional[AdminPrincipal] = Depends(admin_rate_limit),
        audit: AuditService = Depends(get_audit_service),
    ) -> AdminContext:
        if admin is None:
            raise ClientError(Error("UNAUTHENTICATED", "Authentication required"))

        ctx = AdminContext.from_request(request, admin, audit)

        if admin.role not in self.allowed_roles:
            required = [role.value for role in self.allowed_roles]

            await audit.record_activity(
                admin_id=admin.id,
                action=ActivityAction.unauthorized_access,
                target_type=TargetType.system,
                ip=ctx.ip,
                user_agent=ctx.user_agent,
                details={
                    "required_role": required,
                    "actual_role": admin.role.value,
                    "path": ctx.path,
                },
            )
            await audit.record_security_event(
                SecurityEventType.unauthorized_access,
                f"Admin attempted to access {ctx.path} without sufficient permissions",
                ip=ctx.ip,
                severity=Severity.medium,
                user_agent=ctx.user_agent,
                details={
                    "admin_id": admin.id,
                    "admin_email": admin.email,
                    "required_role": required,
                    "actual_role": admin.role.value,
                },
            )
            raise ClientError(Error("FORBIDDEN", "Insufficient permissions"))

        return ctx


require_super_admin = RoleGate(AdminRole.super_admin)
require_moderator = RoleGate([AdminRole.super_admin, AdminRole.moderator])
require_admin = RoleGate(list(AdminRole))
