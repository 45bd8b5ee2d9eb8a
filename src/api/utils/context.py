from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from fastapi import Request

from src.app.services.audit_service import AuditService
from src.domain.entities import AdminPrincipal


def client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def user_agent(request: Request) -> Optional[str]:
    return request.headers.get("user-agent")


@dataclass
class AdminContext:
    """What the request chain hands to an admin handler once every stage passed."""

    admin: AdminPrincipal
    audit: AuditService
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    method: str = "GET"
    path: str = "/"
    query: Dict[str, str] = field(default_factory=dict)
    path_params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_request(
        cls, request: Request, admin: AdminPrincipal, audit: AuditService
    ) -> "AdminContext":
        return cls(
            admin=admin,
            audit=audit,
            ip=client_ip(request),
            user_agent=user_agent(request),
            method=request.method,
            path=request.url.path,
            query=dict(request.query_params),
            path_params=dict(request.path_params),
        )
