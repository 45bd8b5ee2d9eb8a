"""
Admin Rate Limiting

Second stage of the admin request chain. Counts requests per
(client IP, admin id or "anonymous") in the app-owned sliding-window limiter.
"""

from typing import Optional

from fastapi import Depends, Request

from libs.result import Error
from src.api.error import ClientError
from src.api.utils.admin_auth import get_optional_admin
from src.api.utils.context import client_ip, user_agent
from src.app.services.audit_service import AuditService
from src.app.services.rate_limiter import SlidingWindowRateLimiter
from src.depends import get_audit_service
from src.domain.entities import AdminPrincipal, SecurityEventType, Severity


def rate_limit_key(
    ip: Optional[str], admin: Optional[AdminPrincipal], namespace: Optional[str] = None
) -> str:
    key = f"{ip or 'unknown'}-{admin.id if admin else 'anonymous'}"
    return f"{namespace}:{key}" if namespace else key


async def enforce_rate_limit(
    request: Request,
    admin: Optional[AdminPrincipal],
    audit: AuditService,
    window_ms: int,
    max_requests: int,
    namespace: Optional[str] = None,
    message: str = "Too many requests. Please try again later.",
    event_message: str = "Admin API rate limit exceeded",
) -> str:
    """
    Count this request or reject it.

    Returns:
        The limiter key the request was counted under

    Raises:
        ClientError: 429 with retryAfter (window length in seconds); the
            violation is written to the security log first
    """
    limiter: SlidingWindowRateLimiter = request.app.state.rate_limiter
    ip = client_ip(request)

    key = rate_limit_key(ip, admin, namespace)
    decision = limiter.hit(key, window_ms, max_requests)
    if decision.allowed:
        return key

    await audit.record_security_event(
        SecurityEventType.rate_limit_violation,
        event_message,
        ip=ip,
        severity=Severity.medium,
        user_agent=user_agent(request),
        details={
            "admin_id": admin.id if admin else None,
            "admin_email": admin.email if admin else None,
            "path": request.url.path,
            "request_count": decision.count,
        },
    )
    raise ClientError(
        Error("RATE_LIMITED", message),
        extra={"retryAfter": decision.retry_after},
        headers={"Retry-After": str(decision.retry_after)},
    )


class RateLimit:
    """
    Rate-limit dependency for authenticated admin routes.

    window_ms / max_requests default to RATE_WINDOW_MS / RATE_MAX from the
    app config. Returns the (possibly anonymous) admin for the next stage.
    """

    def __init__(self, window_ms: Optional[int] = None, max_requests: Optional[int] = None):
        self.window_ms = window_ms
        self.max_requests = max_requests

    async def __call__(
        self,
        request: Request,
        admin: Optional[AdminPrincipal] = Depends(get_optional_admin),
        audit: AuditService = Depends(get_audit_service),
    ) -> Optional[AdminPrincipal]:
        config = request.app.state.config
        await enforce_rate_limit(
            request,
            admin,
            audit,
            window_ms=self.window_ms or config.RATE_WINDOW_MS,
            max_requests=self.max_requests or config.RATE_MAX,
        )
        return admin


admin_rate_limit = RateLimit()


async def login_rate_limit(
    request: Request,
    audit: AuditService = Depends(get_audit_service),
) -> str:
    """
    Per-IP limit on login attempts; runs before any credential check.

    Returns the limiter key so the login route can release the hit once the
    credentials check out. Only failed attempts stay on the counter.
    """
    config = request.app.state.config
    return await enforce_rate_limit(
        request,
        None,
        audit,
        window_ms=config.RATE_WINDOW_MS,
        max_requests=config.LOGIN_RATE_MAX,
        namespace="login",
        message="Too many login attempts. Please try again later.",
        event_message="Admin login rate limit exceeded",
    )


async def public_rate_limit(
    request: Request,
    audit: AuditService = Depends(get_audit_service),
) -> None:
    """Per-IP limit for the public /api routes."""
    config = request.app.state.config
    await enforce_rate_limit(
        request,
        None,
        audit,
        window_ms=config.RATE_WINDOW_MS,
        max_requests=config.PUBLIC_RATE_MAX,
        namespace="api",
        message="Too many requests. Please slow down.",
        event_message="Public API rate limit exceeded",
    )
