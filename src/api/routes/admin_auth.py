"""
Admin Auth Routes - login, logout and the current admin
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import raise_for_error
from src.api.utils.activity import log_activity
from src.api.utils.context import AdminContext, client_ip, user_agent
from src.api.utils.rate_limit import login_rate_limit
from src.api.utils.roles import require_admin
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AdminLoginUseCase,
    AdminLogoutUseCase,
    LoginCommand,
    LoginResponse,
    LogoutResponse,
)
from src.depends import get_audit_service, get_unit_of_work
from src.domain.entities import ActivityAction, AdminPrincipal, TargetType

router = APIRouter(prefix="/admin/auth")


class LoginRequest(BaseModel):
    """Admin login HTTP request payload"""

    email: EmailStr = Field(..., description="Admin email address")
    password: str = Field(..., min_length=1, description="Admin password")
    use_session: bool = Field(
        False, description="Also open a server-side session and set the session cookie"
    )


class LogoutRequest(BaseModel):
    all_sessions: bool = False


class MeResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    admin: AdminPrincipal


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
)
async def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    rate_limit_key: str = Depends(login_rate_limit),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditService = Depends(get_audit_service),
):
    """
    Admin Login

    Returns a 24h admin token. With use_session, also sets the
    HTTP-only session cookie. Successful logins do not count towards
    the login rate limit.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 403 Forbidden: ACCOUNT_LOCKED, ACCOUNT_INACTIVE
        - 429 Too Many Requests: RATE_LIMITED
    """
    command = LoginCommand(
        email=body.email,
        password=body.password,
        ip=client_ip(request),
        user_agent=user_agent(request),
        use_session=body.use_session,
    )
    config = request.app.state.config
    result = await AdminLoginUseCase(uow, audit, config).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    request.app.state.rate_limiter.release(rate_limit_key)

    login_response = result.value
    if login_response.session_id:
        response.set_cookie(
            key=config.SESSION_COOKIE_NAME,
            value=login_response.session_id,
            max_age=config.SESSION_TTL_DAYS * 24 * 3600,
            httponly=True,
            secure=config.SESSION_COOKIE_SECURE,
            samesite="strict",
        )
    return login_response


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
@log_activity(ActivityAction.admin_logout, TargetType.admin)
async def logout(
    request: Request,
    response: Response,
    body: Optional[LogoutRequest] = None,
    ctx: AdminContext = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Revoke the caller's session (or all of them) and clear the cookie."""
    config = request.app.state.config
    result = await AdminLogoutUseCase(uow).execute(
        ctx.admin.id,
        session_id=request.cookies.get(config.SESSION_COOKIE_NAME),
        all_sessions=body.all_sessions if body else False,
    )
    if result.is_err():
        raise_for_error(result.error)

    response.delete_cookie(config.SESSION_COOKIE_NAME)
    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def me(ctx: AdminContext = Depends(require_admin)):
    return MeResponse(admin=ctx.admin)
