"""
Admin Authentication

First stage of the admin request chain: resolves the caller from a bearer
token or, failing that, the server-side session cookie.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error
from src.api.error import ClientError, ServerError, raise_for_error
from src.api.utils.context import client_ip, user_agent
from src.app.services.audit_service import AuditService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateSessionUseCase, AuthenticateTokenUseCase
from src.depends import get_audit_service, get_unit_of_work
from src.domain.entities import AdminPrincipal

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    uow: UnitOfWork = Depends(get_unit_of_work),
    audit: AuditService = Depends(get_audit_service),
) -> Optional[AdminPrincipal]:
    """
    Resolve the calling admin, if any credential was presented.

    A bearer token takes precedence over the session cookie. Presenting
    no credential at all is not an error here: the caller is anonymous and
    the role gate decides. A credential that fails to check out is.

    Raises:
        ClientError: 401 invalid/expired token, unknown admin or session;
            403 inactive account
        ServerError: credential store unavailable
    """
    config = request.app.state.config

    try:
        if credentials is not None:
            result = await AuthenticateTokenUseCase(uow, audit, config).execute(
                credentials.credentials,
                ip=client_ip(request),
                user_agent=user_agent(request),
            )
        else:
            session_id = request.cookies.get(config.SESSION_COOKIE_NAME)
            if not session_id:
                return None
            result = await AuthenticateSessionUseCase(uow).execute(session_id)
    except SQLAlchemyError:
        logger.exception("Admin authentication failed: credential store unavailable")
        raise ServerError(Error("STORE_UNAVAILABLE", "Authentication store unavailable"))

    if result.is_err():
        raise_for_error(result.error)

    request.state.admin = result.value
    return result.value


async def get_current_admin(
    admin: Optional[AdminPrincipal] = Depends(get_optional_admin),
) -> AdminPrincipal:
    """Like get_optional_admin, but anonymous callers get a 401."""
    if admin is None:
        raise ClientError(Error("UNAUTHENTICATED", "Authentication required"))
    return admin
