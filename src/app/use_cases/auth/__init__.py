"""
Authentication Use Cases

Admin login/logout and request authentication.
"""

from .login_use_case import AdminLoginUseCase
from .logout_use_case import AdminLogoutUseCase
from .authenticate_token_use_case import AuthenticateTokenUseCase
from .authenticate_session_use_case import AuthenticateSessionUseCase
from .dtos import LoginCommand, LoginResponse, LogoutResponse

__all__ = [
    # Use Cases
    "AdminLoginUseCase",
    "AdminLogoutUseCase",
    "AuthenticateTokenUseCase",
    "AuthenticateSessionUseCase",
    # DTOs
    "LoginCommand",
    "LoginResponse",
    "LogoutResponse",
]
