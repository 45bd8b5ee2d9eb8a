"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the admin auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities import AdminPrincipal


# ============================================================================
# Commands
# ============================================================================


class LoginCommand(BaseModel):
    """Admin login intent, built by the API layer after validation"""

    email: str
    password: str
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    use_session: bool = False


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for admin login use case"""

    success: bool = True
    message: str = "Login successful"
    token: str
    expires_in: int
    admin: AdminPrincipal
    session_id: Optional[str] = None


class LogoutResponse(BaseModel):
    """Response for admin logout use case"""

    success: bool = True
    message: str = "Logged out"
    sessions_revoked: int
