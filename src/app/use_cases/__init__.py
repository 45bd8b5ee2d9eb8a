"""
Use Cases

Organized into domain folders:
- auth/: Admin login, logout and request authentication
- admins/: Admin account management
- audit/: Activity and security logs
- reviews/: Review moderation and public listings

Import from subdirectories for better organization.
"""

from .auth import (
    AdminLoginUseCase,
    AdminLogoutUseCase,
    AuthenticateTokenUseCase,
    AuthenticateSessionUseCase,
)
from .admins import (
    ListAdminsUseCase,
    CreateAdminUseCase,
    UpdateAdminUseCase,
)
from .audit import (
    GetActivityLogsUseCase,
    GetSecurityEventsUseCase,
    GetSecurityStatsUseCase,
    ResolveSecurityEventUseCase,
)
from .reviews import (
    ListReviewsUseCase,
    ModerateReviewUseCase,
    GetReviewStatsUseCase,
)

__all__ = [
    # Auth
    "AdminLoginUseCase",
    "AdminLogoutUseCase",
    "AuthenticateTokenUseCase",
    "AuthenticateSessionUseCase",
    # Admins
    "ListAdminsUseCase",
    "CreateAdminUseCase",
    "UpdateAdminUseCase",
    # Audit
    "GetActivityLogsUseCase",
    "GetSecurityEventsUseCase",
    "GetSecurityStatsUseCase",
    "ResolveSecurityEventUseCase",
    # Reviews
    "ListReviewsUseCase",
    "ModerateReviewUseCase",
    "GetReviewStatsUseCase",
]
