"""
Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AdminRole,
    ActivityAction,
    TargetType,
    SecurityEventType,
    Severity,
    Gender,
)

# Export all entities
from .admin import Admin, AdminPrincipal
from .admin_session import AdminSession
from .activity_log import ActivityLog
from .security_log import SecurityLog
from .review import Review

__all__ = [
    # Enums
    "AdminRole",
    "ActivityAction",
    "TargetType",
    "SecurityEventType",
    "Severity",
    "Gender",
    # Entities
    "Admin",
    "AdminPrincipal",
    "AdminSession",
    "ActivityLog",
    "SecurityLog",
    "Review",
]
