"""
Audit Use Cases

Reading the activity and security logs, and resolving security events.
"""

from .get_activity_logs_use_case import GetActivityLogsUseCase
from .get_security_events_use_case import GetSecurityEventsUseCase
from .get_security_stats_use_case import GetSecurityStatsUseCase
from .resolve_security_event_use_case import ResolveSecurityEventUseCase
from .dtos import (
    ActivityLogInfo,
    ActivityLogsResponse,
    SecurityEventInfo,
    SecurityEventsResponse,
    SecurityStatsResponse,
    ResolveSecurityEventResponse,
)

__all__ = [
    "GetActivityLogsUseCase",
    "GetSecurityEventsUseCase",
    "GetSecurityStatsUseCase",
    "ResolveSecurityEventUseCase",
    "ActivityLogInfo",
    "ActivityLogsResponse",
    "SecurityEventInfo",
    "SecurityEventsResponse",
    "SecurityStatsResponse",
    "ResolveSecurityEventResponse",
]
