"""
Audit Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import ActivityAction, SecurityEventType, Severity, TargetType


class ActivityLogInfo(BaseModel):
    """Single activity entry in responses"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    admin_id: UUID
    action: ActivityAction
    target_type: TargetType
    target_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    ip: str
    user_agent: Optional[str] = None
    timestamp: datetime


class SecurityEventInfo(BaseModel):
    """Single security event in responses"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: SecurityEventType
    severity: Severity
    message: str
    details: Optional[Dict[str, Any]] = None
    ip: str
    user_agent: Optional[str] = None
    user_id: Optional[UUID] = None
    resolved: bool
    resolved_by: Optional[UUID] = None
    resolved_at: Optional[datetime] = None
    timestamp: datetime


class ActivityLogsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    activity: List[ActivityLogInfo]


class SecurityEventsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    events: List[SecurityEventInfo]


class SecurityStat(BaseModel):
    type: str
    count: int
    critical_count: int
    high_count: int


class SecurityStatsResponse(BaseModel):
    success: bool = True
    message: str = "OK"
    days: int
    stats: List[SecurityStat]


class ResolveSecurityEventResponse(BaseModel):
    success: bool = True
    message: str = "Security event resolved"
    event: SecurityEventInfo
