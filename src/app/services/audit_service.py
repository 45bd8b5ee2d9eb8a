"""
Audit Service

Writes activity and security log entries on a best-effort basis: a store
failure is reported to the application log and never reaches the caller.
"""

import json
import logging
from typing import Any, Dict, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    ActivityAction,
    ActivityLog,
    SecurityEventType,
    SecurityLog,
    Severity,
    TargetType,
)

logger = logging.getLogger(__name__)

REDACT_KEYS = {
    "password",
    "new_password",
    "secret",
    "token",
    "access_token",
    "authorization",
    "two_factor_secret",
}

UNKNOWN_IP = "unknown"


def redact(obj: Any) -> Any:
    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            if isinstance(k, str) and k.lower() in REDACT_KEYS:
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(obj, list):
        return [redact(x) for x in obj]
    return obj


def _safe_json(value: Any) -> Any:
    # UUIDs, datetimes and enums become strings so the JSON column accepts them
    return json.loads(json.dumps(value, default=str))


class AuditService:
    """
    Audit sink for the admin request chain.

    Each write runs in its own transaction on the given unit of work so a
    failed audit write cannot roll back, or be rolled back by, the handler.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record_activity(
        self,
        admin_id: UUID,
        action: ActivityAction,
        target_type: TargetType,
        ip: Optional[str],
        user_agent: Optional[str] = None,
        target_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> Optional[ActivityLog]:
        """
        Record one admin activity.

        Returns:
            The stored entry, or None if the store rejected it
        """
        entry = ActivityLog(
            admin_id=admin_id,
            action=action,
            target_type=target_type,
            target_id=target_id,
            details=_safe_json(redact(details or {})),
            ip=ip or UNKNOWN_IP,
            user_agent=user_agent,
        )
        logger.info(
            "AUDIT action=%s admin=%s target=%s:%s ip=%s",
            action.value, admin_id, target_type.value, target_id, entry.ip,
        )
        try:
            async with self.uow:
                entry = await self.uow.activity_logs.create(entry)
                await self.uow.commit()
            return entry
        except Exception:
            logger.exception("Failed to store activity log action=%s", action.value)
            return None

    async def record_security_event(
        self,
        event_type: SecurityEventType,
        message: str,
        ip: Optional[str],
        severity: Severity = Severity.medium,
        user_agent: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[UUID] = None,
    ) -> Optional[SecurityLog]:
        """
        Record one security event.

        Returns:
            The stored event, or None if the store rejected it
        """
        event = SecurityLog(
            type=event_type,
            severity=severity,
            message=message,
            details=_safe_json(redact(details or {})),
            ip=ip or UNKNOWN_IP,
            user_agent=user_agent,
            user_id=user_id,
        )
        logger.warning(
            "SECURITY type=%s severity=%s ip=%s message=%s",
            event_type.value, severity.value, event.ip, message,
        )
        try:
            async with self.uow:
                event = await self.uow.security_logs.create(event)
                await self.uow.commit()
            return event
        except Exception:
            logger.exception("Failed to store security event type=%s", event_type.value)
            return None
