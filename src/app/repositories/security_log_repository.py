from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from src.domain.entities import SecurityLog, Severity


class ISecurityLogRepository(ABC):
    """SecurityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, event: SecurityLog) -> SecurityLog:
        """Create a new security event"""
        pass

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[SecurityLog]:
        """Get security event by ID"""
        pass

    @abstractmethod
    async def update(self, event: SecurityLog) -> SecurityLog:
        """Persist a resolution"""
        pass

    @abstractmethod
    async def get_recent(self, limit: int = 100) -> List[SecurityLog]:
        """Most recent events, newest first"""
        pass

    @abstractmethod
    async def get_unresolved(
        self, severity: Optional[Severity] = None, limit: int = 100
    ) -> List[SecurityLog]:
        """Unresolved events, optionally of one severity"""
        pass

    @abstractmethod
    async def get_by_ip(self, ip: str, limit: int = 50) -> List[SecurityLog]:
        """Events originating from one IP"""
        pass

    @abstractmethod
    async def get_critical(self) -> List[SecurityLog]:
        """Unresolved critical events"""
        pass

    @abstractmethod
    async def get_stats(self, since: datetime) -> List[Dict[str, Any]]:
        """
        Per-type counts since a timestamp.

        Returns:
            List of {"type", "count", "critical_count", "high_count"},
            ordered by count DESC
        """
        pass
