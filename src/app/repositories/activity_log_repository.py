from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import ActivityAction, ActivityLog


class IActivityLogRepository(ABC):
    """ActivityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: ActivityLog) -> ActivityLog:
        """Create a new activity entry (immutable)"""
        pass

    @abstractmethod
    async def get_recent(self, limit: int = 50) -> List[ActivityLog]:
        """Most recent entries, newest first"""
        pass

    @abstractmethod
    async def get_by_admin(self, admin_id: UUID, limit: int = 50) -> List[ActivityLog]:
        """Entries written for one admin, newest first"""
        pass

    @abstractmethod
    async def get_by_action(self, action: ActivityAction, limit: int = 100) -> List[ActivityLog]:
        """Entries of one action type, newest first"""
        pass
