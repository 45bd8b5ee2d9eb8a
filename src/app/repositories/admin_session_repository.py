from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import AdminSession


class IAdminSessionRepository(ABC):
    """AdminSession repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[AdminSession]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session_obj: AdminSession) -> AdminSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session_obj: AdminSession) -> AdminSession:
        """Update existing session"""
        pass

    @abstractmethod
    async def revoke_all_by_admin_id(self, admin_id: UUID) -> int:
        """Revoke all active sessions of an admin, returns the count"""
        pass
