from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Admin


class IAdminRepository(ABC):
    """Admin repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Admin]:
        """Get admin by normalised email address"""
        pass

    @abstractmethod
    async def get_by_id(self, admin_id: UUID) -> Optional[Admin]:
        """Get admin by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Admin]:
        """List all admins, newest first"""
        pass

    @abstractmethod
    async def create(self, admin: Admin) -> Admin:
        """Create a new admin"""
        pass

    @abstractmethod
    async def update(self, admin: Admin) -> Admin:
        """Update existing admin"""
        pass
