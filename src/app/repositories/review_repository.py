from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from src.domain.entities import Review


class IReviewRepository(ABC):
    """Review repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, review_id: UUID) -> Optional[Review]:
        """Get review by ID"""
        pass

    @abstractmethod
    async def list(
        self,
        state: Optional[str] = None,
        approved: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Review]:
        """List reviews, newest first"""
        pass

    @abstractmethod
    async def update(self, review: Review) -> Review:
        """Update existing review"""
        pass

    @abstractmethod
    async def delete(self, review: Review) -> None:
        """Delete a review"""
        pass

    @abstractmethod
    async def get_state_stats(self, state: str) -> Dict[str, Any]:
        """Approved review count, average rating and wage for one state"""
        pass

    @abstractmethod
    async def get_all_states_stats(self) -> List[Dict[str, Any]]:
        """Per-state approved review stats, best rated first"""
        pass

    @abstractmethod
    async def get_state_analytics(self) -> List[Dict[str, Any]]:
        """Unique visitors and average times_used per state, busiest first"""
        pass
