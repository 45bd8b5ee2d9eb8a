from abc import ABC, abstractmethod

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.app.repositories.admin_repository import IAdminRepository
from src.app.repositories.admin_session_repository import IAdminSessionRepository
from src.app.repositories.review_repository import IReviewRepository
from src.app.repositories.security_log_repository import ISecurityLogRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    admins: IAdminRepository
    admin_sessions: IAdminSessionRepository
    activity_logs: IActivityLogRepository
    security_logs: ISecurityLogRepository
    reviews: IReviewRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
