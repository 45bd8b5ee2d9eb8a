from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.activity_log_repository import ActivityLogRepository
from src.adapter.repositories.admin_repository import AdminRepository
from src.adapter.repositories.admin_session_repository import AdminSessionRepository
from src.adapter.repositories.review_repository import ReviewRepository
from src.adapter.repositories.security_log_repository import SecurityLogRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.admins = AdminRepository(self.session)
        self.admin_sessions = AdminSessionRepository(self.session)
        self.activity_logs = ActivityLogRepository(self.session)
        self.security_logs = SecurityLogRepository(self.session)
        self.reviews = ReviewRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
