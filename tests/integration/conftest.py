from datetime import timedelta

import bcrypt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import generate_admin_token
from src.app.services.audit_service import AuditService
from src.depends import get_audit_service, get_unit_of_work
from src.domain.base import utc_now
from src.domain.entities import ActivityLog, Admin, AdminRole, Gender, Review, SecurityLog
from tests.fixtures.config import IntegrationConfig
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest.fixture
def app_config():
    return IntegrationConfig


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(session_factory, app_config):
    from src.api.app import create_app

    app = create_app(app_config)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    async def override_get_audit_service():
        async with session_factory() as audit_session:
            yield AuditService(SqlAlchemyUnitOfWork(audit_session))

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_audit_service] = override_get_audit_service
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admins(db_session, test_data):
    """Seeded admins keyed by role. Passwords are in test_data.json."""
    seeded = {}
    for item in test_data.get_copy("admins"):
        password = item.pop("password")
        role = AdminRole(item.pop("role"))
        admin = Admin(
            **item,
            role=role,
            password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        )
        db_session.add(admin)
        seeded[role] = admin
    await db_session.commit()
    return seeded


@pytest_asyncio.fixture
async def reviews(db_session, test_data):
    from uuid import uuid4

    seeded = []
    now = utc_now()
    for i, item in enumerate(test_data.get_copy("reviews")):
        review = Review(
            **{**item, "user_gender": Gender(item["user_gender"])},
            user_id=uuid4(),
            tos_accepted=True,
            tos_accepted_at=now,
            created_at=now - timedelta(minutes=i),
        )
        db_session.add(review)
        seeded.append(review)
    await db_session.commit()
    return seeded


@pytest.fixture
def auth_headers(app_config):
    def _headers(admin: Admin, issued_at=None) -> dict:
        token = generate_admin_token(admin, issued_at=issued_at, config=app_config)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest_asyncio.fixture
async def activity_entries(session_factory):
    async def _fetch():
        async with session_factory() as session:
            result = await session.exec(select(ActivityLog))
            return list(result.all())

    return _fetch


@pytest_asyncio.fixture
async def security_events(session_factory):
    async def _fetch():
        async with session_factory() as session:
            result = await session.exec(select(SecurityLog))
            return list(result.all())

    return _fetch
