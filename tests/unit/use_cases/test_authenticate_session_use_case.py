from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth import AuthenticateSessionUseCase
from src.domain.base import utc_now
from src.domain.entities import Admin, AdminRole, AdminSession


@pytest.fixture
def admin():
    return Admin(
        email="mod@jamwathq.com",
        password_hash="x",
        first_name="Keisha",
        last_name="Brown",
        role=AdminRole.moderator,
    )


@pytest.fixture
def session(admin):
    return AdminSession(admin_id=admin.id, expires_at=utc_now() + timedelta(days=7))


@pytest.fixture
def uow(mock_uow, admin, session):
    mock_uow.admins = MagicMock()
    mock_uow.admins.get_by_id = AsyncMock(return_value=admin)
    mock_uow.admin_sessions = MagicMock()
    mock_uow.admin_sessions.get_by_id = AsyncMock(return_value=session)
    mock_uow.admin_sessions.update = AsyncMock()
    return mock_uow


@pytest.mark.asyncio
async def test_valid_session(uow, admin, session):
    result = await AuthenticateSessionUseCase(uow).execute(str(session.id))

    assert result.is_ok()
    assert result.value.email == admin.email
    uow.admin_sessions.get_by_id.assert_awaited_once_with(session.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("session_id", [None, ""])
async def test_missing_session_id(uow, session_id):
    result = await AuthenticateSessionUseCase(uow).execute(session_id)

    assert result.error.code == "UNAUTHENTICATED"
    assert result.error.message == "Admin session required"


@pytest.mark.asyncio
async def test_malformed_session_id(uow):
    result = await AuthenticateSessionUseCase(uow).execute("not-a-uuid")

    assert result.error.code == "UNAUTHENTICATED"
    uow.admin_sessions.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_session(uow):
    uow.admin_sessions.get_by_id.return_value = None

    result = await AuthenticateSessionUseCase(uow).execute(str(uuid4()))

    assert result.error.code == "UNAUTHENTICATED"
    assert result.error.message == "Invalid or expired session"


@pytest.mark.asyncio
async def test_expired_session(uow, session):
    session.expires_at = utc_now() - timedelta(seconds=1)

    result = await AuthenticateSessionUseCase(uow).execute(str(session.id))

    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_revoked_session(uow, session):
    session.revoke(utc_now())

    result = await AuthenticateSessionUseCase(uow).execute(str(session.id))

    assert result.error.code == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_inactive_admin_revokes_session(uow, admin, session):
    admin.is_active = False

    result = await AuthenticateSessionUseCase(uow).execute(str(session.id))

    assert result.error.code == "ACCOUNT_INACTIVE"
    assert session.revoked is True
    uow.admin_sessions.update.assert_awaited_once_with(session)
    uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_missing_admin_revokes_session(uow, session):
    uow.admins.get_by_id.return_value = None

    result = await AuthenticateSessionUseCase(uow).execute(str(session.id))

    assert result.error.code == "UNAUTHENTICATED"
    assert session.revoked is True
