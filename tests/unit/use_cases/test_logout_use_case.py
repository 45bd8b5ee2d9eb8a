from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.auth import AdminLogoutUseCase
from src.domain.base import utc_now
from src.domain.entities import AdminSession


@pytest.fixture
def uow(mock_uow):
    mock_uow.admin_sessions = MagicMock()
    mock_uow.admin_sessions.get_by_id = AsyncMock()
    mock_uow.admin_sessions.update = AsyncMock()
    mock_uow.admin_sessions.revoke_all_by_admin_id = AsyncMock(return_value=3)
    return mock_uow


def make_session(admin_id):
    return AdminSession(admin_id=admin_id, expires_at=utc_now() + timedelta(days=1))


@pytest.mark.asyncio
async def test_revokes_own_session(uow):
    admin_id = uuid4()
    session = make_session(admin_id)
    uow.admin_sessions.get_by_id.return_value = session

    result = await AdminLogoutUseCase(uow).execute(admin_id, session_id=str(session.id))

    assert result.value.sessions_revoked == 1
    assert session.revoked is True
    assert session.revoked_at is not None
    uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_ignores_someone_elses_session(uow):
    session = make_session(uuid4())
    uow.admin_sessions.get_by_id.return_value = session

    result = await AdminLogoutUseCase(uow).execute(uuid4(), session_id=str(session.id))

    assert result.value.sessions_revoked == 0
    assert session.revoked is False
    uow.admin_sessions.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_token_only_logout_succeeds(uow):
    result = await AdminLogoutUseCase(uow).execute(uuid4())

    assert result.is_ok()
    assert result.value.sessions_revoked == 0
    uow.admin_sessions.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_all_sessions(uow):
    admin_id = uuid4()

    result = await AdminLogoutUseCase(uow).execute(admin_id, all_sessions=True)

    assert result.value.sessions_revoked == 3
    uow.admin_sessions.revoke_all_by_admin_id.assert_awaited_once_with(admin_id)
