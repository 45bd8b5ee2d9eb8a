from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.admins import UpdateAdminCommand, UpdateAdminUseCase
from src.domain.base import utc_now
from src.domain.entities import Admin, AdminRole


@pytest.fixture
def target():
    return Admin(
        email="mod@jamwathq.com",
        password_hash="x",
        first_name="Keisha",
        last_name="Brown",
        role=AdminRole.moderator,
    )


@pytest.fixture
def uow(mock_uow, target):
    mock_uow.admins = MagicMock()
    mock_uow.admins.get_by_id = AsyncMock(return_value=target)
    mock_uow.admins.update = AsyncMock(side_effect=lambda admin: admin)
    mock_uow.admin_sessions = MagicMock()
    mock_uow.admin_sessions.revoke_all_by_admin_id = AsyncMock(return_value=2)
    return mock_uow


@pytest.mark.asyncio
async def test_change_role(uow, target):
    result = await UpdateAdminUseCase(uow).execute(
        uuid4(), target.id, UpdateAdminCommand(role=AdminRole.viewer)
    )

    assert result.is_ok()
    assert result.value.admin.role == AdminRole.viewer
    uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_deactivation_revokes_sessions(uow, target):
    result = await UpdateAdminUseCase(uow).execute(
        uuid4(), target.id, UpdateAdminCommand(is_active=False)
    )

    assert result.value.admin.is_active is False
    uow.admin_sessions.revoke_all_by_admin_id.assert_awaited_once_with(target.id)


@pytest.mark.asyncio
async def test_unlock(uow, target):
    target.login_attempts = 5
    target.locked_until = utc_now() + timedelta(hours=2)

    await UpdateAdminUseCase(uow).execute(uuid4(), target.id, UpdateAdminCommand(unlock=True))

    assert target.login_attempts == 0
    assert target.locked_until is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command",
    [UpdateAdminCommand(role=AdminRole.viewer), UpdateAdminCommand(is_active=False)],
)
async def test_cannot_demote_or_deactivate_self(uow, target, command):
    result = await UpdateAdminUseCase(uow).execute(target.id, target.id, command)

    assert result.error.code == "CANNOT_MODIFY_SELF"
    uow.admins.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_unknown_admin(uow):
    uow.admins.get_by_id.return_value = None

    result = await UpdateAdminUseCase(uow).execute(uuid4(), uuid4(), UpdateAdminCommand())

    assert result.error.code == "ADMIN_NOT_FOUND"
