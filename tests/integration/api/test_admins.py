import pytest
from httpx import AsyncClient

from src.domain.entities import ActivityAction, AdminRole
from tests.utils.json_compare import exclude_keys


@pytest.mark.asyncio
async def test_super_admin_creates_admin(
    client: AsyncClient, admins, auth_headers, activity_entries
):
    owner = admins[AdminRole.super_admin]

    response = await client.post(
        "/admin/admins",
        json={
            "email": "new.mod@jamwathq.com",
            "password": "NewModPass123!",
            "first_name": "Marlon",
            "last_name": "Grant",
            "role": "moderator",
        },
        headers=auth_headers(owner),
    )

    assert response.status_code == 201
    admin = response.json()["admin"]
    assert exclude_keys(admin, {"id", "last_login", "last_ip", "avatar"}) == {
        "email": "new.mod@jamwathq.com",
        "first_name": "Marlon",
        "last_name": "Grant",
        "role": "moderator",
        "is_active": True,
        "two_factor_enabled": False,
    }

    entries = await activity_entries()
    assert len(entries) == 1
    assert entries[0].action == ActivityAction.admin_create
    body = entries[0].details["body"]
    assert body["email"] == "new.mod@jamwathq.com"
    assert body["password"] == "***REDACTED***"

    login = await client.post(
        "/admin/auth/login",
        json={"email": "new.mod@jamwathq.com", "password": "NewModPass123!"},
    )
    assert login.status_code == 200


@pytest.mark.asyncio
async def test_duplicate_email_is_conflict(client: AsyncClient, admins, auth_headers):
    response = await client.post(
        "/admin/admins",
        json={
            "email": "mod@jamwathq.com",
            "password": "AnotherPass123!",
            "first_name": "Dup",
            "last_name": "Licate",
        },
        headers=auth_headers(admins[AdminRole.super_admin]),
    )

    assert response.status_code == 409
    assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_super_admin_cannot_demote_self(client: AsyncClient, admins, auth_headers):
    owner = admins[AdminRole.super_admin]

    response = await client.patch(
        f"/admin/admins/{owner.id}",
        json={"role": "viewer"},
        headers=auth_headers(owner),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "CANNOT_MODIFY_SELF"


@pytest.mark.asyncio
async def test_deactivated_admin_loses_access(client: AsyncClient, admins, auth_headers):
    owner = admins[AdminRole.super_admin]
    moderator = admins[AdminRole.moderator]
    moderator_headers = auth_headers(moderator)

    response = await client.patch(
        f"/admin/admins/{moderator.id}",
        json={"is_active": False},
        headers=auth_headers(owner),
    )
    assert response.status_code == 200
    assert response.json()["admin"]["is_active"] is False

    me = await client.get("/admin/auth/me", headers=moderator_headers)
    assert me.status_code == 403
    assert me.json()["code"] == "ACCOUNT_INACTIVE"
