import pytest
from httpx import AsyncClient

from src.domain.entities import ActivityAction, AdminRole, SecurityEventType, Severity, TargetType


@pytest.mark.asyncio
async def test_viewer_is_refused_moderator_route(
    client: AsyncClient, admins, auth_headers, activity_entries, security_events
):
    """
    Given a viewer with a valid token
    When they call a moderator-only endpoint
    Then the request fails with 403 FORBIDDEN
    And exactly one unauthorized_access activity entry is written
    And exactly one medium unauthorized_access security event is written
    """
    viewer = admins[AdminRole.viewer]

    response = await client.get("/admin/reviews", headers=auth_headers(viewer))

    assert response.status_code == 403
    data = response.json()
    assert data == {
        "success": False,
        "message": "Insufficient permissions",
        "code": "FORBIDDEN",
    }

    entries = await activity_entries()
    assert len(entries) == 1
    entry = entries[0]
    assert entry.admin_id == viewer.id
    assert entry.action == ActivityAction.unauthorized_access
    assert entry.target_type == TargetType.system
    assert entry.details["actual_role"] == "viewer"
    assert entry.details["required_role"] == ["super_admin", "moderator"]
    assert entry.details["path"] == "/admin/reviews"

    events = await security_events()
    assert len(events) == 1
    assert events[0].type == SecurityEventType.unauthorized_access
    assert events[0].severity == Severity.medium
    assert events[0].details["admin_email"] == "viewer@jamwathq.com"


@pytest.mark.asyncio
async def test_moderator_is_refused_super_admin_route(
    client: AsyncClient, admins, auth_headers, activity_entries
):
    moderator = admins[AdminRole.moderator]

    response = await client.get("/admin/admins", headers=auth_headers(moderator))

    assert response.status_code == 403
    entries = await activity_entries()
    assert len(entries) == 1
    assert entries[0].details["required_role"] == ["super_admin"]


@pytest.mark.asyncio
async def test_super_admin_passes_every_gate(client: AsyncClient, admins, auth_headers):
    owner = admins[AdminRole.super_admin]

    for path in ("/admin/admins", "/admin/reviews", "/admin/activity", "/admin/auth/me"):
        response = await client.get(path, headers=auth_headers(owner))
        assert response.status_code == 200, path


@pytest.mark.asyncio
async def test_anonymous_request_is_unauthenticated(
    client: AsyncClient, admins, activity_entries, security_events
):
    response = await client.get("/admin/reviews")

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHENTICATED"
    # nobody to attribute an activity entry to
    assert await activity_entries() == []
    assert await security_events() == []


@pytest.mark.asyncio
async def test_non_bearer_authorization_is_anonymous(client: AsyncClient, admins):
    response = await client.get(
        "/admin/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHENTICATED"
