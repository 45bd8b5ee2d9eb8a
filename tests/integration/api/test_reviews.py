from uuid import uuid4

import pytest
from httpx import AsyncClient

from src.domain.entities import ActivityAction, AdminRole, Review, TargetType
from tests.fixtures.config import IntegrationConfig


@pytest.mark.asyncio
async def test_moderator_lists_all_reviews(client: AsyncClient, admins, reviews, auth_headers):
    response = await client.get(
        "/admin/reviews", headers=auth_headers(admins[AdminRole.moderator])
    )

    assert response.status_code == 200
    assert len(response.json()["reviews"]) == 3


@pytest.mark.asyncio
async def test_approve_review_is_logged(
    client: AsyncClient, admins, reviews, auth_headers, activity_entries
):
    moderator = admins[AdminRole.moderator]
    pending = reviews[2]

    response = await client.post(
        f"/admin/reviews/{pending.id}/approve", headers=auth_headers(moderator)
    )

    assert response.status_code == 200
    assert response.json()["review"]["is_approved"] is True

    entries = await activity_entries()
    assert len(entries) == 1
    entry = entries[0]
    assert entry.admin_id == moderator.id
    assert entry.action == ActivityAction.review_approve
    assert entry.target_type == TargetType.review
    assert entry.target_id == str(pending.id)
    assert entry.details["method"] == "POST"
    assert entry.details["path"] == f"/admin/reviews/{pending.id}/approve"
    assert entry.ip == "127.0.0.1"


@pytest.mark.asyncio
async def test_unknown_review_is_not_found_and_not_logged(
    client: AsyncClient, admins, reviews, auth_headers, activity_entries
):
    response = await client.delete(
        f"/admin/reviews/{uuid4()}", headers=auth_headers(admins[AdminRole.moderator])
    )

    assert response.status_code == 404
    assert response.json()["code"] == "REVIEW_NOT_FOUND"
    assert await activity_entries() == []


@pytest.mark.asyncio
async def test_delete_review(client: AsyncClient, admins, reviews, auth_headers, activity_entries):
    target = reviews[0]
    headers = auth_headers(admins[AdminRole.moderator])

    response = await client.delete(f"/admin/reviews/{target.id}", headers=headers)

    assert response.status_code == 200
    entries = await activity_entries()
    assert [e.action for e in entries] == [ActivityAction.review_delete]

    listing = await client.get("/admin/reviews", headers=headers)
    assert str(target.id) not in [r["id"] for r in listing.json()["reviews"]]


@pytest.mark.asyncio
async def test_public_listing_shows_approved_reviews_only(client: AsyncClient, reviews):
    response = await client.get("/api/reviews", params={"state": "Florida"})

    assert response.status_code == 200
    listed = response.json()["reviews"]
    assert len(listed) == 2
    assert all(r["is_approved"] for r in listed)

    wyoming = await client.get("/api/reviews", params={"state": "Wyoming"})
    assert wyoming.json()["reviews"] == []


@pytest.mark.asyncio
async def test_public_state_stats(client: AsyncClient, reviews):
    response = await client.get("/api/reviews/stats/Florida")

    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["state"] == "Florida"
    assert stats["review_count"] == 2
    assert stats["avg_rating"] == 4.5
    assert stats["avg_wage"] == 14.75


class ReviewsDisabledConfig(IntegrationConfig):
    REVIEW_API_ENABLED = False


@pytest.mark.asyncio
@pytest.mark.parametrize("app_config", [ReviewsDisabledConfig])
async def test_public_reviews_unavailable_when_disabled(client: AsyncClient, app_config):
    for path in (
        "/api/reviews",
        "/api/reviews/stats",
        "/api/reviews/stats/Florida",
        "/api/reviews/analytics",
    ):
        response = await client.get(path)
        assert response.status_code == 503, path
        data = response.json()
        assert data["success"] is False
        assert data["code"] == "FEATURE_UNAVAILABLE"
        assert data["underDevelopment"] is True
        assert "under development" in data["message"]


@pytest.mark.asyncio
async def test_public_state_analytics(client: AsyncClient, reviews):
    response = await client.get("/api/reviews/analytics")

    assert response.status_code == 200
    assert response.json()["analytics"] == [
        {"state": "Florida", "total_visitors": 2, "avg_revisit": 1.0}
    ]


@pytest.mark.asyncio
async def test_state_analytics_counts_each_visitor_once(client: AsyncClient, db_session):
    """
    Given one visitor who reviewed Texas twice and two others who reviewed it once
    And a Texas review without ToS acceptance
    When state analytics are requested
    Then Texas has 3 visitors and the average of their times_used
    And Texas ranks above states with fewer visitors
    """
    returning, second, third = uuid4(), uuid4(), uuid4()
    rows = [
        ("Texas", returning, 3, True),
        ("Texas", returning, 3, True),
        ("Texas", second, 2, True),
        ("Texas", third, 2, True),
        ("Texas", uuid4(), 10, False),
        ("Ohio", uuid4(), 1, True),
    ]
    for state, user_id, times_used, tos_accepted in rows:
        db_session.add(
            Review(
                user_id=user_id,
                user_first_name="Visitor",
                state=state,
                job_title="Lifeguard",
                wages=13.0,
                hours_per_week=40,
                rating=4,
                experience="Good summer.",
                times_used=times_used,
                tos_accepted=tos_accepted,
            )
        )
    await db_session.commit()

    response = await client.get("/api/reviews/analytics")

    assert response.json()["analytics"] == [
        {"state": "Texas", "total_visitors": 3, "avg_revisit": 2.33},
        {"state": "Ohio", "total_visitors": 1, "avg_revisit": 1.0},
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path, feature",
    [
        ("GET", "/api/agency-reviews", "Agency review"),
        ("POST", "/api/agency-reviews", "Agency review"),
        ("GET", "/api/agency-reviews/42/stats", "Agency review"),
        ("GET", "/api/reports", "Report"),
        ("DELETE", "/api/reports/7", "Report"),
    ],
)
async def test_unbuilt_public_features_answer_under_development(
    client: AsyncClient, method, path, feature
):
    response = await client.request(method, path)

    assert response.status_code == 503
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "FEATURE_UNAVAILABLE"
    assert data["underDevelopment"] is True
    assert data["message"] == (
        f"{feature} features are under development. Database integration required."
    )
