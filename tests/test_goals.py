"""
Tests for 90-day goals and milestones
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from companion.db.models import GoalMilestone, UserGoals

GOALS_PAYLOAD = {
    "goals": [
        {
            "id": "goal-1",
            "title": "Automate weekly reporting",
            "description": "Use AI to draft the Monday report",
            "category": "productivity",
            "deadline": "2026-12-31",
            "priority": "high",
            "metrics": "Report drafted in under 15 minutes",
        },
        {"id": "goal-2", "title": "Learn prompt patterns"},
    ],
    "vision": "AI handles the busywork so I can focus on clients",
    "milestones": [
        {"goalId": "goal-1", "title": "Collect report template", "targetDate": "2026-11-01"},
        {"goalId": "goal-1", "title": "First AI draft", "targetDate": "2026-11-15"},
    ],
}


@pytest.mark.asyncio
async def test_no_goals_yet(client: AsyncClient, auth_headers):
    response = await client.get("/goals/me", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] is None
    assert data["goals"] == []
    assert data["milestones"] == []


@pytest.mark.asyncio
async def test_save_goals(client: AsyncClient, auth_headers):
    response = await client.put("/goals/me", json=GOALS_PAYLOAD, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] is not None
    assert data["vision"] == GOALS_PAYLOAD["vision"]
    assert [g["id"] for g in data["goals"]] == ["goal-1", "goal-2"]
    assert data["goals"][0]["deadline"] == "2026-12-31"
    assert data["goals"][1]["priority"] == "medium"
    assert [m["title"] for m in data["milestones"]] == ["Collect report template", "First AI draft"]
    assert all(m["goal_id"] == "goal-1" for m in data["milestones"])
    assert all(m["completed"] is False for m in data["milestones"])


@pytest.mark.asyncio
async def test_saving_again_updates_and_replaces_milestones(client: AsyncClient, auth_headers, db_session):
    await client.put("/goals/me", json=GOALS_PAYLOAD, headers=auth_headers)
    updated = {
        "goals": [{"id": "goal-3", "title": "Ship an AI-assisted newsletter"}],
        "milestones": [{"goalId": "goal-3", "title": "Pick a template", "completed": True}],
    }

    response = await client.put("/goals/me", json=updated, headers=auth_headers)

    data = response.json()
    assert [g["id"] for g in data["goals"]] == ["goal-3"]
    assert data["vision"] is None
    assert len(data["milestones"]) == 1
    assert data["milestones"][0]["completed"] is True
    assert data["milestones"][0]["target_date"] is None

    goals_rows = (await db_session.execute(select(func.count()).select_from(UserGoals))).scalar()
    milestone_rows = (await db_session.execute(select(func.count()).select_from(GoalMilestone))).scalar()
    assert goals_rows == 1
    assert milestone_rows == 1


@pytest.mark.asyncio
async def test_goal_needs_title(client: AsyncClient, auth_headers):
    response = await client.put("/goals/me", json={"goals": [{"id": "g", "title": ""}]}, headers=auth_headers)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_goals_unavailable(broken_db_session, mock_user):
    from companion.goals.exceptions import GoalsUnavailableException
    from companion.goals.service import GoalsService

    with pytest.raises(GoalsUnavailableException) as exc_info:
        await GoalsService(broken_db_session, mock_user.user_id).get_goals()
    assert exc_info.value.status_code == 503
