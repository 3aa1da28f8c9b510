"""
Tests for exercise responses, readiness maturity and progress
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from companion.content.seed import seed_book_content
from companion.db.models import ExerciseResponse


@pytest.mark.asyncio
async def test_exercise_detail_without_response(client: AsyncClient, auth_headers):
    response = await client.get("/exercises/ch2-ex1", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["exercise"]["title"] == "Prompt Engineering Practice"
    assert data["source"] == "local"
    assert data["response"] is None
    assert data["maturity"] is None


@pytest.mark.asyncio
async def test_unknown_exercise(client: AsyncClient, auth_headers):
    response = await client.get("/exercises/ch99-ex1", headers=auth_headers)
    assert response.status_code == 404

    response = await client.put("/exercises/ch99-ex1/response", json={"response": {}}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_assessment_response_reports_maturity(client: AsyncClient, auth_headers):
    answers = {"tech_comfort": 3, "ai_experience": 2, "learning_goals": "Automate my inbox"}

    response = await client.put("/exercises/ch1-ex1/response", json={"response": answers}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["response"]["response"] == answers
    # 5 of 6 points
    assert data["maturity"]["level"] == "Advanced"

    detail = await client.get("/exercises/ch1-ex1", headers=auth_headers)
    assert detail.json()["maturity"]["level"] == "Advanced"


@pytest.mark.asyncio
async def test_non_assessment_has_no_maturity(client: AsyncClient, auth_headers):
    response = await client.put(
        "/exercises/ch1-ex2/response",
        json={"response": {"primary_goal": "Draft proposals with AI"}},
        headers=auth_headers,
    )
    assert response.json()["maturity"] is None


@pytest.mark.asyncio
async def test_resubmitting_replaces_response(client: AsyncClient, auth_headers, db_session):
    await client.put("/exercises/ch1-ex1/response", json={"response": {"tech_comfort": 0}}, headers=auth_headers)
    response = await client.put(
        "/exercises/ch1-ex1/response", json={"response": {"tech_comfort": 1}}, headers=auth_headers
    )

    assert response.json()["response"]["response"] == {"tech_comfort": 1}
    assert response.json()["maturity"]["level"] == "Beginner"
    count = (await db_session.execute(select(func.count()).select_from(ExerciseResponse))).scalar()
    assert count == 1


@pytest.mark.asyncio
async def test_progress(client: AsyncClient, auth_headers, db_session):
    await seed_book_content(db_session)
    await client.put("/exercises/ch1-ex1/response", json={"response": {"tech_comfort": 2}}, headers=auth_headers)

    response = await client.get("/exercises/ch1-ex2/progress", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "current": 2,
        "total": 4,
        "completed": 1,
        "previous_exercise_id": "ch1-ex1",
        "next_exercise_id": "ch2-ex1",
    }


@pytest.mark.asyncio
async def test_progress_at_catalog_edges(client: AsyncClient, auth_headers, db_session):
    await seed_book_content(db_session)

    first = (await client.get("/exercises/ch1-ex1/progress", headers=auth_headers)).json()
    last = (await client.get("/exercises/ch3-ex1/progress", headers=auth_headers)).json()

    assert first["previous_exercise_id"] is None
    assert last["next_exercise_id"] is None
    assert last["current"] == last["total"]


@pytest.mark.asyncio
async def test_list_my_responses(client: AsyncClient, auth_headers):
    await client.put("/exercises/ch1-ex1/response", json={"response": {"tech_comfort": 2}}, headers=auth_headers)
    await client.put("/exercises/ch2-ex1/response", json={"response": {"task_prompt": "Draft"}}, headers=auth_headers)

    response = await client.get("/exercises/responses/me", headers=auth_headers)

    data = response.json()
    assert data["count"] == 2
    assert {r["exercise_id"] for r in data["responses"]} == {"ch1-ex1", "ch2-ex1"}


@pytest.mark.asyncio
async def test_list_my_responses_when_database_fails(broken_client: AsyncClient, auth_headers):
    response = await broken_client.get("/exercises/responses/me", headers=auth_headers)
    assert response.status_code == 503
