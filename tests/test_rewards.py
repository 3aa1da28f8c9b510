"""
Tests for the points ledger, level summary and achievement evaluation
"""
from uuid import UUID
import pytest
from httpx import AsyncClient

from companion.content.seed import seed_book_content
from companion.content.service import SavedPromptService
from companion.exercises.repository import ExerciseResponseRepository
from companion.ratings.repository import SuccessStoryRepository
from companion.db.models import SuccessStory
from companion.rewards.exceptions import RewardsUnavailableException
from companion.rewards.service import RewardsService

TEST_USER_ID = UUID("123e4567-e89b-12d3-a456-426614174000")


@pytest.mark.asyncio
async def test_award_points_appends_ledger_entry(db_session):
    service = RewardsService(db_session, TEST_USER_ID)

    entry = await service.award_points("helpful_feedback", prompt_id="ch1-prompt-1")

    assert entry.points_earned == 25
    assert entry.prompt_id == "ch1-prompt-1"
    assert entry.badge_earned is None


@pytest.mark.asyncio
async def test_unknown_action_gets_default_points(db_session):
    entry = await RewardsService(db_session, TEST_USER_ID).award_points("something_new")
    assert entry.points_earned == 10


@pytest.mark.asyncio
async def test_award_points_failure_is_swallowed(broken_db_session):
    assert await RewardsService(broken_db_session, TEST_USER_ID).award_points("first_rating") is None


@pytest.mark.asyncio
async def test_summary_for_new_user(db_session):
    summary = await RewardsService(db_session, TEST_USER_ID).get_summary()

    assert summary["total_points"] == 0
    assert summary["level"].key == "beginner"
    assert summary["next_level"].key == "intermediate"
    assert summary["points_to_next_level"] == 101
    assert summary["badges"] == []
    assert summary["recent_rewards"] == []


@pytest.mark.asyncio
async def test_summary_totals_and_recent(db_session):
    service = RewardsService(db_session, TEST_USER_ID)
    for _ in range(4):
        await service.award_points("community_contribution")

    summary = await service.get_summary(recent_limit=3)

    assert summary["total_points"] == 160
    assert summary["level"].badge == "AI Practitioner"
    assert summary["points_to_next_level"] == 501 - 160
    assert len(summary["recent_rewards"]) == 3


@pytest.mark.asyncio
async def test_metrics_after_answering_chapter_one(db_session):
    await seed_book_content(db_session)
    responses = ExerciseResponseRepository(db_session, TEST_USER_ID)
    await responses.upsert("ch1-ex1", {"tech_comfort": 2})
    await responses.upsert("ch1-ex2", {"primary_goal": "Automate reporting"})

    metrics = await RewardsService(db_session, TEST_USER_ID).collect_metrics()

    assert metrics.completed_exercises == 2
    assert metrics.total_exercises == 4
    assert metrics.completion_percentage == 50
    assert metrics.completed_chapters == 1
    assert metrics.current_streak == 1
    assert metrics.saved_prompts == 0
    assert metrics.time_saved == 0


@pytest.mark.asyncio
async def test_metrics_count_only_catalog_exercises(db_session):
    await seed_book_content(db_session)
    responses = ExerciseResponseRepository(db_session, TEST_USER_ID)
    for exercise_id in ("ch1-ex1", "ch1-ex2", "ch9-ex1", "ch9-ex2"):
        await responses.upsert(exercise_id, {"notes": "answered"})
    service = RewardsService(db_session, TEST_USER_ID)

    metrics = await service.collect_metrics()

    assert metrics.completed_exercises == 2
    assert metrics.total_exercises == 4
    assert metrics.completion_percentage == 50
    unlocked = await service.evaluate_achievements()
    assert "integration_master" not in [a.id for a in unlocked]


@pytest.mark.asyncio
async def test_evaluate_achievements_grants_once(db_session):
    await seed_book_content(db_session)
    responses = ExerciseResponseRepository(db_session, TEST_USER_ID)
    await responses.upsert("ch1-ex1", {"tech_comfort": 2})
    await responses.upsert("ch1-ex2", {"primary_goal": "Automate reporting"})
    service = RewardsService(db_session, TEST_USER_ID)

    unlocked = await service.evaluate_achievements()

    assert [a.id for a in unlocked] == ["first_exercise", "chapter_champion", "halfway_hero"]
    assert await service.evaluate_achievements() == []

    summary = await service.get_summary()
    assert set(summary["badges"]) == {"first_exercise", "chapter_champion", "halfway_hero"}
    assert summary["total_points"] == 0


@pytest.mark.asyncio
async def test_time_saver_from_success_stories(db_session):
    stories = SuccessStoryRepository(db_session, TEST_USER_ID)
    for hours in (4.5, 7.5):
        await stories.create(SuccessStory(
            user_id=TEST_USER_ID,
            prompt_id="email-writer-pro",
            prompt_type="library",
            title="Saved time",
            description="Inbox zero",
            time_saved=hours,
        ))
    await SavedPromptService(db_session, TEST_USER_ID).save_prompt("email-writer-pro")
    service = RewardsService(db_session, TEST_USER_ID)

    metrics = await service.collect_metrics()
    assert metrics.time_saved == 12.0
    assert metrics.saved_prompts == 1

    unlocked = await service.evaluate_achievements()
    assert [a.id for a in unlocked] == ["time_saver"]


@pytest.mark.asyncio
async def test_levels_endpoint(anon_client: AsyncClient):
    response = await anon_client.get("/rewards/levels")

    assert response.status_code == 200
    levels = response.json()
    assert [level["key"] for level in levels] == ["beginner", "intermediate", "advanced", "expert"]
    assert levels[-1]["max_points"] is None


@pytest.mark.asyncio
async def test_achievements_endpoint(anon_client: AsyncClient):
    response = await anon_client.get("/rewards/achievements")
    assert len(response.json()) == 7


@pytest.mark.asyncio
async def test_my_rewards_endpoint(client: AsyncClient, auth_headers):
    await client.post("/ratings/quick/book/ch1-prompt-1", json={"rating": 4}, headers=auth_headers)

    response = await client.get("/rewards/me", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total_points"] == 10
    assert data["level"]["key"] == "beginner"
    assert data["recent_rewards"][0]["action_type"] == "first_rating"


@pytest.mark.asyncio
async def test_check_achievements_endpoint(client: AsyncClient, auth_headers, db_session):
    await seed_book_content(db_session)
    await client.put("/exercises/ch2-ex1/response", json={"response": {"task_prompt": "Draft"}}, headers=auth_headers)

    response = await client.post("/rewards/achievements/check", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    # ch2-ex1 is the only exercise of chapter 2
    assert [a["id"] for a in data["unlocked"]] == ["first_exercise", "chapter_champion"]
    assert data["count"] == 2


@pytest.mark.asyncio
async def test_summary_unavailable_when_ledger_fails(broken_db_session):
    with pytest.raises(RewardsUnavailableException):
        await RewardsService(broken_db_session, TEST_USER_ID).get_summary()


@pytest.mark.asyncio
async def test_rewards_endpoints_when_database_fails(broken_client: AsyncClient, auth_headers):
    for method, path in (
        ("GET", "/rewards/me"),
        ("GET", "/rewards/me/metrics"),
        ("POST", "/rewards/achievements/check"),
    ):
        response = await broken_client.request(method, path, headers=auth_headers)
        assert response.status_code == 503, path
