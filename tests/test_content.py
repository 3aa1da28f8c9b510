"""
Tests for the content catalog, remote-to-local fallback and seeding
"""
import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from companion.content import prompt_library
from companion.content.book_content import BOOK_EXERCISES, BOOK_PROMPTS, CHAPTERS
from companion.content.exceptions import ExerciseNotFoundException
from companion.content.fallback import DataSource
from companion.content.seed import seed_book_content
from companion.content.service import ContentService
from companion.db.models import BookExercise, BookPrompt, Chapter


@pytest.mark.asyncio
async def test_chapters_fall_back_to_local_when_remote_fails(broken_db_session):
    result = await ContentService(broken_db_session).get_chapters()

    assert result.source == DataSource.LOCAL
    assert [c.number for c in result.data] == [c["number"] for c in CHAPTERS]


@pytest.mark.asyncio
async def test_empty_remote_table_is_a_valid_answer(db_session):
    result = await ContentService(db_session).get_chapters()

    assert result.source == DataSource.REMOTE
    assert result.data == []


@pytest.mark.asyncio
async def test_seeded_content_is_served_from_remote(db_session):
    report = await seed_book_content(db_session)
    assert report.chapters == len(CHAPTERS)
    assert report.book_prompts == len(BOOK_PROMPTS)
    assert report.book_exercises == len(BOOK_EXERCISES)
    assert report.failed == []

    result = await ContentService(db_session).get_chapters()
    assert result.source == DataSource.REMOTE
    assert len(result.data) == 12


@pytest.mark.asyncio
async def test_seeding_twice_does_not_duplicate(db_session):
    await seed_book_content(db_session)
    await seed_book_content(db_session)

    chapters = (await db_session.execute(select(func.count()).select_from(Chapter))).scalar()
    prompts = (await db_session.execute(select(func.count()).select_from(BookPrompt))).scalar()
    exercises = (await db_session.execute(select(func.count()).select_from(BookExercise))).scalar()
    assert chapters == len(CHAPTERS)
    assert prompts == len(BOOK_PROMPTS)
    assert exercises == len(BOOK_EXERCISES)


@pytest.mark.asyncio
async def test_seeding_reports_failures_and_continues(broken_db_session):
    report = await seed_book_content(broken_db_session)

    assert report.chapters == 0
    assert len(report.failed) == len(CHAPTERS) + len(BOOK_PROMPTS) + len(BOOK_EXERCISES)


@pytest.mark.asyncio
async def test_book_prompt_filters_match_in_both_tiers(db_session, broken_db_session):
    await seed_book_content(db_session)

    remote = await ContentService(db_session).get_book_prompts(chapter=1)
    local = await ContentService(broken_db_session).get_book_prompts(chapter=1)

    assert remote.source == DataSource.REMOTE
    assert local.source == DataSource.LOCAL
    assert [p.id for p in remote.data] == [p.id for p in local.data]
    assert all(p.chapter == 1 for p in remote.data)


@pytest.mark.asyncio
async def test_book_prompt_search_is_case_insensitive(broken_db_session):
    result = await ContentService(broken_db_session).get_book_prompts(search="SMART GOALS")

    assert [p.id for p in result.data] == ["ch1-prompt-2"]


@pytest.mark.asyncio
async def test_book_prompt_search_treats_wildcards_literally(db_session, broken_db_session):
    await seed_book_content(db_session)

    for term in ("_", "%", "goal_"):
        remote = await ContentService(db_session).get_book_prompts(search=term)
        local = await ContentService(broken_db_session).get_book_prompts(search=term)

        assert remote.source == DataSource.REMOTE
        assert local.source == DataSource.LOCAL
        assert [p.id for p in remote.data] == [p.id for p in local.data] == []


@pytest.mark.asyncio
async def test_book_prompt_tags_match_any(db_session):
    await seed_book_content(db_session)
    result = await ContentService(db_session).get_book_prompts(tags=["planning", "roi"])

    expected = [p["id"] for p in BOOK_PROMPTS if {"planning", "roi"} & set(p["tags"])]
    assert sorted(p.id for p in result.data) == sorted(expected)


@pytest.mark.asyncio
async def test_exercise_fields_are_parsed_from_remote_rows(db_session):
    await seed_book_content(db_session)
    result = await ContentService(db_session).get_book_exercises(chapter=1)

    assert result.source == DataSource.REMOTE
    assert [e.id for e in result.data] == ["ch1-ex1", "ch1-ex2"]
    assert result.data[0].fields["questions"][0].type == "rating"


@pytest.mark.asyncio
async def test_malformed_remote_fields_become_empty(db_session):
    db_session.add(BookExercise(
        id="broken-ex", chapter=9, exercise_number=1, title="Broken", description="",
        type="reflection", fields="{not json", sort_order=1,
    ))
    await db_session.commit()

    result = await ContentService(db_session).get_book_exercise("broken-ex")

    assert result.source == DataSource.REMOTE
    assert result.data.fields == {}


@pytest.mark.asyncio
async def test_exercise_missing_remotely_is_found_locally(db_session):
    result = await ContentService(db_session).get_book_exercise("ch3-ex1")

    assert result.source == DataSource.LOCAL
    assert result.data.title == "Daily AI Habit Tracker"


@pytest.mark.asyncio
async def test_exercise_missing_everywhere_raises(db_session):
    with pytest.raises(ExerciseNotFoundException):
        await ContentService(db_session).get_book_exercise("nope")


def test_library_filter_all_means_no_filter():
    assert len(prompt_library.filter_library(category="all", difficulty="all")) == len(prompt_library.PROMPT_LIBRARY)


def test_library_filters_combine():
    prompts = prompt_library.filter_library(category="Communication", difficulty="Beginner")
    assert [p["id"] for p in prompts] == ["email-writer-pro"]


def test_library_search_covers_tags_and_category():
    by_tag = prompt_library.search_prompts("email")
    assert "email-writer-pro" in [p["id"] for p in by_tag]

    by_category = prompt_library.search_prompts("decision making")
    assert {p["category"] for p in by_category} == {"Decision Making"}


def test_library_helpers():
    assert prompt_library.get_prompt_by_id("goal-setting-coach")["category"] == "Personal Development"
    assert prompt_library.get_prompt_by_id("missing") is None
    assert all(p["is_featured"] for p in prompt_library.get_featured_prompts())
    assert prompt_library.get_unique_categories() == sorted(set(prompt_library.get_unique_categories()))


@pytest.mark.asyncio
async def test_chapters_endpoint(anon_client: AsyncClient):
    response = await anon_client.get("/content/chapters")
    assert response.status_code == 200
    data = response.json()
    assert data["source"] == "remote"
    assert data["chapters"] == []


@pytest.mark.asyncio
async def test_exercise_endpoint_not_found(anon_client: AsyncClient):
    response = await anon_client.get("/content/exercises/does-not-exist")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_library_endpoint_counts(anon_client: AsyncClient):
    response = await anon_client.get("/content/library", params={"difficulty": "Advanced"})
    assert response.status_code == 200
    data = response.json()
    assert data["total_count"] == len(prompt_library.PROMPT_LIBRARY)
    assert data["filtered_count"] == len(data["prompts"])
    assert all(p["difficulty"] == "Advanced" for p in data["prompts"])


@pytest.mark.asyncio
async def test_save_prompt_is_idempotent(client: AsyncClient, auth_headers):
    first = await client.post("/content/library/task-prioritizer/save", headers=auth_headers)
    second = await client.post("/content/library/task-prioritizer/save", headers=auth_headers)

    assert first.status_code == 200
    assert second.json() == {"prompt_ids": ["task-prioritizer"], "count": 1}

    saved = await client.get("/content/library/saved", headers=auth_headers)
    assert saved.json()["prompt_ids"] == ["task-prioritizer"]


@pytest.mark.asyncio
async def test_save_unknown_prompt(client: AsyncClient, auth_headers):
    response = await client.post("/content/library/not-a-prompt/save", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_seed_requires_admin(client: AsyncClient, auth_headers):
    response = await client.post("/content/seed", headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_seed_as_admin(client: AsyncClient, auth_headers, admin_user):
    from companion.main import app
    from companion.auth.middleware import get_current_user

    app.dependency_overrides[get_current_user] = lambda: admin_user

    response = await client.post("/content/seed", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["chapters"] == len(CHAPTERS)

    chapters = await client.get("/content/chapters")
    assert len(chapters.json()["chapters"]) == len(CHAPTERS)


@pytest.mark.asyncio
async def test_saved_prompts_when_database_fails(broken_client: AsyncClient, auth_headers):
    response = await broken_client.get("/content/library/saved", headers=auth_headers)

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load saved prompts"
