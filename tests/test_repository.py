"""
Tests for the shared repository helpers
"""
from unittest.mock import AsyncMock, Mock
import pytest

from companion.db.models import Chapter
from companion.db.repository import BaseRepository


@pytest.mark.asyncio
async def test_upsert_rejects_unsupported_dialect():
    db = Mock()
    db.get_bind.return_value.dialect.name = "mysql"
    db.execute = AsyncMock()

    with pytest.raises(RuntimeError, match="mysql"):
        await BaseRepository(db)._upsert(Chapter, {"number": 1, "title": "Intro"}, ["number"], ["title"])
    db.execute.assert_not_called()


@pytest.mark.asyncio
async def test_upsert_updates_existing_row(db_session):
    repository = BaseRepository(db_session)

    await repository._upsert(Chapter, {"number": 1, "title": "Intro", "part": 1}, ["number"], ["title"])
    await repository._upsert(Chapter, {"number": 1, "title": "Welcome", "part": 1}, ["number"], ["title"])
    await db_session.commit()

    chapter = await db_session.get(Chapter, 1)
    assert chapter.title == "Welcome"
