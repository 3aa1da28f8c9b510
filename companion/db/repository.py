"""Shared repository base helpers."""
from typing import Any, Dict, Iterable, Optional
from uuid import UUID
from sqlalchemy import text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

# Both dialects expose INSERT ... ON CONFLICT DO UPDATE with the same API
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BaseRepository:
    """Base repository with common DB helpers."""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        self.db = db
        self.user_id = user_id

    @property
    def dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    async def _set_request_claims(self):
        """Expose the caller id to Postgres so row-level security policies filter rows."""
        if self.user_id is None or self.dialect_name != "postgresql":
            return
        await self.db.execute(
            text("SELECT set_config('request.jwt.claim.sub', :sub, true)"),
            {"sub": str(self.user_id)},
        )

    async def _upsert(
        self,
        model,
        values: Dict[str, Any],
        conflict_columns: Iterable[str],
        update_columns: Iterable[str],
    ) -> None:
        """Insert a row, or update `update_columns` when the conflict key already exists."""
        insert = _UPSERT_INSERTS.get(self.dialect_name)
        if insert is None:
            raise RuntimeError(f"Upsert is not supported on {self.dialect_name}")

        stmt = insert(model).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(conflict_columns),
            set_={column: stmt.excluded[column] for column in update_columns},
        )
        await self.db.execute(stmt)
