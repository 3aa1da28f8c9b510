"""Two-tier reads: remote tables first, bundled content when they fail"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures that mean "the remote tier is unavailable"
REMOTE_ERRORS = (SQLAlchemyError, OSError)


class DataSource(str, Enum):
    """Tier that served a read"""
    REMOTE = "remote"
    LOCAL = "local"


@dataclass
class LookupResult(Generic[T]):
    data: T
    source: DataSource


async def two_tier_lookup(
    remote: Callable[[], Awaitable[T]],
    local: Callable[[], T],
    description: str,
    session: Optional[AsyncSession] = None,
) -> LookupResult[T]:
    """
    Serve `remote()`, or `local()` when the remote call raises a database or network error.

    The failed transaction on `session` is rolled back so the session stays usable.
    """
    try:
        return LookupResult(await remote(), DataSource.REMOTE)
    except REMOTE_ERRORS as e:
        logger.warning(f"Remote fetch of {description} failed, using local data: {e}")
        if session is not None:
            try:
                await session.rollback()
            except REMOTE_ERRORS as rollback_error:
                logger.warning(f"Rollback after failed fetch of {description} failed: {rollback_error}")
        return LookupResult(local(), DataSource.LOCAL)
