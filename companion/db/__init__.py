from companion.db.base import Base
from companion.db.repository import BaseRepository

__all__ = ["Base", "BaseRepository"]
