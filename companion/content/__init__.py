from companion.content.fallback import DataSource, LookupResult
from companion.content.repository import ContentRepository
from companion.content.service import ContentService

__all__ = ["ContentRepository", "ContentService", "DataSource", "LookupResult"]
