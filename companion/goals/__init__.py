from companion.goals.repository import GoalsRepository
from companion.goals.service import GoalsService

__all__ = ["GoalsRepository", "GoalsService"]
