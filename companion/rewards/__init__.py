from companion.rewards.repository import RewardRepository
from companion.rewards.service import RewardsService

__all__ = ["RewardRepository", "RewardsService"]
