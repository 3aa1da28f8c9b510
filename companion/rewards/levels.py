"""User levels derived from total points"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Level:
    key: str
    badge: str
    min_points: int
    max_points: Optional[int]  # None for the open-ended top level
    perks: List[str] = field(default_factory=list)

    def contains(self, points: int) -> bool:
        return points >= self.min_points and (self.max_points is None or points <= self.max_points)


# Contiguous, non-overlapping point ranges in ascending order
LEVELS = (
    Level("beginner", "AI Explorer", 0, 100, ["Access to all book prompts", "Rate and review prompts"]),
    Level("intermediate", "AI Practitioner", 101, 500, ["Share success stories", "Save prompts to your library"]),
    Level("advanced", "AI Specialist", 501, 1000, ["Featured feedback", "Early access to new prompts"]),
    Level("expert", "AI Master", 1001, None, ["Community mentor badge", "Suggest prompts for the library"]),
)


def get_level(points: int) -> Level:
    """First level whose range contains `points`; anything outside every range is expert."""
    for level in LEVELS:
        if level.contains(points):
            return level
    return LEVELS[-1]


def get_next_level(level: Level) -> Optional[Level]:
    index = LEVELS.index(level)
    return LEVELS[index + 1] if index < len(LEVELS) - 1 else None


def progress_to_next_level(points: int) -> float:
    """
    Progress towards the next level in percent.

    Interpolates between the current level's upper bound and the next level's
    lower bound, clamped to [0, 100]. At the top level the progress is 100.
    """
    level = get_level(points)
    next_level = get_next_level(level)
    if next_level is None:
        return 100.0

    progress = (points - level.max_points) / (next_level.min_points - level.max_points) * 100
    return max(0.0, min(100.0, progress))


def points_to_next_level(points: int) -> int:
    next_level = get_next_level(get_level(points))
    return next_level.min_points - points if next_level else 0
