"""Achievement catalog and unlock evaluation"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional


@dataclass
class UserMetrics:
    """Aggregate counts achievements are evaluated against"""
    completed_exercises: int = 0
    total_exercises: int = 0
    completion_percentage: int = 0
    completed_chapters: int = 0
    current_streak: int = 0
    saved_prompts: int = 0
    time_saved: float = 0.0  # hours


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    icon: str
    condition: Callable[[UserMetrics], bool]


ACHIEVEMENTS = (
    Achievement(
        "first_exercise", "First Steps", "Complete your first exercise", "🎯",
        lambda m: m.completed_exercises > 0,
    ),
    Achievement(
        "seven_day_streak", "7-Day Streak", "Use AI tools for 7 consecutive days", "🔥",
        lambda m: m.current_streak >= 7,
    ),
    Achievement(
        "chapter_champion", "Chapter Champion", "Complete all exercises in a chapter", "👑",
        lambda m: m.completed_chapters > 0,
    ),
    Achievement(
        "halfway_hero", "Halfway Hero", "Complete 50% of all exercises", "⭐",
        lambda m: m.completion_percentage >= 50,
    ),
    Achievement(
        "prompt_master", "Prompt Master", "Save 10 prompts to your library", "📝",
        lambda m: m.saved_prompts >= 10,
    ),
    Achievement(
        "time_saver", "Time Saver", "Save 10+ hours through AI automation", "⏰",
        lambda m: m.time_saved >= 10,
    ),
    Achievement(
        "integration_master", "AI Integration Master", "Complete 100% of all exercises", "🏆",
        lambda m: m.completion_percentage >= 100,
    ),
)


def check_achievements(metrics: UserMetrics, granted_ids: Iterable[str]) -> List[str]:
    """
    Ids of achievements whose condition holds and that were not granted yet.

    Args:
        metrics: Current user metrics
        granted_ids: Achievement ids the user already holds

    Returns:
        Newly unlocked achievement ids, in catalog order
    """
    granted = set(granted_ids)
    return [a.id for a in ACHIEVEMENTS if a.id not in granted and a.condition(metrics)]


def get_achievement_by_id(achievement_id: str) -> Optional[Achievement]:
    return next((a for a in ACHIEVEMENTS if a.id == achievement_id), None)
