"""User metrics computation from exercise activity"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Set

from companion.ratings.scoring import round_half_up


def completion_percentage(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round_half_up(completed / total * 100))


def count_completed_chapters(completed_exercise_ids: Iterable[str], exercises: List[Dict]) -> int:
    """
    Count chapters in which every catalog exercise has a response.

    Args:
        completed_exercise_ids: Exercises the user has answered
        exercises: Catalog exercises with `id` and `chapter`
    """
    completed = set(completed_exercise_ids)
    by_chapter: Dict[int, Set[str]] = {}
    for exercise in exercises:
        by_chapter.setdefault(exercise["chapter"], set()).add(exercise["id"])
    return sum(1 for ids in by_chapter.values() if ids <= completed)


def compute_current_streak(activity_days: Iterable[date], today: date) -> int:
    """
    Number of consecutive days with activity, ending today or yesterday.

    A streak whose last active day is before yesterday is broken and counts 0.
    """
    days = set(activity_days)
    if today in days:
        day = today
    elif today - timedelta(days=1) in days:
        day = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak
