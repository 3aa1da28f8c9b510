"""
Tests for level lookup, progress and points per action
"""
from companion.rewards.levels import (
    LEVELS,
    get_level,
    get_next_level,
    points_to_next_level,
    progress_to_next_level,
)
from companion.rewards.points import ACHIEVEMENT_ACTION, points_for_action


def test_level_boundaries():
    assert get_level(0).key == "beginner"
    assert get_level(100).key == "beginner"
    assert get_level(101).key == "intermediate"
    assert get_level(500).key == "intermediate"
    assert get_level(501).key == "advanced"
    assert get_level(1000).key == "advanced"
    assert get_level(1001).key == "expert"


def test_totals_outside_every_range_fall_back_to_expert():
    assert get_level(-5).key == "expert"


def test_levels_are_contiguous():
    for current, following in zip(LEVELS, LEVELS[1:]):
        assert following.min_points == current.max_points + 1
    assert LEVELS[-1].max_points is None


def test_next_level():
    assert get_next_level(get_level(50)).key == "intermediate"
    assert get_next_level(get_level(2000)) is None


def test_top_level_progress_is_complete():
    """1500 points: no next level, progress 100, nothing left to earn."""
    assert progress_to_next_level(1500) == 100.0
    assert points_to_next_level(1500) == 0


def test_progress_is_clamped():
    for points in (0, 50, 100, 101, 300, 1000):
        assert 0.0 <= progress_to_next_level(points) <= 100.0


def test_points_to_next_level():
    assert points_to_next_level(50) == 51
    assert points_to_next_level(101) == 400
    assert points_to_next_level(1000) == 1


def test_points_for_action():
    assert points_for_action("first_rating") == 10
    assert points_for_action("helpful_feedback") == 25
    assert points_for_action("prompt_improvement") == 50
    assert points_for_action("success_story") == 30
    assert points_for_action("community_contribution") == 40
    assert points_for_action("something_else") == 10
    assert points_for_action(ACHIEVEMENT_ACTION) == 0
