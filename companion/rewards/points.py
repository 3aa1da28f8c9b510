"""Points awarded per user action"""

ACHIEVEMENT_ACTION = "achievement_unlocked"
DEFAULT_POINTS = 10

POINTS_BY_ACTION = {
    "first_rating": 10,
    "helpful_feedback": 25,
    "prompt_improvement": 50,
    "success_story": 30,
    "community_contribution": 40,
    ACHIEVEMENT_ACTION: 0,
}


def points_for_action(action_type: str) -> int:
    return POINTS_BY_ACTION.get(action_type, DEFAULT_POINTS)
