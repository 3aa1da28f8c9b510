"""Rating dimensions, weighted scoring and statistics computation"""
import math
from enum import Enum
from typing import Dict, Iterable, List


class FeedbackType(str, Enum):
    """Kinds of free-text feedback a user can leave on a prompt"""
    SUCCESS_STORY = "SUCCESS_STORY"
    MODIFICATION = "MODIFICATION"
    ISSUE = "ISSUE"
    SUGGESTION = "SUGGESTION"


# Dimension key -> question shown to the rater and its weight in the overall score
RATING_DIMENSIONS = {
    "effectiveness": {
        "question": "Did this prompt produce useful results?",
        "description": "How well did the prompt achieve its intended purpose?",
        "scale": 5,
        "weight": 0.4,
    },
    "clarity": {
        "question": "Was the prompt easy to understand and use?",
        "description": "How clear and well-structured was the prompt?",
        "scale": 5,
        "weight": 0.3,
    },
    "timeValue": {
        "question": "Did this save you significant time?",
        "description": "How much time did this prompt save you?",
        "scale": 5,
        "weight": 0.3,
    },
}

FEEDBACK_TYPES = {
    FeedbackType.SUCCESS_STORY: {"label": "Success Story", "description": "This worked great! Here's how..."},
    FeedbackType.MODIFICATION: {"label": "Modification", "description": "I tweaked it like this..."},
    FeedbackType.ISSUE: {"label": "Issue", "description": "I had trouble with..."},
    FeedbackType.SUGGESTION: {"label": "Suggestion", "description": "It would be better if..."},
}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, e.g. 2.5 -> 3 and 4.125 -> 4.13 at 2 digits."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def compute_overall_score(dimensions: Dict[str, float]) -> float:
    """
    Weighted sum of the dimension scores, rounded to 2 decimals.

    Args:
        dimensions: Mapping with effectiveness, clarity and timeValue scores (1-5)

    Returns:
        Overall score, e.g. {5, 4, 3} -> 4.1
    """
    total = sum(dimensions[key] * dimension["weight"] for key, dimension in RATING_DIMENSIONS.items())
    return round_half_up(total, 2)


def rating_bucket(overall_score: float) -> int:
    """Histogram bucket of an overall score: nearest integer, clamped to 1-5."""
    return min(5, max(1, int(round_half_up(overall_score))))


def compute_rating_stats(ratings: Iterable) -> Dict:
    """
    Compute aggregate statistics for all ratings of one prompt.

    Metrics computed:
    - total_ratings: Count of ratings
    - average_overall: Mean of overall scores
    - average_effectiveness / average_clarity / average_time_value: Mean per dimension
    - distribution: Count of ratings per rounded overall score (1-5)

    Args:
        ratings: Objects with `overall_score` and a `dimensions` mapping

    Returns:
        Dictionary with computed statistics; all zeros when there are no ratings
    """
    ratings: List = list(ratings)
    distribution = {bucket: 0 for bucket in range(1, 6)}

    if not ratings:
        return {
            "total_ratings": 0,
            "average_overall": 0.0,
            "average_effectiveness": 0.0,
            "average_clarity": 0.0,
            "average_time_value": 0.0,
            "distribution": distribution,
        }

    total = len(ratings)
    for rating in ratings:
        distribution[rating_bucket(rating.overall_score)] += 1

    return {
        "total_ratings": total,
        "average_overall": sum(r.overall_score for r in ratings) / total,
        "average_effectiveness": sum(r.dimensions["effectiveness"] for r in ratings) / total,
        "average_clarity": sum(r.dimensions["clarity"] for r in ratings) / total,
        "average_time_value": sum(r.dimensions["timeValue"] for r in ratings) / total,
        "distribution": distribution,
    }
