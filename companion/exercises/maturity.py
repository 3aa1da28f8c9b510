"""AI readiness maturity from assessment answers"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Assessment answers are scored 0-3
MAX_ANSWER_SCORE = 3


@dataclass(frozen=True)
class MaturityLevel:
    level: str
    description: str
    percentage: float


# Lower bound in percent -> (level, description), checked top-down
MATURITY_THRESHOLDS = (
    (80, "Advanced", "You have strong AI readiness!"),
    (60, "Intermediate", "Good foundation with room to grow"),
    (40, "Developing", "Building your AI capabilities"),
    (0, "Beginner", "Great starting point for your AI journey"),
)


def _is_score(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and 0 <= value <= MAX_ANSWER_SCORE


def calculate_maturity_level(responses: Optional[Dict[str, Any]]) -> Optional[MaturityLevel]:
    """
    Maturity level of an assessment response.

    Only numeric answers within 0-3 count. Returns None when there are none.
    """
    if not isinstance(responses, dict):
        return None

    scores = [value for value in responses.values() if _is_score(value)]
    if not scores:
        return None

    percentage = sum(scores) / (len(scores) * MAX_ANSWER_SCORE) * 100
    for threshold, level, description in MATURITY_THRESHOLDS:
        if percentage >= threshold:
            return MaturityLevel(level, description, percentage)
    return None
