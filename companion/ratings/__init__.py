from companion.ratings.scoring import compute_overall_score, compute_rating_stats

__all__ = ["compute_overall_score", "compute_rating_stats"]
