from workout_tracker.services.recommendation import (
    DEFAULT_RECOMMENDATION,
    NO_EXERCISE,
    Recommendation,
    RecommendationService,
)
from workout_tracker.services.statistics import Overview, StatisticsService

__all__ = [
    "DEFAULT_RECOMMENDATION",
    "NO_EXERCISE",
    "Recommendation",
    "RecommendationService",
    "Overview",
    "StatisticsService",
]
