"""
Goal recommendation service.

Turns goal attainment ratios into advisories to raise goals that are hit
almost every day and lower goals that are rarely reached.
"""

import logging
import math

from activity_summary_analyzer.domain.activity import (
    Dimension,
    GoalAction,
    Recommendation,
    Statistics,
)
from activity_summary_analyzer.utils.exceptions import ValidationError
from activity_summary_analyzer.utils.parameters import RecommendationConfig

logger = logging.getLogger(__name__)

RAISE_MESSAGE = "Consider raising your {label} goal (you hit it on {percentage}% of days)."
LOWER_MESSAGE = "Consider lowering your {label} goal (you only hit it on {percentage}% of days)."


def round_percentage(ratio: float) -> int:
    """Round a ratio to the nearest whole percentage, halves up."""
    return int(math.floor(ratio * 100 + 0.5))


class RecommendationService:
    """Service for deriving goal advisories from statistics."""

    def __init__(self, config: RecommendationConfig | None = None) -> None:
        """
        Initialize recommendation service.

        Args:
            config: Recommendation configuration. Defaults are used if None.
        """
        self.config = config or RecommendationConfig()

    def label_for(self, dimension: Dimension) -> str:
        return self.config.labels.get(dimension.value, dimension.value)

    def recommend(
        self,
        hit: int,
        total: int,
        label: str,
        dimension: Dimension,
    ) -> Recommendation | None:
        """
        Evaluate goal attainment for one dimension.

        Both thresholds are inclusive.

        Args:
            hit: Number of days the goal was reached.
            total: Number of days considered.
            label: Human-readable name of the dimension.
            dimension: The dimension being evaluated.

        Returns:
            A raise or lower advisory, or None if attainment is in between.

        Raises:
            ValidationError: If total is not positive or hit is out of range.
        """
        if total <= 0:
            raise ValidationError(f"Total days must be positive, got {total}")
        if hit < 0 or hit > total:
            raise ValidationError(f"Days hit must be between 0 and {total}, got {hit}")

        ratio = hit / total
        percentage = round_percentage(ratio)

        if ratio >= self.config.raise_threshold:
            action = GoalAction.RAISE
            message = RAISE_MESSAGE.format(label=label, percentage=percentage)
        elif ratio <= self.config.lower_threshold:
            action = GoalAction.LOWER
            message = LOWER_MESSAGE.format(label=label, percentage=percentage)
        else:
            return None

        return Recommendation(
            dimension=dimension,
            label=label,
            action=action,
            percentage=percentage,
            message=message,
        )

    def recommend_all(self, statistics: Statistics) -> list[Recommendation]:
        """
        Evaluate every dimension independently.

        Args:
            statistics: Aggregated statistics.

        Returns:
            Zero to three recommendations, ordered calories, exercise, stand.
        """
        recommendations: list[Recommendation] = []

        for dimension in Dimension:
            recommendation = self.recommend(
                statistics.days_hit(dimension),
                statistics.total_days,
                self.label_for(dimension),
                dimension,
            )
            if recommendation is not None:
                recommendations.append(recommendation)

        logger.debug(f"Produced {len(recommendations)} recommendations")
        return recommendations
