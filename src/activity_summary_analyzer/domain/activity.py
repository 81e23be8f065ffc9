"""
Activity domain models.

This module defines the per-day activity summary record, the statistics
derived from a set of records, goal recommendations and the result of a
single analysis run. All models are immutable and rebuilt on every run.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Dimension(str, Enum):
    """Enumeration of the tracked activity dimensions."""

    CALORIES = "calories"
    EXERCISE = "exercise"
    STAND = "stand"

    @property
    def value_field(self) -> str:
        """Name of the ActivityRecord field holding the achieved value."""
        return _DIMENSION_FIELDS[self][0]

    @property
    def goal_field(self) -> str:
        """Name of the ActivityRecord field holding the day's goal."""
        return _DIMENSION_FIELDS[self][1]


_DIMENSION_FIELDS: dict[Dimension, tuple[str, str]] = {
    Dimension.CALORIES: ("calories_burned", "calories_goal"),
    Dimension.EXERCISE: ("exercise_minutes", "exercise_goal"),
    Dimension.STAND: ("stand_hours", "stand_goal"),
}


class GoalAction(str, Enum):
    """Enumeration of goal adjustment advisories."""

    RAISE = "raise"
    LOWER = "lower"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the model to a JSON-compatible dictionary with camelCase keys.

        Returns:
            Dictionary representation of the model.
        """
        return self.model_dump(mode="json", by_alias=True)


class ActivityRecord(_FrozenModel):
    """
    One day of activity as found in the export.

    Numeric fields default to 0 when the source attribute is missing or
    not a number. The date is kept exactly as given by the source.
    """

    date: str = Field("", description="Day identifier as given by the source")
    calories_burned: float = Field(0.0, description="Active energy burned")
    calories_goal: float = Field(0.0, description="Active energy goal for the day")
    exercise_minutes: float = Field(0.0, description="Exercise time in minutes")
    exercise_goal: float = Field(0.0, description="Exercise time goal for the day")
    stand_hours: float = Field(0.0, description="Hours with standing activity")
    stand_goal: float = Field(0.0, description="Stand hours goal for the day")

    def value(self, dimension: Dimension) -> float:
        """Achieved value for a dimension."""
        return getattr(self, dimension.value_field)

    def goal(self, dimension: Dimension) -> float:
        """Goal value for a dimension."""
        return getattr(self, dimension.goal_field)

    def goal_hit(self, dimension: Dimension) -> bool:
        """Whether the day's achieved value reached that same day's goal."""
        return self.value(dimension) >= self.goal(dimension)


class Statistics(_FrozenModel):
    """
    Aggregate statistics over a non-empty set of activity records.

    Goal attainment counts compare each record against its own goal.
    """

    total_days: int = Field(gt=0)
    max_calories: float
    max_exercise: float
    max_stand: float
    avg_calories: float
    avg_exercise: float
    avg_stand: float
    days_hit_calories: int = Field(ge=0)
    days_hit_exercise: int = Field(ge=0)
    days_hit_stand: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_days_hit(self) -> "Statistics":
        for dimension in Dimension:
            if self.days_hit(dimension) > self.total_days:
                raise ValueError(
                    f"days_hit_{dimension.value} exceeds total_days ({self.total_days})"
                )
        return self

    def maximum(self, dimension: Dimension) -> float:
        return getattr(self, f"max_{dimension.value}")

    def average(self, dimension: Dimension) -> float:
        return getattr(self, f"avg_{dimension.value}")

    def days_hit(self, dimension: Dimension) -> int:
        return getattr(self, f"days_hit_{dimension.value}")


class Recommendation(_FrozenModel):
    """Goal adjustment advisory for one dimension."""

    dimension: Dimension
    label: str
    action: GoalAction
    percentage: int = Field(ge=0, le=100, description="Rounded goal attainment percentage")
    message: str


class AnalysisResult(_FrozenModel):
    """
    Outcome of a single analysis run.

    Holds the filtered records (for charting), their statistics and the
    goal recommendations. ``partial`` is set when only the tail of a large
    export was read.
    """

    records: tuple[ActivityRecord, ...]
    statistics: Statistics
    recommendations: tuple[Recommendation, ...] = ()
    total_records: int = Field(ge=0, description="Records parsed before date filtering")
    partial: bool = False
    start_date: date | None = None
    end_date: date | None = None
