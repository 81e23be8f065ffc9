"""
Aggregation service for activity records.

Computes maxima, averages and goal attainment counts per dimension, and
builds the per-dimension series used for charting.
"""

import logging
from collections.abc import Sequence

import pandas as pd

from activity_summary_analyzer.domain.activity import ActivityRecord, Dimension, Statistics
from activity_summary_analyzer.utils.exceptions import EmptyAggregationSetError

logger = logging.getLogger(__name__)

RECORD_COLUMNS = [
    "date",
    "calories_burned",
    "calories_goal",
    "exercise_minutes",
    "exercise_goal",
    "stand_hours",
    "stand_goal",
]


def records_to_frame(records: Sequence[ActivityRecord]) -> pd.DataFrame:
    """
    Convert records to a DataFrame, one row per record in source order.

    Args:
        records: Activity records.

    Returns:
        DataFrame with one column per record field.
    """
    data = [record.model_dump() for record in records]
    return pd.DataFrame(data, columns=RECORD_COLUMNS)


def build_chart_series(records: Sequence[ActivityRecord]) -> dict[Dimension, pd.DataFrame]:
    """
    Build one value-vs-goal series per dimension.

    Args:
        records: Activity records (usually already date filtered).

    Returns:
        Mapping of dimension to a DataFrame with columns date, value and goal.
    """
    df = records_to_frame(records)

    series: dict[Dimension, pd.DataFrame] = {}
    for dimension in Dimension:
        series[dimension] = df[["date", dimension.value_field, dimension.goal_field]].rename(
            columns={dimension.value_field: "value", dimension.goal_field: "goal"}
        )

    return series


class AggregationService:
    """
    Service for computing statistics over activity records.

    Each dimension is aggregated independently; goal attainment compares a
    record's achieved value with that same record's goal.
    """

    def compute(self, records: Sequence[ActivityRecord]) -> Statistics:
        """
        Compute statistics over a non-empty set of records.

        Args:
            records: Activity records to aggregate.

        Returns:
            Statistics for the records.

        Raises:
            EmptyAggregationSetError: If there are no records.
        """
        if not records:
            raise EmptyAggregationSetError("No data to aggregate")

        df = records_to_frame(records)
        total_days = len(df)

        values: dict[str, float | int] = {"total_days": total_days}
        for dimension in Dimension:
            achieved = df[dimension.value_field]
            goal = df[dimension.goal_field]

            values[f"max_{dimension.value}"] = float(achieved.max())
            values[f"avg_{dimension.value}"] = float(achieved.sum()) / total_days
            values[f"days_hit_{dimension.value}"] = int((achieved >= goal).sum())

        statistics = Statistics(**values)

        logger.info(
            f"Aggregated {total_days} days: goals hit "
            f"{statistics.days_hit_calories}/{statistics.days_hit_exercise}/"
            f"{statistics.days_hit_stand} (calories/exercise/stand)"
        )
        return statistics
