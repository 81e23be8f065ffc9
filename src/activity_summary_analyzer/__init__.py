"""
Activity Summary Analyzer - Daily activity goal analysis for health exports.

Extracts daily activity summaries (move, exercise and stand rings) from
health-tracking XML exports, aggregates them over an optional date range
and recommends goal adjustments.
"""

__version__ = "0.1.0"
