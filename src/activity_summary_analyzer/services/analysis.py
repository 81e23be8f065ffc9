"""
Analysis service running the full activity pipeline.

Extracts record tags from raw export text, parses them, filters by date,
aggregates and produces recommendations. Every run is independent and
either returns a complete result or raises.
"""

import logging
from pathlib import Path

from activity_summary_analyzer.domain.activity import AnalysisResult
from activity_summary_analyzer.infrastructure.loader import ExportLoader
from activity_summary_analyzer.infrastructure.parsers.extractor import extract_activity_fragment
from activity_summary_analyzer.infrastructure.parsers.xml_parser import ActivitySummaryParser
from activity_summary_analyzer.services.aggregation import AggregationService
from activity_summary_analyzer.services.date_filter import (
    DateBoundary,
    filter_by_date_range,
    resolve_date_range,
)
from activity_summary_analyzer.services.recommendation import RecommendationService
from activity_summary_analyzer.utils.exceptions import (
    EmptyAggregationSetError,
    InputMissingError,
    NoRecordsFoundError,
)
from activity_summary_analyzer.utils.parameters import AppConfig

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service orchestrating a single analysis run.

    Holds no state between runs apart from its configuration.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        """
        Initialize analysis service.

        Args:
            config: Application configuration. Defaults are used if None.
        """
        self.config = config or AppConfig()
        self.loader = ExportLoader(self.config.loader)
        self.parser = ActivitySummaryParser(self.config.parser)
        self.aggregator = AggregationService()
        self.recommender = RecommendationService(self.config.recommendation)

    def analyze_text(
        self,
        text: str | None,
        start: DateBoundary = None,
        end: DateBoundary = None,
        partial: bool = False,
    ) -> AnalysisResult:
        """
        Analyze raw export text.

        Args:
            text: Raw export text.
            start: First day of the date range (optional).
            end: Last day of the date range (optional).
            partial: Whether the text is only a window of a larger export.

        Returns:
            Filtered records, statistics and recommendations.

        Raises:
            InputMissingError: If no text is given.
            NoRecordsFoundError: If the text contains no activity summary records.
            MalformedFragmentError: If the extracted records are not well-formed.
            EmptyAggregationSetError: If the date range excludes every record.
            ValidationError: If a date boundary is invalid.
        """
        if text is None:
            raise InputMissingError("No export text provided")

        date_range = resolve_date_range(start, end)

        fragment = extract_activity_fragment(text, self.config.parser.tag_name)
        if not fragment:
            raise NoRecordsFoundError("No activity summary records found")

        records = self.parser.parse(fragment)

        filtered = filter_by_date_range(records, start, end)
        if not filtered:
            # only reachable with an active range
            raise EmptyAggregationSetError(
                f"No records match the date range {date_range[0]} to {date_range[1]} "
                f"({len(records)} records in the export)"
                if date_range
                else "No records to aggregate"
            )

        statistics = self.aggregator.compute(filtered)
        recommendations = self.recommender.recommend_all(statistics)

        return AnalysisResult(
            records=tuple(filtered),
            statistics=statistics,
            recommendations=tuple(recommendations),
            total_records=len(records),
            partial=partial,
            start_date=date_range[0] if date_range else None,
            end_date=date_range[1] if date_range else None,
        )

    def analyze_file(
        self,
        file_path: Path | str | None,
        start: DateBoundary = None,
        end: DateBoundary = None,
    ) -> AnalysisResult:
        """
        Load an export file and analyze it.

        Args:
            file_path: Path to the export file.
            start: First day of the date range (optional).
            end: Last day of the date range (optional).

        Returns:
            Filtered records, statistics and recommendations.

        Raises:
            InputMissingError: If no file is given or it does not exist.
            ActivityAnalyzerError: Any error raised by analyze_text.
        """
        export = self.loader.load(file_path)
        logger.info(f"Analyzing {file_path} ({export.size_bytes} bytes)")
        return self.analyze_text(export.text, start, end, partial=export.partial)
