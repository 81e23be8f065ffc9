"""
Command-line interface for Activity Summary Analyzer.

Provides commands for analyzing activity goals and exporting chart series.
"""

import json
import sys
from datetime import datetime

import typer

from activity_summary_analyzer.domain.activity import AnalysisResult, Dimension
from activity_summary_analyzer.services.aggregation import build_chart_series
from activity_summary_analyzer.services.analysis import AnalysisService
from activity_summary_analyzer.utils.exceptions import (
    ActivityAnalyzerError,
    InputMissingError,
    ValidationError,
)
from activity_summary_analyzer.utils.logging_config import get_logger, setup_logging
from activity_summary_analyzer.utils.parameters import ParameterLoader

app = typer.Typer(help="Activity Summary Analyzer - Daily activity goal analysis")

logger = get_logger(__name__)

DATE_FORMATS = ["%Y-%m-%d"]


def init_config(config_path: str | None = None) -> ParameterLoader:
    """
    Initialize configuration and logging.

    Args:
        config_path: Path to configuration file. Built-in defaults if None.

    Returns:
        Parameter loader instance.
    """
    param_loader = ParameterLoader(config_path)
    setup_logging(param_loader.get_logging_config(), "activity_summary_analyzer")
    return param_loader


def _as_date(value: datetime | None) -> str | None:
    return value.date().isoformat() if value else None


def print_report(result: AnalysisResult) -> None:
    """Print statistics and recommendations of an analysis run."""
    stats = result.statistics

    if result.partial:
        typer.echo("Note: export is large, only its most recent part was analyzed (partial data)")

    typer.echo(f"Results ({stats.total_days} days)")
    typer.echo("")
    typer.echo(f"  Max active calories per day: {stats.max_calories:.2f}")
    typer.echo(f"  Max exercise minutes per day: {stats.max_exercise:.0f}")
    typer.echo(f"  Max stand hours per day: {stats.max_stand:.0f}")
    typer.echo("")
    typer.echo(f"  Average active calories per day: {stats.avg_calories:.2f}")
    typer.echo(f"  Average exercise minutes per day: {stats.avg_exercise:.2f}")
    typer.echo(f"  Average stand hours per day: {stats.avg_stand:.2f}")
    typer.echo("")
    typer.echo(f"  Days calories goal reached: {stats.days_hit_calories}/{stats.total_days}")
    typer.echo(f"  Days exercise goal reached: {stats.days_hit_exercise}/{stats.total_days}")
    typer.echo(f"  Days stand goal reached: {stats.days_hit_stand}/{stats.total_days}")

    if result.recommendations:
        typer.echo("")
        typer.echo("Recommendations:")
        for recommendation in result.recommendations:
            typer.echo(f"  - {recommendation.message}")


@app.command()
def analyze(
    file: str | None = typer.Argument(None, help="Path to the export XML file"),
    text: str | None = typer.Option(None, help="Export XML text ('-' reads stdin)"),
    start: datetime | None = typer.Option(None, formats=DATE_FORMATS, help="First day (inclusive)"),
    end: datetime | None = typer.Option(None, formats=DATE_FORMATS, help="Last day (inclusive)"),
    config_path: str | None = typer.Option(None, help="Path to configuration file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """
    Analyze daily activity goals.

    Extracts activity summaries from an export, aggregates them over the
    optional date range and recommends goal adjustments.
    """
    try:
        param_loader = init_config(config_path)
        service = AnalysisService(param_loader.config)

        logger.info("Starting analysis")

        if file and text is not None:
            raise ValidationError("Provide either an export file or --text, not both")

        if file:
            result = service.analyze_file(file, _as_date(start), _as_date(end))
        elif text is not None:
            raw = sys.stdin.read() if text == "-" else text
            result = service.analyze_text(raw, _as_date(start), _as_date(end))
        else:
            raise InputMissingError("Provide an export file or --text")

        if as_json:
            typer.echo(json.dumps(result.to_dict(), indent=2))
        else:
            print_report(result)

    except ActivityAnalyzerError as e:
        logger.error(f"Analysis failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def series(
    file: str = typer.Argument(..., help="Path to the export XML file"),
    start: datetime | None = typer.Option(None, formats=DATE_FORMATS, help="First day (inclusive)"),
    end: datetime | None = typer.Option(None, formats=DATE_FORMATS, help="Last day (inclusive)"),
    dimension: Dimension = typer.Option(Dimension.CALORIES, help="Metric to export"),
    config_path: str | None = typer.Option(None, help="Path to configuration file"),
) -> None:
    """
    Print the value-vs-goal series of one metric as CSV.

    Rows follow the order of the export, one per day in the date range.
    """
    try:
        param_loader = init_config(config_path)
        service = AnalysisService(param_loader.config)

        result = service.analyze_file(file, _as_date(start), _as_date(end))
        frame = build_chart_series(result.records)[dimension]

        typer.echo(frame.to_csv(index=False), nl=False)

    except ActivityAnalyzerError as e:
        logger.error(f"Series export failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
