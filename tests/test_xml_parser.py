"""Unit tests for the activity summary XML parser."""

import pytest

from activity_summary_analyzer.infrastructure.parsers.xml_parser import (
    ActivitySummaryParser,
    coerce_float,
)
from activity_summary_analyzer.utils.exceptions import MalformedFragmentError, ParsingError
from activity_summary_analyzer.utils.parameters import ParserConfig


def test_coerce_float_fallbacks() -> None:
    """Test leading-number reads and the zero fallback."""
    cases = {
        None: 0.0,
        "": 0.0,
        "   ": 0.0,
        "abc": 0.0,
        "nan": 0.0,
        "inf": 0.0,
        "12.5": 12.5,
        " 30 ": 30.0,
        "1e3": 1000.0,
        "12abc": 12.0,
        "512.5 kcal": 512.5,
        "1e": 1.0,
        "-.5x": -0.5,
        "1e999": 0.0,
        "kcal 12": 0.0,
    }

    for value, expected in cases.items():
        result = coerce_float(value)
        if result != expected:
            raise AssertionError(f"coerce_float({value!r}): expected {expected}, got {result}")


def test_parse_full_record() -> None:
    """Test mapping of every recognized attribute."""
    parser = ActivitySummaryParser()
    fragment = (
        '<ActivitySummary dateComponents="2024-01-01" activeEnergyBurned="512.75" '
        'activeEnergyBurnedGoal="400" activeEnergyBurnedUnit="kcal" appleMoveTime="0" '
        'appleExerciseTime="31" appleExerciseTimeGoal="30" '
        'appleStandHours="10" appleStandHoursGoal="12"/>'
    )

    records = parser.parse(fragment)

    if len(records) != 1:
        raise AssertionError(f"Expected 1 record, got {len(records)}")

    record = records[0]
    expected = {
        "date": "2024-01-01",
        "calories_burned": 512.75,
        "calories_goal": 400.0,
        "exercise_minutes": 31.0,
        "exercise_goal": 30.0,
        "stand_hours": 10.0,
        "stand_goal": 12.0,
    }
    if record.model_dump() != expected:
        raise AssertionError(f"Unexpected record: {record.model_dump()}")


def test_parse_missing_attributes_default_to_zero() -> None:
    """Test that missing numeric attributes and date fall back to defaults."""
    parser = ActivitySummaryParser()
    fragment = (
        '<ActivitySummary dateComponents="2024-01-01" appleStandHours="9" '
        'appleStandHoursGoal="12"/>'
        '<ActivitySummary dateComponents="2024-01-02" appleStandHoursGoal="12"/>'
        '<ActivitySummary activeEnergyBurned="oops"/>'
    )

    records = parser.parse(fragment)

    if len(records) != 3:
        raise AssertionError(f"Expected 3 records, got {len(records)}")
    if records[1].stand_hours != 0.0:
        raise AssertionError(f"Expected stand_hours=0, got {records[1].stand_hours}")
    if records[2].date != "":
        raise AssertionError(f"Expected empty date, got {records[2].date!r}")
    if records[2].calories_burned != 0.0:
        raise AssertionError(f"Expected calories_burned=0, got {records[2].calories_burned}")


def test_parse_preserves_document_order() -> None:
    """Test that N tags yield N records in document order."""
    parser = ActivitySummaryParser()
    dates = ["2024-03-02", "2024-01-15", "2024-02-29", "2023-12-31"]
    fragment = "".join(f'<ActivitySummary dateComponents="{d}"/>' for d in dates)

    records = parser.parse(fragment)

    if [r.date for r in records] != dates:
        raise AssertionError(f"Order not preserved: {[r.date for r in records]}")


def test_parse_empty_fragment() -> None:
    """Test that an empty fragment parses to no records."""
    records = ActivitySummaryParser().parse("")

    if records != []:
        raise AssertionError(f"Expected no records, got {records}")


def test_parse_malformed_fragment_raises() -> None:
    """Test that a malformed fragment is fatal."""
    parser = ActivitySummaryParser()
    fragment = (
        '<ActivitySummary dateComponents="2024-01-01"/>'
        '<ActivitySummary dateComponents="2024-01-02" activeEnergyBurned="5">'
    )

    with pytest.raises(MalformedFragmentError) as exc_info:
        parser.parse(fragment)

    if not isinstance(exc_info.value, ParsingError):
        raise AssertionError("MalformedFragmentError should be a ParsingError")
    if "Failed to parse" not in str(exc_info.value):
        raise AssertionError(f"Unexpected message: {exc_info.value}")


def test_parse_custom_attribute_mappings() -> None:
    """Test parsing with a configured attribute mapping."""
    config = ParserConfig(
        tag_name="DaySummary",
        date_attribute="day",
        attribute_mappings={"kcal": "calories_burned", "kcalGoal": "calories_goal"},
    )
    parser = ActivitySummaryParser(config)

    records = parser.parse('<DaySummary day="2024-01-01" kcal="300" kcalGoal="250"/>')

    if len(records) != 1:
        raise AssertionError(f"Expected 1 record, got {len(records)}")
    if records[0].date != "2024-01-01" or records[0].calories_burned != 300.0:
        raise AssertionError(f"Unexpected record: {records[0]}")
    if records[0].exercise_minutes != 0.0:
        raise AssertionError("Unmapped fields should keep their zero default")
