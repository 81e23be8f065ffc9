"""
XML parser for activity summary fragments.

Parses the fragment produced by the extractor into ActivityRecord objects,
coercing every numeric attribute with a single zero-fallback rule.
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Any

from activity_summary_analyzer.domain.activity import ActivityRecord
from activity_summary_analyzer.utils.exceptions import MalformedFragmentError
from activity_summary_analyzer.utils.parameters import ParserConfig

logger = logging.getLogger(__name__)

ROOT_TAG = "root"

NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_float(value: Any) -> float:
    """
    Convert an attribute value to float, falling back to 0.

    Strings are read up to the end of their leading number, so ``"12kcal"``
    gives 12.

    Args:
        value: Raw attribute value (usually a string or None).

    Returns:
        Float value, or 0.0 if the value is absent, has no leading number or
        is not finite.
    """
    if value is None:
        return 0.0

    if isinstance(value, str):
        match = NUMBER_PREFIX.match(value.strip())
        if match is None:
            return 0.0
        value = match.group()

    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(result):
        return 0.0

    return result


class ActivitySummaryParser:
    """
    Parser for activity summary fragments.

    Wraps the fragment in a synthetic root element so that a sequence of
    sibling tags can be parsed as one document.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """
        Initialize activity summary parser.

        Args:
            config: Parser configuration. Defaults are used if None.
        """
        self.config = config or ParserConfig()

    def _to_record(self, element: ET.Element) -> ActivityRecord:
        values: dict[str, Any] = {
            "date": element.get(self.config.date_attribute, ""),
        }
        for attribute, field_name in self.config.attribute_mappings.items():
            values[field_name] = coerce_float(element.get(attribute))

        return ActivityRecord(**values)

    def parse(self, fragment: str) -> list[ActivityRecord]:
        """
        Parse a fragment into activity records.

        Args:
            fragment: Concatenated record tags (may be empty).

        Returns:
            List of activity records in document order.

        Raises:
            MalformedFragmentError: If the wrapped fragment is not well-formed XML.
        """
        wrapped = f"<{ROOT_TAG}>{fragment}</{ROOT_TAG}>"

        try:
            root = ET.fromstring(wrapped)
        except ET.ParseError as e:
            raise MalformedFragmentError(f"Failed to parse activity summary fragment: {e}") from e

        records = [self._to_record(element) for element in root.iter(self.config.tag_name)]

        logger.info(f"Parsed {len(records)} activity summary records")
        return records
