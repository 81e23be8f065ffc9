"""
Tolerant extraction of activity summary tags from raw export text.

Exports can be huge or truncated, so the raw text is never parsed as a
document. Instead, the individual record tags are picked out with a
permissive pattern and only that fragment is handed to the XML parser.
"""

import logging
import re
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_TAG_NAME = "ActivitySummary"


@lru_cache(maxsize=8)
def tag_pattern(tag_name: str = DEFAULT_TAG_NAME) -> re.Pattern[str]:
    """
    Build the pattern matching one record tag.

    Matches ``<``, the exact tag name, a boundary (whitespace, ``/`` or ``>``)
    and everything up to the first closing ``>``.

    Args:
        tag_name: Element name of the record tag.

    Returns:
        Compiled pattern.
    """
    return re.compile(rf"<{re.escape(tag_name)}(?=[\s/>])[^>]*?>")


def find_activity_tags(text: str, tag_name: str = DEFAULT_TAG_NAME) -> list[str]:
    """
    Find all record tags in raw text, in document order.

    Args:
        text: Raw export text (may be truncated or not well-formed).
        tag_name: Element name of the record tag.

    Returns:
        List of matched tag strings.
    """
    if not text:
        return []
    return tag_pattern(tag_name).findall(text)


def extract_activity_fragment(text: str, tag_name: str = DEFAULT_TAG_NAME) -> str:
    """
    Extract a fragment containing only the record tags.

    Args:
        text: Raw export text (may be truncated or not well-formed).
        tag_name: Element name of the record tag.

    Returns:
        The concatenated tags, or an empty string if none were found.
    """
    tags = find_activity_tags(text, tag_name)
    logger.debug(f"Extracted {len(tags)} <{tag_name}> tags from {len(text or '')} characters")
    return "".join(tags)
