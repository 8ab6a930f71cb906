"""
Parsers for listing entry fields.

Listing entries carry a free-text event title and a month/day date with no
year. The title is mapped onto a normalized format; the year is supplied by
the caller.
"""

import logging
import re
from datetime import date

from deckpoller.models.errors import UnparseableDateError

logger = logging.getLogger(__name__)

# Ordered (substring, format) pairs. First match wins, so a pattern that is a
# substring of another must come after it.
FORMAT_PATTERNS: tuple[tuple[str, str], ...] = (
    ("Standard", "Standard"),
    ("Modern", "Modern"),
    ("Pauper", "Pauper"),
    ("Classic", "Classic"),
    ("Sealed RTR Block", "RTR Block Sealed"),
    ("RTR Block", "RTR Block"),
)

# Pattern: "3/15" -> (month, day)
EVENT_DATE_PATTERN = re.compile(r"(\d+)/(\d+)")


def classify_format(raw_name: str) -> str:
    """
    Map an event title onto a normalized format.

    Args:
        raw_name: Free-text event title (e.g. "Modern Daily #1234567")

    Returns:
        Canonical format label, or raw_name unchanged when no pattern matches
    """
    for pattern, label in FORMAT_PATTERNS:
        if pattern in raw_name:
            return label

    logger.warning("Unrecognized format: %s", raw_name)
    return raw_name


def parse_event_date(raw_date: str, reference_year: int) -> date:
    """
    Parse a month/day listing date.

    Args:
        raw_date: Date text from the listing (e.g. "3/15")
        reference_year: Year to attach, supplied by the caller

    Returns:
        Calendar date in reference_year

    Raises:
        UnparseableDateError: If no month/day is found or it is not a real date
    """
    match = EVENT_DATE_PATTERN.search(raw_date)
    if not match:
        raise UnparseableDateError(raw_date)

    try:
        month, day = (int(group) for group in match.groups())
        return date(reference_year, month, day)
    except (ValueError, OverflowError) as e:
        raise UnparseableDateError(raw_date) from e
