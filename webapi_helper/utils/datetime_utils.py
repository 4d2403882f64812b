"""Utility functions for parsing date search terms."""

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from webapi_helper.core.config import settings

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
# Same range as a 32-bit signed int, anything wider is no date part
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
# datetime.fromisoformat stops at microseconds, .NET round-trip strings carry 7 digits
_EXTRA_FRACTION_PATTERN = re.compile(r"(\.\d{6})\d+")


def parse_search_int(search: str | None) -> int | None:
    """
    Parse a search term made only of digits (optionally signed).

    Values outside the 32-bit signed range are not integers as far as a search
    is concerned and give None.
    """
    if search is None:
        return None
    candidate = search.strip()
    if not _INTEGER_PATTERN.match(candidate):
        return None
    value = int(candidate)
    if not INT32_MIN <= value <= INT32_MAX:
        logger.debug("Search term %r is out of integer range", search)
        return None
    return value


def parse_search_datetime(
    search: str | None, formats: Iterable[str] | None = None
) -> datetime | None:
    """
    Parse a search term as a full date or date-time.

    ISO 8601 is tried first, then every format in ``formats``
    (``settings.SEARCH_DATE_FORMATS`` by default). Timezone-aware values keep
    their wall-clock time and lose the offset, since the columns searched on
    are naive.

    Args:
        search: Raw search term
        formats: strptime formats to try after ISO 8601

    Returns:
        Parsed datetime, or None when the term is not a date
    """
    if search is None:
        return None
    candidate = search.strip()
    if not candidate:
        return None

    parsed = None
    try:
        parsed = datetime.fromisoformat(_EXTRA_FRACTION_PATTERN.sub(r"\1", candidate))
    except (ValueError, OverflowError):
        for fmt in formats if formats is not None else settings.SEARCH_DATE_FORMATS:
            try:
                parsed = datetime.strptime(candidate, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        logger.debug("Search term %r is not a date", search)
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.replace(tzinfo=None)
    return parsed


def _upper(start, step: timedelta):
    """``start + step``, or None past the last representable date."""
    try:
        return start + step
    except OverflowError:
        return None


def day_bounds(value: datetime) -> tuple[datetime, datetime | None]:
    """
    Half-open range covering the calendar day of ``value``.

    The upper bound is None for the last day a datetime can hold.
    """
    start = value.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, _upper(start, timedelta(days=1))


def minute_bounds(value: datetime) -> tuple[datetime, datetime | None]:
    """Half-open range covering the minute of ``value``."""
    start = value.replace(second=0, microsecond=0)
    return start, _upper(start, timedelta(minutes=1))


def date_bounds(value: datetime) -> tuple[date, date | None]:
    """Half-open range of dates covering the calendar day of ``value``."""
    start = value.date()
    return start, _upper(start, timedelta(days=1))
