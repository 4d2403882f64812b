"""Lightweight helpers for working with request bodies."""

import logging
from urllib.parse import unquote_plus

from starlette.datastructures import MultiDict

from webapi_helper.core.exceptions import MalformedFormSegmentError

logger = logging.getLogger(__name__)


def parse_form_body(body: str | None, decode: bool = True) -> MultiDict:
    """
    Parse a URL-encoded form out of a request body.

    Repeated keys keep every value in the order they appear
    (``form.getlist("a")``). Empty segments, such as a trailing ``&``, are
    skipped. Any other segment that is not exactly one ``key=value`` pair
    rejects the whole body.

    Args:
        body: Request content read as a string
        decode: Percent-decode keys and values after splitting

    Returns:
        Multi-map of the form fields in the body

    Raises:
        MalformedFormSegmentError: If a segment has no ``=`` or more than one
    """
    items: list[tuple[str, str]] = []
    if not body:
        return MultiDict(items)

    for index, segment in enumerate(body.split("&")):
        if not segment:
            continue
        parts = segment.split("=")
        if len(parts) != 2:
            raise MalformedFormSegmentError(segment, index)

        key, value = parts
        if decode:
            key, value = unquote_plus(key), unquote_plus(value)
        items.append((key, value))

    logger.debug("Parsed %d form fields", len(items))
    return MultiDict(items)
