"""Core library components."""

from webapi_helper.core.config import Settings, settings
from webapi_helper.core.exceptions import (
    FormBodyDecodeError,
    MalformedFormSegmentError,
    UnsupportedFieldTypeError,
    WebApiHelperException,
)

__all__ = [
    # Config
    "Settings",
    "settings",
    # Exceptions
    "WebApiHelperException",
    "MalformedFormSegmentError",
    "FormBodyDecodeError",
    "UnsupportedFieldTypeError",
]
