"""
webapi_helper - Full-text search predicates and request helpers for
SQLAlchemy / FastAPI web APIs.

A single free-text search term is turned into one SQLAlchemy predicate ORed
across string, numeric and date columns, and URL-encoded form bodies are
parsed into multi-maps.
"""

from webapi_helper.core.exceptions import (
    FormBodyDecodeError,
    MalformedFormSegmentError,
    UnsupportedFieldTypeError,
    WebApiHelperException,
)
from webapi_helper.search import (
    FieldKind,
    full_text_searchable,
    initial_search_predicate,
    with_date_field,
    with_decimal_field,
    with_double_field,
    with_int_field,
    with_long_field,
    with_nullable_date_field,
    with_nullable_long_field,
    with_string_field,
)
from webapi_helper.services import SearchService
from webapi_helper.utils import parse_form_body
from webapi_helper.version import __version__

__all__ = [
    "FieldKind",
    "FormBodyDecodeError",
    "MalformedFormSegmentError",
    "SearchService",
    "UnsupportedFieldTypeError",
    "WebApiHelperException",
    "__version__",
    "full_text_searchable",
    "initial_search_predicate",
    "parse_form_body",
    "with_date_field",
    "with_decimal_field",
    "with_double_field",
    "with_int_field",
    "with_long_field",
    "with_nullable_date_field",
    "with_nullable_long_field",
    "with_string_field",
]
