"""Composable full-text search predicates."""

from webapi_helper.search.full_text import (
    FieldKind,
    Predicate,
    date_contains,
    field_kind,
    full_text_searchable,
    initial_search_predicate,
    is_nullable,
    with_date_field,
    with_decimal_field,
    with_double_field,
    with_int_field,
    with_long_field,
    with_nullable_date_field,
    with_nullable_long_field,
    with_string_field,
)

__all__ = [
    "FieldKind",
    "Predicate",
    "date_contains",
    "field_kind",
    "full_text_searchable",
    "initial_search_predicate",
    "is_nullable",
    "with_date_field",
    "with_decimal_field",
    "with_double_field",
    "with_int_field",
    "with_long_field",
    "with_nullable_date_field",
    "with_nullable_long_field",
    "with_string_field",
]
