"""
Full-text search predicates for SQLAlchemy queries.

A search starts with :func:`initial_search_predicate` and is widened one column
at a time; every builder ORs a clause into the predicate it receives and
returns the result::

    predicate = initial_search_predicate(q)
    predicate = with_string_field(predicate, Contact.first_name, q)
    predicate = with_int_field(predicate, Contact.contact_id, q)
    predicate = with_date_field(predicate, Contact.modified_date, q)
    statement = select(Contact).where(predicate)

Predicates are expression trees, so nothing is evaluated until the statement
runs and the database does the matching.
"""

import enum
import logging
from typing import Any

from sqlalchemy import (
    BigInteger,
    Date,
    DateTime,
    Float,
    Integer,
    Numeric,
    String,
    and_,
    cast,
    extract,
    false,
    or_,
    true,
)
from sqlalchemy.sql import ColumnElement
from sqlalchemy.types import TypeDecorator

from webapi_helper.core.config import settings
from webapi_helper.core.exceptions import UnsupportedFieldTypeError
from webapi_helper.utils.datetime_utils import (
    date_bounds,
    day_bounds,
    minute_bounds,
    parse_search_datetime,
    parse_search_int,
)

logger = logging.getLogger(__name__)

Predicate = ColumnElement[bool]

DATE_PARTS = ("year", "month", "day")
TIME_PARTS = ("hour", "minute")


class FieldKind(str, enum.Enum):
    """Column types a full-text search knows how to match."""

    STRING = "string"
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE = "date"


def _expression(column: Any) -> Any:
    """Underlying column expression of a mapped attribute."""
    return getattr(column, "expression", column)


def _column_type(column: Any) -> Any:
    """Column type with any TypeDecorator wrappers (e.g. SQLModel AutoString) removed."""
    column_type = _expression(column).type
    while isinstance(column_type, TypeDecorator):
        column_type = column_type.impl_instance
    return column_type


def field_kind(column: Any) -> FieldKind | None:
    """Resolve the kind of a column, or None when it cannot be searched."""
    column_type = _column_type(column)
    # Subclasses before their bases: BigInteger < Integer, Float < Numeric
    if isinstance(column_type, String):
        return FieldKind.STRING
    if isinstance(column_type, BigInteger):
        return FieldKind.LONG
    if isinstance(column_type, Integer):
        return FieldKind.INT
    if isinstance(column_type, Float):
        return FieldKind.DOUBLE
    if isinstance(column_type, Numeric):
        return FieldKind.DECIMAL
    if isinstance(column_type, (DateTime, Date)):
        return FieldKind.DATE
    return None


def is_nullable(column: Any) -> bool:
    """Whether a column may hold NULL. Plain expressions are assumed nullable."""
    return bool(getattr(_expression(column), "nullable", True))


def _column_name(column: Any) -> str:
    expression = _expression(column)
    return getattr(expression, "key", None) or str(expression)


def initial_search_predicate(search: str | None) -> Predicate:
    """
    Build the predicate that field clauses are ORed into.

    Matches everything when there is nothing to search for, and nothing
    otherwise, so a search term only returns rows some field clause matches.
    """
    if search is None or not search.strip():
        return true()
    return false()


def with_string_field(predicate: Predicate, column: Any, search: str | None) -> Predicate:
    """OR in a case-insensitive substring match on a string column."""
    if search is None:
        return predicate
    return or_(predicate, column.icontains(search, autoescape=True))


def _numeric_contains(
    predicate: Predicate,
    column: Any,
    search: str | None,
    length: int,
    nullable: bool,
) -> Predicate:
    """OR in a substring match on the text form of a numeric column."""
    if search is None:
        return predicate
    as_text = cast(column, String(length))
    clause = as_text.contains(search, autoescape=True)
    if nullable:
        clause = and_(column.is_not(None), clause)
    return or_(predicate, clause)


def with_int_field(
    predicate: Predicate, column: Any, search: str | None, nullable: bool = False
) -> Predicate:
    """OR in a match on the decimal digits of an integer column."""
    return _numeric_contains(predicate, column, search, settings.MAX_INT_DIGITS, nullable)


def with_long_field(
    predicate: Predicate, column: Any, search: str | None, nullable: bool = False
) -> Predicate:
    """OR in a match on the digits of a 64-bit integer column."""
    return _numeric_contains(predicate, column, search, settings.MAX_LONG_DIGITS, nullable)


def with_nullable_long_field(predicate: Predicate, column: Any, search: str | None) -> Predicate:
    """Like :func:`with_long_field`, never matching rows where the column is NULL."""
    return with_long_field(predicate, column, search, nullable=True)


def with_double_field(
    predicate: Predicate, column: Any, search: str | None, nullable: bool = False
) -> Predicate:
    """OR in a match on the text form of a floating point column."""
    return _numeric_contains(predicate, column, search, settings.MAX_DOUBLE_DIGITS, nullable)


def with_decimal_field(
    predicate: Predicate, column: Any, search: str | None, nullable: bool = False
) -> Predicate:
    """OR in a match on the text form of a fixed-point column."""
    return _numeric_contains(predicate, column, search, settings.MAX_DECIMAL_DIGITS, nullable)


def date_contains(
    predicate: Predicate,
    column: Any,
    search: str | None,
    include_time: bool = False,
    nullable: bool = False,
) -> Predicate:
    """
    OR in a match of a search term against a date column.

    A bare integer (``"08"``, ``"2016"``) is compared against the year, month
    and day of the column, and also against the hour and minute when
    ``include_time`` is set. Anything else is parsed as a full date or
    date-time (``"05/05/2016"``, ISO 8601) and matched on the same calendar
    day, or on the same minute when ``include_time`` is set. Terms that are
    neither leave the predicate unchanged.

    Integers are checked before dates so that a year is never read as a date.

    Args:
        predicate: Predicate to widen
        column: Date or date-time column
        search: Raw search term
        include_time: Match down to the minute instead of the day
        nullable: Never match rows where the column is NULL

    Returns:
        The widened predicate
    """
    date_only = isinstance(_column_type(column), Date)

    search_int = parse_search_int(search)
    if search_int is not None:
        parts = DATE_PARTS
        if include_time and not date_only:
            parts = DATE_PARTS + TIME_PARTS
        clause = or_(*(extract(part, column) == search_int for part in parts))
    else:
        search_date = parse_search_datetime(search)
        if search_date is None:
            logger.debug(
                "Search term %r matches no date, skipping column %s",
                search,
                _column_name(column),
            )
            return predicate

        if date_only:
            lower, upper = date_bounds(search_date)
        elif include_time:
            lower, upper = minute_bounds(search_date)
        else:
            lower, upper = day_bounds(search_date)
        if upper is None:
            clause = column >= lower
        else:
            clause = and_(column >= lower, column < upper)

    if nullable:
        clause = and_(column.is_not(None), clause)
    return or_(predicate, clause)


def with_date_field(
    predicate: Predicate, column: Any, search: str | None, include_time: bool = False
) -> Predicate:
    """OR in a date match on a non-nullable date column. See :func:`date_contains`."""
    return date_contains(predicate, column, search, include_time)


def with_nullable_date_field(
    predicate: Predicate, column: Any, search: str | None, include_time: bool = False
) -> Predicate:
    """OR in a date match on a nullable date column. See :func:`date_contains`."""
    return date_contains(predicate, column, search, include_time, nullable=True)


_NUMERIC_BUILDERS = {
    FieldKind.INT: with_int_field,
    FieldKind.LONG: with_long_field,
    FieldKind.DOUBLE: with_double_field,
    FieldKind.DECIMAL: with_decimal_field,
}


def full_text_searchable(
    predicate: Predicate, column: Any, search: str | None, include_time: bool = False
) -> Predicate:
    """
    OR in the clause matching the type of ``column``.

    Raises:
        UnsupportedFieldTypeError: If the column type cannot be searched
    """
    kind = field_kind(column)
    if kind is None:
        raise UnsupportedFieldTypeError(
            _column_name(column), type(_expression(column).type).__name__
        )

    nullable = is_nullable(column)
    if kind is FieldKind.STRING:
        return with_string_field(predicate, column, search)
    if kind is FieldKind.DATE:
        if nullable:
            return with_nullable_date_field(predicate, column, search, include_time)
        return with_date_field(predicate, column, search, include_time)
    return _NUMERIC_BUILDERS[kind](predicate, column, search, nullable=nullable)
