"""Search service for full-text queries over mapped entities."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import inspect
from sqlmodel import Session, select

from webapi_helper.search import (
    FieldKind,
    Predicate,
    field_kind,
    full_text_searchable,
    initial_search_predicate,
)

logger = logging.getLogger(__name__)


class SearchService:
    """Service for full-text searching the rows of a mapped entity."""

    def __init__(self, db: Session):
        self.db = db

    def searchable_fields(self, model: type) -> dict[str, FieldKind]:
        """
        List the mapped columns of a model that a full-text search can match.

        Args:
            model: Mapped entity class

        Returns:
            Attribute name to field kind, in mapping order
        """
        fields = {}
        for attr in inspect(model).column_attrs:
            kind = field_kind(attr.class_attribute)
            if kind is None:
                logger.debug("Skipping column %s.%s, not searchable", model.__name__, attr.key)
                continue
            fields[attr.key] = kind
        return fields

    def build_predicate(
        self,
        model: type,
        search: str | None,
        fields: Sequence[Any] | None = None,
        include_time: bool = False,
    ) -> Predicate:
        """
        Build a predicate matching rows where any of the fields matches.

        Args:
            model: Mapped entity class
            search: Raw search term
            fields: Mapped attributes or attribute names to search. Defaults to
                every searchable column of the model.
            include_time: Match date columns down to the minute

        Returns:
            Predicate for a where clause
        """
        if fields is None:
            fields = list(self.searchable_fields(model))

        predicate = initial_search_predicate(search)
        for field in fields:
            column = getattr(model, field) if isinstance(field, str) else field
            predicate = full_text_searchable(predicate, column, search, include_time)
        return predicate

    def search_statement(
        self,
        model: type,
        search: str | None,
        fields: Sequence[Any] | None = None,
        include_time: bool = False,
        order_by: Any | None = None,
    ):
        """Build a select statement for the rows of ``model`` matching ``search``."""
        predicate = self.build_predicate(model, search, fields, include_time)
        statement = select(model).where(predicate)
        if order_by is not None:
            statement = statement.order_by(order_by)
        return statement

    def search(
        self,
        model: type,
        search: str | None,
        fields: Sequence[Any] | None = None,
        include_time: bool = False,
        order_by: Any | None = None,
    ) -> list[Any]:
        """
        Run a full-text search and return the matching rows.

        Args:
            model: Mapped entity class
            search: Raw search term
            fields: Mapped attributes or attribute names to search
            include_time: Match date columns down to the minute
            order_by: Optional ordering for the results

        Returns:
            List of matching model instances
        """
        statement = self.search_statement(model, search, fields, include_time, order_by)
        results = self.db.exec(statement).all()
        logger.debug("Search %r on %s matched %d rows", search, model.__name__, len(results))
        return list(results)
