"""Query services."""

from webapi_helper.services.search_service import SearchService

__all__ = ["SearchService"]
