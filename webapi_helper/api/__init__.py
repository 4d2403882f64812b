"""FastAPI integration."""

from webapi_helper.api.dependencies import (
    FormBodyDep,
    get_form_body,
    search_service_dependency,
)
from webapi_helper.api.handlers import register_exception_handlers

__all__ = [
    "FormBodyDep",
    "get_form_body",
    "register_exception_handlers",
    "search_service_dependency",
]
