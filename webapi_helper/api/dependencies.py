"""Dependencies for FastAPI routes."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session
from starlette.datastructures import MultiDict

from webapi_helper.core.config import settings
from webapi_helper.core.exceptions import FormBodyDecodeError
from webapi_helper.services.search_service import SearchService
from webapi_helper.utils.request_helper import parse_form_body


async def get_form_body(request: Request) -> MultiDict:
    """Dependency for reading a URL-encoded request body as a multi-map."""
    body = await request.body()
    try:
        text = body.decode(settings.FORM_BODY_ENCODING)
    except UnicodeDecodeError as e:
        raise FormBodyDecodeError(settings.FORM_BODY_ENCODING, e.reason) from e
    return parse_form_body(text)


def search_service_dependency(get_session: Callable) -> Callable[..., SearchService]:
    """
    Build a dependency providing a SearchService bound to the session that
    ``get_session`` yields.
    """

    def get_search_service(db: Session = Depends(get_session)) -> SearchService:
        return SearchService(db)

    return get_search_service


FormBodyDep = Annotated[MultiDict, Depends(get_form_body)]
