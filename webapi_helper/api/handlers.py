"""Exception handlers mapping library errors onto HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from webapi_helper.core.exceptions import (
    FormBodyDecodeError,
    MalformedFormSegmentError,
    UnsupportedFieldTypeError,
)


async def malformed_form_segment_handler(
    request: Request, exc: MalformedFormSegmentError
) -> JSONResponse:
    """Handle form bodies that are not key=value pairs."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": exc.message,
            "segment": exc.segment,
            "index": exc.index,
        },
    )


async def form_body_decode_handler(request: Request, exc: FormBodyDecodeError) -> JSONResponse:
    """Handle request bodies that cannot be decoded."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "encoding": exc.encoding},
    )


async def unsupported_field_type_handler(
    request: Request, exc: UnsupportedFieldTypeError
) -> JSONResponse:
    """Handle searches on columns that cannot be searched."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.column_name},
    )


def register_exception_handlers(app: FastAPI) -> FastAPI:
    """Register the library's exception handlers on an application."""
    app.add_exception_handler(MalformedFormSegmentError, malformed_form_segment_handler)
    app.add_exception_handler(FormBodyDecodeError, form_body_decode_handler)
    app.add_exception_handler(UnsupportedFieldTypeError, unsupported_field_type_handler)
    return app
