"""Translation of validation failures and domain errors into HTTP responses.

Errors leave the API as ``{"errors": ["message", ...]}``, except a missing
book, which is a bare 404.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response

from src.library_api.core.errors import (
    BookNotFoundError,
    BookValidationError,
    DuplicateIsbnError,
)


class ErrorResponse(BaseModel):
    errors: list[str]


def validate_required_fields(
    payload: BaseModel, fields: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Return a ``(field, message)`` pair for every missing or blank field."""
    violations = []
    for field in fields:
        value = getattr(payload, field, None)
        if value is None or not str(value).strip():
            violations.append((field, f"{field} must not be blank"))
    return violations


def ensure_valid(payload: BaseModel, fields: tuple[str, ...]) -> None:
    """Raise ``BookValidationError`` when any of ``fields`` is blank."""
    violations = validate_required_fields(payload, fields)
    if violations:
        raise BookValidationError(violations)


def error_response(status_code: int, messages: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(errors=messages).model_dump(),
    )


def _format_request_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def handle_book_validation(request: Request, exc: BookValidationError) -> JSONResponse:
    logger.bind(fields=[field for field, _ in exc.violations]).info("request.invalid_book")
    return error_response(status.HTTP_400_BAD_REQUEST, exc.messages)


async def handle_duplicate_isbn(request: Request, exc: DuplicateIsbnError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, [str(exc)])


async def handle_book_not_found(request: Request, exc: BookNotFoundError) -> Response:
    logger.bind(book_id=exc.book_id).info("request.book_not_found")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        [_format_request_error(error) for error in exc.errors()],
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, [str(exc.detail)])
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookValidationError, handle_book_validation)
    app.add_exception_handler(DuplicateIsbnError, handle_duplicate_isbn)
    app.add_exception_handler(BookNotFoundError, handle_book_not_found)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
