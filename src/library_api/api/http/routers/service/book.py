"""Book API router with CRUD and search operations."""

from fastapi import APIRouter, Depends, Query, Response, status

from src.library_api.api.http.deps import get_book_service
from src.library_api.api.http.errors import ErrorResponse, ensure_valid
from src.library_api.api.http.schemas.book import (
    BookRequest,
    BookResponse,
    BookUpdateRequest,
)
from src.library_api.core.errors import BookNotFoundError, BookValidationError
from src.library_api.core.models.page import Page, PageRequest
from src.library_api.core.services import BookService
from src.library_api.entities.service.book import Book, BookCriteria
from src.library_api.runtime.context import get_config

router = APIRouter(prefix="/books", tags=["books"])

_BAD_REQUEST = {400: {"model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Book not found (empty body)"}}


def _get_existing(service: BookService, book_id: int) -> Book:
    book = service.get_by_id(book_id)
    if book is None:
        raise BookNotFoundError(book_id)
    return book


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_book(
    payload: BookRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Create a new book. The ISBN must not be registered yet."""
    ensure_valid(payload, ("title", "author", "isbn"))
    book = service.save(payload.to_entity())
    return BookResponse.from_entity(book)


@router.get("", response_model=Page[BookResponse], responses=_BAD_REQUEST)
def search_books(
    title: str | None = Query(default=None, description="Substring of the title"),
    author: str | None = Query(default=None, description="Substring of the author"),
    isbn: str | None = Query(default=None, description="Substring of the ISBN"),
    page: int = Query(default=0, ge=0, description="Zero-based page number"),
    size: int | None = Query(default=None, ge=1, description="Page size"),
    service: BookService = Depends(get_book_service),
) -> Page[BookResponse]:
    """Search books with case-insensitive substring filters."""
    pagination = get_config().pagination
    size = size or pagination.default_size
    if size > pagination.max_size:
        raise BookValidationError(
            [("size", f"size must not exceed {pagination.max_size}")]
        )

    criteria = BookCriteria(title=title, author=author, isbn=isbn)
    result = service.find(criteria, PageRequest(page=page, size=size))
    return result.map(BookResponse.from_entity)


@router.get("/{book_id}", response_model=BookResponse, responses=_NOT_FOUND)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Get a book by ID."""
    return BookResponse.from_entity(_get_existing(service, book_id))


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_book(
    book_id: int,
    payload: BookUpdateRequest,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    """Update title and author. The stored id and ISBN are kept."""
    book = _get_existing(service, book_id)
    ensure_valid(payload, ("title", "author"))

    book.title = payload.title
    book.author = payload.author
    return BookResponse.from_entity(service.update(book))


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    book = _get_existing(service, book_id)
    service.delete(book.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
