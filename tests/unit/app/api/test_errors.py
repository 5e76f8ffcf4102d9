"""Tests for the HTTP error translation helpers."""

import json

import pytest

from src.library_api.api.http.errors import (
    ensure_valid,
    error_response,
    validate_required_fields,
)
from src.library_api.api.http.schemas.book import BookRequest
from src.library_api.core.errors import (
    BookNotFoundError,
    BookValidationError,
    DuplicateIsbnError,
)


class TestValidateRequiredFields:
    def test_all_fields_present(self):
        payload = BookRequest(title="Hobbit", author="Tolkien", isbn="123123")

        assert validate_required_fields(payload, ("title", "author", "isbn")) == []

    def test_missing_and_blank_fields(self):
        payload = BookRequest(title="", author="  ")

        violations = validate_required_fields(payload, ("title", "author", "isbn"))

        assert violations == [
            ("title", "title must not be blank"),
            ("author", "author must not be blank"),
            ("isbn", "isbn must not be blank"),
        ]

    def test_only_listed_fields_checked(self):
        payload = BookRequest(title="Hobbit", author="Tolkien")

        assert validate_required_fields(payload, ("title", "author")) == []


class TestEnsureValid:
    def test_raises_with_messages(self):
        with pytest.raises(BookValidationError) as exc_info:
            ensure_valid(BookRequest(author="Tolkien"), ("title", "author"))

        assert exc_info.value.messages == ["title must not be blank"]

    def test_valid_payload_passes(self):
        ensure_valid(BookRequest(title="Hobbit", author="Tolkien"), ("title", "author"))


def test_error_response_body():
    response = error_response(404, ["Book not found"])

    assert response.status_code == 404
    assert json.loads(response.body) == {"errors": ["Book not found"]}


def test_domain_error_messages():
    assert str(DuplicateIsbnError("1")) == "Isbn já foi cadastrado"
    assert str(BookNotFoundError(5)) == "Book not found"
    assert BookNotFoundError(5).book_id == 5
