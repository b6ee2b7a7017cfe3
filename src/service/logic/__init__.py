"""
Business Logic Layer Module.

The record handlers for the books table: each validates its configuration,
performs one store operation and maps the outcome to a nullable result.
"""

from service.logic.book_handlers import (
    BookHandler,
    BookHandlers,
    CreateBookHandler,
    DeleteBookHandler,
    GetBookByIdHandler,
    ListBooksHandler,
    UpdateBookHandler,
)

__all__ = [
    "BookHandler",
    "BookHandlers",
    "CreateBookHandler",
    "DeleteBookHandler",
    "GetBookByIdHandler",
    "ListBooksHandler",
    "UpdateBookHandler",
]
