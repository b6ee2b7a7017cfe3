"""
Record handlers for the books table.

Each handler turns one inbound request into at most one store call. Missing
configuration and store failures are logged and resolved to None; callers
cannot tell a missing book from a failed read.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from service.dal import BooksStore
from service.handlers.models.env_vars import BooksHandlerEnvVars
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.book import Book

T = TypeVar('T')


class BookHandler:
    """Base class holding the injected configuration and store."""

    operation: str = 'Book'

    def __init__(self, config: BooksHandlerEnvVars, store: BooksStore) -> None:
        self.config = config
        self.store = store

    def _resolve_table_name(self) -> Optional[str]:
        """Return the configured table name, or None after reporting its absence."""
        if not self.config.BOOKS_TABLE:
            logger.error("BOOKS_TABLE was not specified", extra={"operation": self.operation})
            metrics.add_metric(name="MissingConfiguration", unit=MetricUnit.Count, value=1)
            return None
        return self.config.BOOKS_TABLE

    def _execute(self, call: Callable[[str], T]) -> Optional[T]:
        table_name = self._resolve_table_name()
        if table_name is None:
            return None

        try:
            result = call(table_name)
        except Exception as e:
            logger.exception("Book operation failed", extra={
                "operation": self.operation,
                "table_name": table_name,
                "error": str(e),
            })
            metrics.add_metric(name=f"{self.operation}Failed", unit=MetricUnit.Count, value=1)
            return None

        metrics.add_metric(name=f"{self.operation}Succeeded", unit=MetricUnit.Count, value=1)
        return result


class CreateBookHandler(BookHandler):
    operation = 'CreateBook'

    @tracer.capture_method
    def handle(self, book: Book) -> Optional[Book]:
        """Write the book unconditionally; an existing book with the same id is replaced."""
        logger.info("Creating book", extra={"book_id": book.id})

        def _put(table_name: str) -> Book:
            self.store.put_item(table_name, book.to_item())
            return book

        return self._execute(_put)


class GetBookByIdHandler(BookHandler):
    operation = 'GetBookById'

    @tracer.capture_method
    def handle(self, book_id: str) -> Optional[Book]:
        """Point lookup; None when the book is missing or the read fails."""

        def _get(table_name: str) -> Optional[Book]:
            if self.config.GET_BOOK_DELAY_MS:
                logger.debug("Delaying book read", extra={"delay_ms": self.config.GET_BOOK_DELAY_MS})
                time.sleep(self.config.GET_BOOK_DELAY_MS / 1000)

            item = self.store.get_item(table_name, {'id': book_id})
            if item is None:
                return None
            return Book.from_item(item)

        return self._execute(_get)


class ListBooksHandler(BookHandler):
    operation = 'ListBooks'

    @tracer.capture_method
    def handle(self) -> Optional[List[Book]]:
        """Every well-formed book in the table, unordered; malformed items are skipped."""

        def _scan(table_name: str) -> List[Book]:
            listed = []
            for item in self.store.scan_items(table_name):
                try:
                    listed.append(Book.from_item(item))
                except ValidationError as e:
                    logger.warning("Skipping malformed book item", extra={
                        "book_id": item.get("id"),
                        "validation_errors": str(e),
                    })
                    metrics.add_metric(name="MalformedBookItem", unit=MetricUnit.Count, value=1)
            return listed

        return self._execute(_scan)


class UpdateBookHandler(BookHandler):
    operation = 'UpdateBook'

    @tracer.capture_method
    def handle(self, book: Book) -> Optional[Book]:
        """Set name and completed on the book keyed by id, echoing the input back."""
        logger.info("Updating book", extra={"book_id": book.id})

        def _update(table_name: str) -> Book:
            self.store.update_item(table_name, {'id': book.id}, book.updatable_attributes())
            return book

        return self._execute(_update)


class DeleteBookHandler(BookHandler):
    operation = 'DeleteBook'

    @tracer.capture_method
    def handle(self, book_id: str) -> Optional[str]:
        """Delete by id without checking existence, returning the id."""

        def _delete(table_name: str) -> str:
            self.store.delete_item(table_name, {'id': book_id})
            return book_id

        return self._execute(_delete)


@dataclass(frozen=True)
class BookHandlers:
    """The five handlers sharing one configuration and store."""

    create_book: CreateBookHandler
    get_book_by_id: GetBookByIdHandler
    list_books: ListBooksHandler
    update_book: UpdateBookHandler
    delete_book: DeleteBookHandler

    @classmethod
    def build(cls, config: BooksHandlerEnvVars, store: BooksStore) -> 'BookHandlers':
        return cls(
            create_book=CreateBookHandler(config, store),
            get_book_by_id=GetBookByIdHandler(config, store),
            list_books=ListBooksHandler(config, store),
            update_book=UpdateBookHandler(config, store),
            delete_book=DeleteBookHandler(config, store),
        )
