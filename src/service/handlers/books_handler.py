"""
Books Handler - AppSync resolvers for the books GraphQL API.

This module wires the GraphQL fields to the record handlers. It parses the
field arguments into domain models and serializes the results; every failure
resolves the field to null.
"""

from typing import Any, Dict, List, Optional

from aws_lambda_powertools.event_handler import AppSyncResolver
from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from service.dal import get_dal_handler
from service.handlers.models.env_vars import get_handler_env_vars
from service.handlers.utils.observability import logger, metrics, tracer
from service.logic.book_handlers import BookHandlers
from service.models.book import Book

app = AppSyncResolver()

# Initialize service dependencies once per execution environment
env_vars = get_handler_env_vars()
books_store = get_dal_handler(
    region_name=env_vars.AWS_REGION,
    endpoint_url=env_vars.DYNAMODB_ENDPOINT,  # For local testing
)
books = BookHandlers.build(config=env_vars, store=books_store)


def _parse_book(book: Any, field_name: str) -> Optional[Book]:
    try:
        return Book.model_validate(book)
    except ValidationError as e:
        logger.error("Book argument validation failed", extra={
            "field_name": field_name,
            "validation_errors": str(e),
            "error_count": e.error_count(),
        })
        metrics.add_metric(name="ValidationError", unit=MetricUnit.Count, value=1)
        return None


@app.resolver(type_name="Mutation", field_name="createBook")
@tracer.capture_method
def create_book(book: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    parsed = _parse_book(book, "createBook")
    if parsed is None:
        return None
    created = books.create_book.handle(parsed)
    return created.model_dump() if created else None


@app.resolver(type_name="Query", field_name="getBookById")
@tracer.capture_method
def get_book_by_id(bookId: str) -> Optional[Dict[str, Any]]:
    book = books.get_book_by_id.handle(bookId)
    return book.model_dump() if book else None


@app.resolver(type_name="Query", field_name="listBooks")
@tracer.capture_method
def list_books() -> Optional[List[Dict[str, Any]]]:
    listed = books.list_books.handle()
    if listed is None:
        return None
    return [book.model_dump() for book in listed]


@app.resolver(type_name="Mutation", field_name="updateBook")
@tracer.capture_method
def update_book(book: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    parsed = _parse_book(book, "updateBook")
    if parsed is None:
        return None
    updated = books.update_book.handle(parsed)
    return updated.model_dump() if updated else None


@app.resolver(type_name="Mutation", field_name="deleteBook")
@tracer.capture_method
def delete_book(bookId: str) -> Optional[str]:
    return books.delete_book.handle(bookId)
