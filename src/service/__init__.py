"""
Books API Service Module.

This package contains the resolver implementation for the books GraphQL API,
split into layers:

- handlers: AppSync resolver, configuration and observability
- logic: the record handlers, one per GraphQL field
- dal: data access layer over DynamoDB
- models: the Book domain model
"""

__version__ = "1.0.0"
__description__ = "AppSync books API resolvers backed by DynamoDB"

# Re-export commonly used classes for convenience
from service.models.book import Book
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Book",
    "logger",
    "tracer",
    "metrics",
]
