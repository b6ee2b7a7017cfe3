"""
Service Models Package

Pydantic models shared by the resolvers, the handler logic and the data access layer.
"""

from .book import UPDATABLE_FIELDS, Book

__all__ = [
    "Book",
    "UPDATABLE_FIELDS",
]
