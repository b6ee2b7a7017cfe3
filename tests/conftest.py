"""
Pytest configuration and shared fixtures for the books API.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import pytest

# The resolver module builds its dependencies at import time, so the
# environment must be in place before any test module imports it.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "testing",
    "AWS_SECRET_ACCESS_KEY": "testing",
    "BOOKS_TABLE": "test-books-table",
    "POWERTOOLS_SERVICE_NAME": "test-books-api",
    "POWERTOOLS_METRICS_NAMESPACE": "TestBooksApi",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3
from botocore.exceptions import ClientError
from moto import mock_aws

from service.dal.dynamodb_handler import DALError
from service.handlers.models.env_vars import BooksHandlerEnvVars
from service.logic.book_handlers import BookHandlers
from service.models.book import Book

TABLE_NAME = "test-books-table"


class InMemoryBooksStore:
    """Dict-backed store recording every call made to it."""

    def __init__(self) -> None:
        self.tables: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.calls: List[tuple] = []

    def _table(self, table_name: str) -> Dict[str, Dict[str, Any]]:
        return self.tables.setdefault(table_name, {})

    def put_item(self, table_name: str, item: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("put_item", table_name, item))
        self._table(table_name)[item["id"]] = dict(item)
        return item

    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(("get_item", table_name, key))
        item = self._table(table_name).get(key["id"])
        return dict(item) if item is not None else None

    def delete_item(self, table_name: str, key: Dict[str, Any]) -> None:
        self.calls.append(("delete_item", table_name, key))
        self._table(table_name).pop(key["id"], None)

    def scan_items(self, table_name: str) -> List[Dict[str, Any]]:
        self.calls.append(("scan_items", table_name))
        return [dict(item) for item in self._table(table_name).values()]

    def update_item(self, table_name: str, key: Dict[str, Any], updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(("update_item", table_name, key, updates))
        item = self._table(table_name).setdefault(key["id"], dict(key))
        item.update(updates)
        return dict(updates)


class FailingBooksStore(InMemoryBooksStore):
    """Store whose every operation fails after recording the call."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    def put_item(self, table_name, item):
        super().put_item(table_name, item)
        raise self.error

    def get_item(self, table_name, key):
        super().get_item(table_name, key)
        raise self.error

    def delete_item(self, table_name, key):
        super().delete_item(table_name, key)
        raise self.error

    def scan_items(self, table_name):
        super().scan_items(table_name)
        raise self.error

    def update_item(self, table_name, key, updates):
        super().update_item(table_name, key, updates)
        raise self.error


# Configuration fixtures
@pytest.fixture
def books_config() -> BooksHandlerEnvVars:
    return BooksHandlerEnvVars(BOOKS_TABLE=TABLE_NAME)


@pytest.fixture
def unconfigured() -> BooksHandlerEnvVars:
    return BooksHandlerEnvVars(BOOKS_TABLE=None)


# Store fixtures
@pytest.fixture
def memory_store() -> InMemoryBooksStore:
    return InMemoryBooksStore()


@pytest.fixture
def failing_store() -> FailingBooksStore:
    return FailingBooksStore(DALError(
        message="DynamoDB error: boom",
        operation="Test",
        table_name=TABLE_NAME,
        error_code="DYNAMODB_InternalServerError",
    ))


@pytest.fixture
def handlers(books_config, memory_store) -> BookHandlers:
    return BookHandlers.build(config=books_config, store=memory_store)


# DynamoDB fixtures
@pytest.fixture
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws_mock):
    """Create a mock books table for testing."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
    table = dynamodb.create_table(
        TableName=TABLE_NAME,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    yield table


# Sample data fixtures
@pytest.fixture
def dune() -> Book:
    return Book(id="1", name="Dune", completed=False)


@pytest.fixture
def sample_books() -> List[Book]:
    return [
        Book(id="1", name="Dune", completed=False),
        Book(id="2", name="Neuromancer", completed=True),
        Book(id="3", name="Hyperion", completed=False),
    ]


@dataclass
class LambdaContext:
    function_name: str = "test-books-function"
    memory_limit_in_mb: int = 1024
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-books-function"
    aws_request_id: str = "test-request-id-123"

    def get_remaining_time_in_millis(self) -> int:
        return 10000


@pytest.fixture
def lambda_context() -> LambdaContext:
    return LambdaContext()


@pytest.fixture
def appsync_event():
    """Build a direct Lambda resolver event for a GraphQL field."""

    def _event(type_name: str, field_name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return {
            "arguments": arguments or {},
            "identity": None,
            "source": None,
            "request": {"headers": {"x-amzn-trace-id": "Root=1-test"}},
            "prev": None,
            "info": {
                "parentTypeName": type_name,
                "fieldName": field_name,
                "variables": {},
                "selectionSetList": ["id", "name", "completed"],
            },
            "stash": {},
        }

    return _event


# Error simulation fixtures
@pytest.fixture
def dynamodb_client_error():
    """Build botocore ClientErrors for testing error translation."""

    def create_error(error_code: str, message: str = "Test error") -> ClientError:
        return ClientError(
            error_response={"Error": {"Code": error_code, "Message": message}},
            operation_name="TestOperation",
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
