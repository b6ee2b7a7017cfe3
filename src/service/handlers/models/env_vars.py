"""
Environment variable models for type-safe configuration.

The parsed model is the configuration object handed to every book handler, so
tests can build one directly instead of touching the process environment.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class BooksHandlerEnvVars(BaseModel):
    """Environment variables for the books Lambda function."""

    # DynamoDB table holding the books; absence is reported per request
    BOOKS_TABLE: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB table name for book storage'
    )] = None

    # Pause before the get-by-id read, kept for callers relying on the old timing
    GET_BOOK_DELAY_MS: Annotated[int, Field(
        default=0,
        description='Delay in milliseconds before reading a single book',
        ge=0,
        le=60000
    )] = 0

    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # Local DynamoDB endpoint
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override'
    )] = None

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='books-api',
        description='Service name for AWS Powertools'
    )] = 'books-api'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        default='false',
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    @property
    def table_configured(self) -> bool:
        """Check if a table name was provided."""
        return bool(self.BOOKS_TABLE)

    @property
    def tracing_enabled(self) -> bool:
        """Check if X-Ray tracing is enabled."""
        return self.POWERTOOLS_TRACE_DISABLED.lower() == 'false'


def get_handler_env_vars() -> BooksHandlerEnvVars:
    """
    Get typed environment variables for the books handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=BooksHandlerEnvVars)
