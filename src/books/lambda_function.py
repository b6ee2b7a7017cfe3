"""
Books Lambda Function - Entry point for the books GraphQL API.

AppSync invokes this function as a direct Lambda data source for every field
of the books schema; the resolver in the service layer picks the handler.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext
from service.handlers.books_handler import app
from service.handlers.utils.observability import logger, metrics, tracer


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.APPSYNC_RESOLVER)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Any:
    """
    Lambda function entry point for the books API.

    Args:
        event: AppSync direct Lambda resolver event
        context: Lambda context object

    Returns:
        The resolved field value, or None when the operation did not succeed
    """
    return app.resolve(event, context)
