"""
Data Access Layer for DynamoDB operations.

Every public method performs exactly one logical table operation and turns
botocore failures into DALError, with metrics and structured logs per operation.
"""

import functools
import time
from typing import Any, Callable, Dict, List, Optional

import boto3
from aws_lambda_powertools.metrics import MetricUnit
from botocore.exceptions import BotoCoreError, ClientError

from service.handlers.utils.observability import logger, metrics, tracer


class DALError(Exception):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        message: str,
        operation: str,
        table_name: str,
        error_code: str = "DAL_ERROR",
        retry_after: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.table_name = table_name
        self.error_code = error_code
        self.retry_after = retry_after

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "operation": self.operation,
            "table_name": self.table_name,
            "retry_after": self.retry_after,
        }


def _client_error_to_dal_error(error: ClientError, operation: str, table_name: str) -> DALError:
    error_code = error.response['Error']['Code']
    error_message = error.response['Error'].get('Message', '')

    if error_code == 'ResourceNotFoundException':
        return DALError(
            message=f"Table {table_name} not found",
            operation=operation,
            table_name=table_name,
            error_code="TABLE_NOT_FOUND",
        )
    if error_code == 'ProvisionedThroughputExceededException':
        return DALError(
            message="DynamoDB throughput exceeded",
            operation=operation,
            table_name=table_name,
            error_code="THROUGHPUT_EXCEEDED",
            retry_after=60,
        )
    if error_code == 'ThrottlingException':
        return DALError(
            message="DynamoDB throttling detected",
            operation=operation,
            table_name=table_name,
            error_code="THROTTLING_ERROR",
            retry_after=30,
        )
    return DALError(
        message=f"DynamoDB error: {error_message}",
        operation=operation,
        table_name=table_name,
        error_code=f"DYNAMODB_{error_code}",
    )


def handle_dynamodb_errors(operation: str) -> Callable:
    """Decorator to time a table operation and translate its errors consistently."""

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self: 'DynamoDBHandler', table_name: str, *args, **kwargs):
            operation_start = time.time()
            metrics.add_metric(name=f"DynamoDB{operation}Count", unit=MetricUnit.Count, value=1)

            try:
                result = func(self, table_name, *args, **kwargs)
            except ClientError as e:
                dal_error = _client_error_to_dal_error(e, operation, table_name)
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB {operation} error", extra={
                    "dal_error": dal_error.to_dict(),
                    "aws_error_code": e.response["Error"]["Code"],
                })
                raise dal_error from e
            except BotoCoreError as e:
                dal_error = DALError(
                    message=f"Database connection error: {e}",
                    operation=operation,
                    table_name=table_name,
                    error_code="DATABASE_CONNECTION_ERROR",
                )
                metrics.add_metric(name=f"DynamoDB{operation}Error", unit=MetricUnit.Count, value=1)
                logger.error(f"DynamoDB connection error during {operation}", extra={
                    "dal_error": dal_error.to_dict(),
                })
                raise dal_error from e

            operation_duration = (time.time() - operation_start) * 1000
            metrics.add_metric(name=f"DynamoDB{operation}Duration", unit=MetricUnit.Milliseconds, value=operation_duration)
            tracer.put_annotation("dynamodb_operation", operation)
            tracer.put_annotation("table_name", table_name)
            return result

        return wrapper
    return decorator


class DynamoDBHandler:
    """DynamoDB implementation of the books store."""

    def __init__(
        self,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """
        Initialize DynamoDB handler.

        The table is chosen per call, so one handler serves whatever table
        name the caller resolved from its configuration.

        Args:
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
        """
        session_config = {}
        if region_name:
            session_config['region_name'] = region_name
        if endpoint_url:
            session_config['endpoint_url'] = endpoint_url

        self.dynamodb = boto3.resource('dynamodb', **session_config)

        logger.info("DynamoDB handler initialized", extra={
            "region_name": region_name,
            "endpoint_url": endpoint_url,
        })

    def _table(self, table_name: str):
        return self.dynamodb.Table(table_name)

    @tracer.capture_method
    @handle_dynamodb_errors("PutItem")
    def put_item(self, table_name: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put an item into DynamoDB, replacing any item with the same key.

        Args:
            table_name: Name of the DynamoDB table
            item: Item data to store

        Returns:
            The stored item data

        Raises:
            DALError: If DynamoDB operation fails
        """
        self._table(table_name).put_item(Item=item)

        logger.info("Item stored successfully", extra={
            "table_name": table_name,
            "item_id": item.get('id', 'unknown'),
        })
        return item

    @tracer.capture_method
    @handle_dynamodb_errors("GetItem")
    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Get a single item from DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            key: Primary key of the item to retrieve

        Returns:
            Item data or None if not found

        Raises:
            DALError: If DynamoDB operation fails
        """
        response = self._table(table_name).get_item(Key=key)
        item = response.get('Item')

        if item is None:
            logger.info("Item not found", extra={"table_name": table_name, "key": key})
        return item

    @tracer.capture_method
    @handle_dynamodb_errors("DeleteItem")
    def delete_item(self, table_name: str, key: Dict[str, Any]) -> None:
        """
        Delete an item from DynamoDB. Deleting a missing key is not an error.

        Args:
            table_name: Name of the DynamoDB table
            key: Primary key of the item to delete

        Raises:
            DALError: If DynamoDB operation fails
        """
        self._table(table_name).delete_item(Key=key)
        logger.info("Item deleted", extra={"table_name": table_name, "key": key})

    @tracer.capture_method
    @handle_dynamodb_errors("Scan")
    def scan_items(self, table_name: str) -> List[Dict[str, Any]]:
        """
        Scan the whole table, following pagination until it is exhausted.

        Args:
            table_name: Name of the DynamoDB table

        Returns:
            Every item in the table, in the order DynamoDB returned them

        Raises:
            DALError: If DynamoDB operation fails
        """
        table = self._table(table_name)
        scan_kwargs: Dict[str, Any] = {}
        items: List[Dict[str, Any]] = []
        pages = 0

        while True:
            response = table.scan(**scan_kwargs)
            items.extend(response.get('Items', []))
            pages += 1
            if 'LastEvaluatedKey' not in response:
                break
            scan_kwargs['ExclusiveStartKey'] = response['LastEvaluatedKey']

        logger.info("Scan completed successfully", extra={
            "table_name": table_name,
            "items_count": len(items),
            "pages": pages,
        })
        return items

    @tracer.capture_method
    @handle_dynamodb_errors("UpdateItem")
    def update_item(
        self,
        table_name: str,
        key: Dict[str, Any],
        updates: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Set the given attributes on an item in DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            key: Primary key of the item to update
            updates: Attribute names mapped to their new values

        Returns:
            The updated attributes as returned by DynamoDB (UPDATED_NEW)

        Raises:
            DALError: If DynamoDB operation fails
        """
        attribute_names = {f'#{name}': name for name in updates}
        attribute_values = {f':{name}': value for name, value in updates.items()}
        update_expression = 'SET ' + ', '.join(f'#{name} = :{name}' for name in updates)

        response = self._table(table_name).update_item(
            Key=key,
            UpdateExpression=update_expression,
            ExpressionAttributeNames=attribute_names,
            ExpressionAttributeValues=attribute_values,
            ReturnValues='UPDATED_NEW',
        )

        logger.info("Item updated successfully", extra={
            "table_name": table_name,
            "key": key,
            "attributes": sorted(updates),
        })
        return response.get('Attributes')
