"""
Data Access Layer (DAL) for the books table.

This module defines the storage capability the book handlers depend on and the
factory returning the DynamoDB implementation of it.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class BooksStore(Protocol):
    """Protocol defining the key-value operations the handlers may call."""

    def put_item(self, table_name: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Write an item, overwriting any item with the same key."""
        ...

    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Read a single item by key."""
        ...

    def delete_item(self, table_name: str, key: Dict[str, Any]) -> None:
        """Delete a single item by key."""
        ...

    def scan_items(self, table_name: str) -> List[Dict[str, Any]]:
        """Read every item in the table."""
        ...

    def update_item(self, table_name: str, key: Dict[str, Any], updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set the given attributes on the item with the given key."""
        ...


def get_dal_handler(region_name: Optional[str] = None, endpoint_url: Optional[str] = None) -> BooksStore:
    """
    Factory function to get the DynamoDB store.

    Args:
        region_name: AWS region name
        endpoint_url: DynamoDB endpoint URL (for local testing)

    Returns:
        Store instance
    """
    # Import here to avoid circular imports
    from service.dal.dynamodb_handler import DynamoDBHandler

    return DynamoDBHandler(region_name=region_name, endpoint_url=endpoint_url)


__all__ = [
    'BooksStore',
    'get_dal_handler',
]
