"""
Book domain model.

This module defines the single entity stored in the books table. The same model
validates GraphQL input payloads and the items read back from DynamoDB.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictBool

# Attributes the update resolver is allowed to write
UPDATABLE_FIELDS = ('name', 'completed')


def _from_dynamodb_value(value: Any) -> Any:
    # The table resource returns numbers as Decimal and sets as set, neither of which is JSON serializable
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {key: _from_dynamodb_value(inner) for key, inner in value.items()}
    if isinstance(value, (list, set, frozenset)):
        return [_from_dynamodb_value(inner) for inner in value]
    return value


class Book(BaseModel):
    """Core Book domain model."""

    model_config = ConfigDict(
        extra='allow',
        json_schema_extra={
            'example': {
                'id': '1',
                'name': 'Dune',
                'completed': False,
            }
        },
    )

    id: Annotated[str, Field(
        min_length=1,
        description='Caller-assigned unique identifier, used as the partition key',
        examples=['1', 'b7a4c1d2']
    )]

    name: Annotated[str, Field(
        description='Title of the book',
        examples=['Dune']
    )]

    completed: Annotated[StrictBool, Field(
        description='Whether the book has been read'
    )]

    def to_item(self) -> Dict[str, Any]:
        """Item as written by a put, extra attributes included."""
        return self.model_dump()

    def updatable_attributes(self) -> Dict[str, Any]:
        """The attributes an update may change."""
        return {field: getattr(self, field) for field in UPDATABLE_FIELDS}

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'Book':
        """
        Create a Book from a stored DynamoDB item.

        Args:
            item: Item dictionary as returned by the table resource

        Returns:
            Book instance
        """
        return cls.model_validate(_from_dynamodb_value(item))
