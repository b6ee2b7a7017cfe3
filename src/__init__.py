"""
AppSync Books API - Source Package

This package contains the Lambda function and service layers resolving the
books GraphQL API against a DynamoDB table.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
