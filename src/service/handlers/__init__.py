"""
AWS Lambda Handlers Module.

The handler layer of the books service: the AppSync resolver dispatching the
GraphQL fields, typed environment configuration and the shared observability
instances.
"""

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
