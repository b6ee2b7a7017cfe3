"""
Centralized observability utilities for the books resolvers.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection shared by the handler, logic and DAL layers.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Metrics namespace for the books API
METRICS_NAMESPACE = 'BooksApi'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# Namespace can be overridden with POWERTOOLS_METRICS_NAMESPACE
metrics = Metrics(namespace=METRICS_NAMESPACE)
