"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers that serve as entry points
for the service. Each handler implements the three-layer architecture pattern:

1. Handler Layer (this module): Request/response handling and routing
2. Logic Layer: Validation and cross-entity checks
3. Data Access Layer: DynamoDB persistence

Entry points:
- service.handlers.pets_handler.lambda_handler
- service.handlers.vaccines_handler.lambda_handler
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
