"""
Service error hierarchy shared by the logic and handler layers.

The logic layer raises these exceptions for every anticipated failure
(bad input, unknown identifiers); the handler boundary maps them to
HTTP status codes and response envelopes.
"""

from enum import Enum
from typing import Dict, List, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError as PydanticValidationError

from service.handlers.utils.observability import logger, metrics


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category


class ValidationError(BaseServiceError):
    """Raised when request input is missing or malformed."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
        )
        self.field_errors = field_errors or []

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError) -> 'ValidationError':
        """
        Build a service validation error from a Pydantic validation error.

        The message names the first failing field; every failure is kept
        in ``field_errors`` for logging.
        """
        field_errors = [
            {
                "field": ".".join(str(part) for part in item["loc"]),
                "message": item["msg"],
            }
            for item in error.errors()
        ]
        first = field_errors[0]
        message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
        return cls(message=message, field_errors=field_errors)


class ResourceNotFoundError(BaseServiceError):
    """Raised when a well-formed identifier does not resolve to a record."""

    def __init__(self, resource_type: str, resource_id: Optional[str] = None):
        super().__init__(
            message=f"{resource_type} not found",
            error_code="RESOURCE_NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


def log_error_metrics(error: BaseServiceError) -> None:
    """Log a service error and count it by category."""

    logger.info("Request rejected", extra={
        "error_code": error.error_code,
        "category": error.category.value,
        "error_message": error.message,
        "field_errors": getattr(error, "field_errors", None),
    })

    metric_names = {
        ErrorCategory.VALIDATION: "ValidationError",
        ErrorCategory.NOT_FOUND: "NotFound",
    }
    metrics.add_metric(
        name=metric_names[error.category],
        unit=MetricUnit.Count,
        value=1,
    )
