"""
Handler boundary turning service errors into API responses.
"""

import functools

from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.errors import (
    ResourceNotFoundError,
    ValidationError,
    log_error_metrics,
)
from service.handlers.utils.observability import logger, metrics
from service.handlers.utils.responses import (
    error_response,
    not_found_response,
    validation_error_response,
)


def handle_service_errors(failure_message: str):
    """
    Decorator mapping errors raised by a route to response envelopes.

    Validation errors become 400, unknown identifiers 404. Anything else is
    logged with its traceback and answered with a 500 carrying only
    ``failure_message``.

    Args:
        failure_message: Fixed message returned for unexpected failures,
            e.g. "Could not create pet"
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ValidationError as e:
                log_error_metrics(e)
                return validation_error_response(e.message)
            except ResourceNotFoundError as e:
                log_error_metrics(e)
                return not_found_response(e.resource_type)
            except Exception:
                logger.exception(failure_message, extra={"function_name": func.__name__})
                metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
                return error_response(failure_message)

        return wrapper

    return decorator
