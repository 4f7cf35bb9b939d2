"""
Response builders for the API Gateway handlers.

Every response, successful or not, is an ``ApiResponse`` envelope with the
same JSON content type and permissive CORS headers.
"""

from typing import Any

from aws_lambda_powertools.event_handler import Response, content_types

from service.models.output import ApiResponse

RESPONSE_HEADERS = {
    "Content-Type": content_types.APPLICATION_JSON,
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def create_api_response(status_code: int, envelope: ApiResponse) -> Response:
    """Create an API Gateway response carrying the envelope and fixed headers."""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=envelope.model_dump_json(exclude_unset=True),
        headers=dict(RESPONSE_HEADERS),
    )


def success_response(data: Any, status_code: int = 200) -> Response:
    return create_api_response(status_code, ApiResponse(success=True, data=data))


def error_response(message: str, status_code: int = 500) -> Response:
    return create_api_response(status_code, ApiResponse(success=False, error=message))


def not_found_response(resource: str = "Resource") -> Response:
    return error_response(f"{resource} not found", 404)


def validation_error_response(message: str) -> Response:
    return error_response(f"Validation error: {message}", 400)
