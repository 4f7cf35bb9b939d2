"""
Output models for API responses using Pydantic.

Every response body produced by the service is an ``ApiResponse`` envelope.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field


class ApiResponse(BaseModel):
    """Uniform response envelope: ``{success, data}`` or ``{success, error}``."""

    success: Annotated[bool, Field(description='Whether the operation succeeded')]

    data: Annotated[Any, Field(
        default=None,
        description='Operation result, present on success'
    )] = None

    error: Annotated[Optional[str], Field(
        default=None,
        description='Human-readable error message, present on failure',
        examples=['Pet not found', 'Validation error: Pet ID is required']
    )] = None


class MessageOutput(BaseModel):
    """Confirmation payload for operations without a record to return."""

    message: Annotated[str, Field(
        description='Confirmation message',
        examples=['Pet deleted successfully']
    )]
