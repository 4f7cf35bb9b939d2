"""
Pets and Vaccines Service Module.

This package contains the service implementation following the three-layer
architecture pattern:

- handlers: API handlers and Lambda entry points
- logic: Request validation and business rules
- dal: Data access layer for DynamoDB persistence
- models: Data models and schemas
"""

__version__ = "1.0.0"
__description__ = "Pet and vaccination records API on AWS Lambda"

# Re-export commonly used classes for convenience
from service.models.pet import Pet, Species
from service.models.vaccine import Vaccine, VaccineType
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Pet",
    "Species",
    "Vaccine",
    "VaccineType",
    "logger",
    "tracer",
    "metrics",
]
