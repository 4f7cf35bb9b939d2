"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including input validation models, output response models, and domain models.
"""

from .pet import Pet, Species
from .vaccine import Vaccine, VaccineType
from .input import CreatePetRequest, UpdatePetRequest, CreateVaccineRequest, UpdateVaccineRequest
from .output import ApiResponse, MessageOutput

__all__ = [
    # Input models
    "CreatePetRequest",
    "UpdatePetRequest",
    "CreateVaccineRequest",
    "UpdateVaccineRequest",

    # Output models
    "ApiResponse",
    "MessageOutput",

    # Domain models
    "Pet",
    "Species",
    "Vaccine",
    "VaccineType",
]
