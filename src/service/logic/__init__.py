"""
Business Logic Layer Module.

This module contains the request validation and orchestration for the pets
and vaccines service. It implements the middle layer of the three-layer
architecture: handlers call into it with raw path parameters and bodies, and
it calls the data access layer only once every check has passed.
"""

from service.logic.pet_service import PetNotFoundError, PetService
from service.logic.vaccine_service import VaccineNotFoundError, VaccineService

__all__ = [
    "PetService",
    "PetNotFoundError",
    "VaccineService",
    "VaccineNotFoundError",
]
