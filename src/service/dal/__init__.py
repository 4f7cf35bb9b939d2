"""
Data Access Layer (DAL) for the pets and vaccines service.

This module provides the data access layer interfaces, the explicit result
type returned by deletes, and factory functions building the DynamoDB
implementations. Handlers and services only depend on the protocols so an
alternate backing store can be substituted without touching them.
"""

from typing import Annotated, Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from service.models.input import CreatePetRequest, CreateVaccineRequest
from service.models.pet import Pet
from service.models.vaccine import Vaccine


class DeleteResult(BaseModel):
    """Outcome of a delete call; a failed delete carries the store error code."""

    deleted: Annotated[bool, Field(description='Whether the store accepted the delete')]
    error: Annotated[Optional[str], Field(default=None, description='Store error code on failure')] = None


@runtime_checkable
class PetsDalHandler(Protocol):
    """Protocol defining the pets data access interface."""

    def create_pet_in_db(self, request: CreatePetRequest) -> Pet:
        """Create a new pet with a generated ID and timestamps."""
        ...

    def get_pet_by_id(self, pet_id: str) -> Pet | None:
        """Retrieve a pet by its ID, None when absent."""
        ...

    def get_all_pets(self) -> list[Pet]:
        """List every pet in store order."""
        ...

    def get_pets_by_owner_id(self, owner_id: str) -> list[Pet]:
        """List the pets whose ownerId matches exactly."""
        ...

    def update_pet_in_db(self, pet_id: str, updates: dict[str, Any]) -> Pet | None:
        """Merge updates over an existing pet, None when absent."""
        ...

    def delete_pet_by_id(self, pet_id: str) -> DeleteResult:
        """Delete a pet by its ID."""
        ...


@runtime_checkable
class VaccinesDalHandler(Protocol):
    """Protocol defining the vaccines data access interface."""

    def create_vaccine_in_db(self, request: CreateVaccineRequest) -> Vaccine:
        """Create a new vaccine record with a generated ID and timestamps."""
        ...

    def get_vaccine_by_id(self, vaccine_id: str) -> Vaccine | None:
        """Retrieve a vaccine record by its ID, None when absent."""
        ...

    def get_all_vaccines(self) -> list[Vaccine]:
        """List every vaccine record in store order."""
        ...

    def get_vaccines_by_pet_id(self, pet_id: str) -> list[Vaccine]:
        """List the vaccine records whose petId matches exactly."""
        ...

    def update_vaccine_in_db(self, vaccine_id: str, updates: dict[str, Any]) -> Vaccine | None:
        """Merge updates over an existing vaccine record, None when absent."""
        ...

    def delete_vaccine_by_id(self, vaccine_id: str) -> DeleteResult:
        """Delete a vaccine record by its ID."""
        ...


def get_pets_dal_handler(table_name: str, dynamodb: Any = None) -> PetsDalHandler:
    """
    Factory function to get the pets DAL handler.

    Args:
        table_name: Name of the pets table
        dynamodb: boto3 DynamoDB service resource to use; a default one is
            created when omitted

    Returns:
        DAL handler instance
    """
    # Import here to avoid circular imports
    from service.dal.pets_db_handler import PetsDynamoDbHandler

    return PetsDynamoDbHandler(table_name, dynamodb=dynamodb)


def get_vaccines_dal_handler(table_name: str, dynamodb: Any = None) -> VaccinesDalHandler:
    """
    Factory function to get the vaccines DAL handler.

    Args:
        table_name: Name of the vaccines table
        dynamodb: boto3 DynamoDB service resource to use

    Returns:
        DAL handler instance
    """
    from service.dal.vaccines_db_handler import VaccinesDynamoDbHandler

    return VaccinesDynamoDbHandler(table_name, dynamodb=dynamodb)


__all__ = [
    'DeleteResult',
    'PetsDalHandler',
    'VaccinesDalHandler',
    'get_pets_dal_handler',
    'get_vaccines_dal_handler',
]
