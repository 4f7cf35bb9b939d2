"""
Business Logic Layer for pet management.

Each operation runs its precondition checks in a fixed order and stops at the
first failure, so no store write ever happens for a rejected request.
"""

from typing import List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import DeleteResult, PetsDalHandler
from service.handlers.utils.errors import ResourceNotFoundError, ValidationError
from service.handlers.utils.observability import logger, metrics, tracer
from service.logic.validation import (
    is_number,
    parse_request_body,
    require_path_parameter,
    validate_model,
)
from service.models.input import CreatePetRequest, UpdatePetRequest
from service.models.pet import Pet

PET_ID_REQUIRED = "Pet ID is required"


class PetNotFoundError(ResourceNotFoundError):
    """Raised when a pet ID does not resolve to a stored pet."""

    def __init__(self, pet_id: Optional[str] = None):
        super().__init__(resource_type="Pet", resource_id=pet_id)


class PetService:
    """Business logic service for pet management."""

    def __init__(self, pets_dal: PetsDalHandler):
        """
        Initialize pet service.

        Args:
            pets_dal: Data access handler for the pets table
        """
        self.pets_dal = pets_dal

    @tracer.capture_method
    def create_pet(self, body: Optional[str]) -> Pet:
        """
        Create a new pet.

        Args:
            body: Raw JSON request body

        Returns:
            The stored pet

        Raises:
            ValidationError: If the body is missing or invalid
        """
        payload = parse_request_body(body)

        required = ('name', 'species', 'ownerId', 'ownerName')
        if any(not payload.get(field) for field in required):
            raise ValidationError("Name, species, ownerId and ownerName are required")

        age, weight = payload.get('age'), payload.get('weight')
        if (is_number(age) and age < 0) or (is_number(weight) and weight <= 0):
            raise ValidationError("Age must be positive and weight must be greater than 0")

        request = validate_model(CreatePetRequest, payload)
        pet = self.pets_dal.create_pet_in_db(request)

        metrics.add_metric(name="PetCreated", unit=MetricUnit.Count, value=1)
        logger.info("Pet created successfully", extra={"pet_id": pet.id, "owner_id": pet.owner_id})
        return pet

    @tracer.capture_method
    def get_pet(self, pet_id: Optional[str]) -> Pet:
        """
        Get a pet by ID.

        Raises:
            ValidationError: If the ID is missing
            PetNotFoundError: If no pet has this ID
        """
        pet_id = require_path_parameter(pet_id, PET_ID_REQUIRED)
        pet = self.pets_dal.get_pet_by_id(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)
        return pet

    @tracer.capture_method
    def list_pets(self) -> List[Pet]:
        """List every pet."""
        return self.pets_dal.get_all_pets()

    @tracer.capture_method
    def list_pets_by_owner(self, owner_id: Optional[str]) -> List[Pet]:
        """List the pets of an owner, empty when the owner has none."""
        owner_id = require_path_parameter(owner_id, "Owner ID is required")
        return self.pets_dal.get_pets_by_owner_id(owner_id)

    @tracer.capture_method
    def update_pet(self, pet_id: Optional[str], body: Optional[str]) -> Pet:
        """
        Partially update a pet; omitted fields keep their stored values.

        Args:
            pet_id: Pet identifier from the path
            body: Raw JSON request body with the fields to change

        Returns:
            The merged pet

        Raises:
            ValidationError: If the ID or body is missing or invalid
            PetNotFoundError: If no pet has this ID
        """
        pet_id = require_path_parameter(pet_id, PET_ID_REQUIRED)
        payload = parse_request_body(body)

        age = payload.get('age')
        if is_number(age) and age < 0:
            raise ValidationError("Age must be positive")

        weight = payload.get('weight')
        if is_number(weight) and weight <= 0:
            raise ValidationError("Weight must be greater than 0")

        request = validate_model(UpdatePetRequest, payload)
        pet = self.pets_dal.update_pet_in_db(pet_id, request.to_updates())
        if pet is None:
            raise PetNotFoundError(pet_id)

        metrics.add_metric(name="PetUpdated", unit=MetricUnit.Count, value=1)
        return pet

    @tracer.capture_method
    def delete_pet(self, pet_id: Optional[str]) -> DeleteResult:
        """
        Delete a pet after checking it exists.

        Vaccines referencing the pet are not deleted.

        Raises:
            ValidationError: If the ID is missing
            PetNotFoundError: If no pet has this ID
        """
        pet = self.get_pet(pet_id)
        result = self.pets_dal.delete_pet_by_id(pet.id)
        if result.deleted:
            metrics.add_metric(name="PetDeleted", unit=MetricUnit.Count, value=1)
        return result
