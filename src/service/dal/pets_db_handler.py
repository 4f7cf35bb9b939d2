"""
DynamoDB implementation of the pets data access layer.

Items are stored flat, keyed by ``id``, with the camelCase attribute names of
the ``Pet`` model.
"""

from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr

from service.dal import DeleteResult
from service.dal.dynamodb_handler import DynamoDbHandler
from service.handlers.utils.observability import logger, tracer
from service.models.input import CreatePetRequest
from service.models.pet import Pet


class PetsDynamoDbHandler(DynamoDbHandler):
    """DynamoDB implementation of the pets data access layer."""

    @tracer.capture_method
    def create_pet_in_db(self, request: CreatePetRequest) -> Pet:
        """
        Create a new pet in DynamoDB.

        Args:
            request: Validated creation request

        Returns:
            Created Pet instance, createdAt equal to updatedAt

        Raises:
            ClientError: If DynamoDB operation fails
        """
        pet = Pet.create(request)
        self._put_item(pet.to_dict())

        logger.info(f'Successfully created pet in database: {pet.id}')
        tracer.put_annotation('pet_created', pet.id)
        return pet

    @tracer.capture_method
    def get_pet_by_id(self, pet_id: str) -> Optional[Pet]:
        """
        Retrieve a pet by its ID from DynamoDB.

        Returns:
            Pet instance if found, None otherwise
        """
        item = self._get_item(pet_id)
        if item is None:
            return None
        return Pet.model_validate(item)

    @tracer.capture_method
    def get_all_pets(self) -> List[Pet]:
        """List every pet in store order."""
        pets = [Pet.model_validate(item) for item in self._scan_all()]
        logger.info(f'Retrieved {len(pets)} pets')
        return pets

    @tracer.capture_method
    def get_pets_by_owner_id(self, owner_id: str) -> List[Pet]:
        """
        List the pets of an owner.

        Args:
            owner_id: Exact ownerId to match

        Returns:
            Matching pets, empty when the owner has none
        """
        items = self._scan_all(Attr('ownerId').eq(owner_id))
        pets = [Pet.model_validate(item) for item in items]
        logger.info(f'Retrieved {len(pets)} pets for owner: {owner_id}')
        tracer.put_annotation('pets_listed', len(pets))
        return pets

    @tracer.capture_method
    def update_pet_in_db(self, pet_id: str, updates: Dict[str, Any]) -> Optional[Pet]:
        """
        Merge the supplied camelCase fields over an existing pet.

        Args:
            pet_id: Unique identifier of the pet
            updates: Fields to overwrite; id, createdAt and updatedAt are ignored

        Returns:
            The merged Pet, or None without writing when the pet does not exist
        """
        existing = self.get_pet_by_id(pet_id)
        if existing is None:
            return None

        pet = Pet.model_validate(self._merge_updates(existing.to_dict(), updates))
        self._put_item(pet.to_dict())

        logger.info(f'Successfully updated pet: {pet_id}', extra={'fields': sorted(updates)})
        tracer.put_annotation('pet_updated', pet_id)
        return pet

    @tracer.capture_method
    def delete_pet_by_id(self, pet_id: str) -> DeleteResult:
        """Delete a pet by its ID; vaccines referencing it are left untouched."""
        return self._delete_item(pet_id)
