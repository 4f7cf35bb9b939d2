"""
DynamoDB implementation of the vaccines data access layer.

This handler never checks that the referenced pet exists; that belongs to
the logic layer.
"""

from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr

from service.dal import DeleteResult
from service.dal.dynamodb_handler import DynamoDbHandler
from service.handlers.utils.observability import logger, tracer
from service.models.input import CreateVaccineRequest
from service.models.vaccine import Vaccine


class VaccinesDynamoDbHandler(DynamoDbHandler):
    """DynamoDB implementation of the vaccines data access layer."""

    @tracer.capture_method
    def create_vaccine_in_db(self, request: CreateVaccineRequest) -> Vaccine:
        """
        Create a new vaccine record in DynamoDB.

        Raises:
            ClientError: If DynamoDB operation fails
        """
        vaccine = Vaccine.create(request)
        self._put_item(vaccine.to_dict())

        logger.info(f'Successfully created vaccine in database: {vaccine.id}', extra={
            'pet_id': vaccine.pet_id,
        })
        tracer.put_annotation('vaccine_created', vaccine.id)
        return vaccine

    @tracer.capture_method
    def get_vaccine_by_id(self, vaccine_id: str) -> Optional[Vaccine]:
        """Retrieve a vaccine record by its ID, None when absent."""
        item = self._get_item(vaccine_id)
        if item is None:
            return None
        return Vaccine.model_validate(item)

    @tracer.capture_method
    def get_all_vaccines(self) -> List[Vaccine]:
        """List every vaccine record in store order."""
        return [Vaccine.model_validate(item) for item in self._scan_all()]

    @tracer.capture_method
    def get_vaccines_by_pet_id(self, pet_id: str) -> List[Vaccine]:
        """List the vaccine records of a pet, empty when it has none."""
        items = self._scan_all(Attr('petId').eq(pet_id))
        vaccines = [Vaccine.model_validate(item) for item in items]
        logger.info(f'Retrieved {len(vaccines)} vaccines for pet: {pet_id}')
        return vaccines

    @tracer.capture_method
    def update_vaccine_in_db(self, vaccine_id: str, updates: Dict[str, Any]) -> Optional[Vaccine]:
        """
        Merge the supplied camelCase fields over an existing vaccine record.

        Returns:
            The merged Vaccine, or None without writing when it does not exist
        """
        existing = self.get_vaccine_by_id(vaccine_id)
        if existing is None:
            return None

        vaccine = Vaccine.model_validate(self._merge_updates(existing.to_dict(), updates))
        self._put_item(vaccine.to_dict())

        logger.info(f'Successfully updated vaccine: {vaccine_id}', extra={'fields': sorted(updates)})
        return vaccine

    @tracer.capture_method
    def delete_vaccine_by_id(self, vaccine_id: str) -> DeleteResult:
        """Delete a vaccine record by its ID."""
        return self._delete_item(vaccine_id)
