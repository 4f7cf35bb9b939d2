"""
Business Logic Layer for vaccine records.

A vaccine references a pet. The reference is checked on creation, where a
missing pet makes the request itself invalid (400), and when listing a
pet's vaccines, where the pet is the resource being looked up (404).
"""

from typing import List, Optional

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import DeleteResult, PetsDalHandler, VaccinesDalHandler
from service.handlers.utils.errors import ResourceNotFoundError, ValidationError
from service.handlers.utils.observability import logger, metrics, tracer
from service.logic.pet_service import PetNotFoundError
from service.logic.validation import (
    parse_date,
    parse_request_body,
    require_path_parameter,
    validate_model,
)
from service.models.input import CreateVaccineRequest, UpdateVaccineRequest
from service.models.vaccine import Vaccine

VACCINE_ID_REQUIRED = "Vaccine ID is required"
INVALID_APPLICATION_DATE = "Invalid application date"
INVALID_EXPIRATION_DATE = "Invalid expiration date"


class VaccineNotFoundError(ResourceNotFoundError):
    """Raised when a vaccine ID does not resolve to a stored record."""

    def __init__(self, vaccine_id: Optional[str] = None):
        super().__init__(resource_type="Vaccine", resource_id=vaccine_id)


class VaccineService:
    """Business logic service for vaccine records."""

    def __init__(self, vaccines_dal: VaccinesDalHandler, pets_dal: PetsDalHandler):
        """
        Initialize vaccine service.

        Args:
            vaccines_dal: Data access handler for the vaccines table
            pets_dal: Data access handler for the pets table, used for
                existence checks only
        """
        self.vaccines_dal = vaccines_dal
        self.pets_dal = pets_dal

    @tracer.capture_method
    def create_vaccine(self, body: Optional[str]) -> Vaccine:
        """
        Register a vaccine application for an existing pet.

        Raises:
            ValidationError: If the body is invalid, the pet does not exist,
                a date does not parse, or expiration is not after application
        """
        payload = parse_request_body(body)

        if not payload.get('petId') or not payload.get('vaccineName') or not payload.get('applicationDate'):
            raise ValidationError("petId, vaccineName and applicationDate are required")

        if not isinstance(payload['petId'], str):
            raise ValidationError("petId must be a string")

        if self.pets_dal.get_pet_by_id(payload['petId']) is None:
            logger.info("Vaccine rejected, pet does not exist", extra={"pet_id": payload['petId']})
            raise ValidationError("Pet not found")

        application_date = parse_date(payload.get('applicationDate'))
        if application_date is None:
            raise ValidationError(INVALID_APPLICATION_DATE)

        expiration_date = parse_date(payload.get('expirationDate'))
        if expiration_date is None:
            raise ValidationError(INVALID_EXPIRATION_DATE)

        if expiration_date <= application_date:
            raise ValidationError("Expiration date must be after application date")

        request = validate_model(CreateVaccineRequest, payload)
        vaccine = self.vaccines_dal.create_vaccine_in_db(request)

        metrics.add_metric(name="VaccineCreated", unit=MetricUnit.Count, value=1)
        logger.info("Vaccine created successfully", extra={
            "vaccine_id": vaccine.id,
            "pet_id": vaccine.pet_id,
            "vaccine_type": vaccine.vaccine_type,
        })
        return vaccine

    @tracer.capture_method
    def get_vaccine(self, vaccine_id: Optional[str]) -> Vaccine:
        """
        Get a vaccine record by ID.

        Raises:
            ValidationError: If the ID is missing
            VaccineNotFoundError: If no record has this ID
        """
        vaccine_id = require_path_parameter(vaccine_id, VACCINE_ID_REQUIRED)
        vaccine = self.vaccines_dal.get_vaccine_by_id(vaccine_id)
        if vaccine is None:
            raise VaccineNotFoundError(vaccine_id)
        return vaccine

    @tracer.capture_method
    def list_vaccines(self) -> List[Vaccine]:
        """List every vaccine record."""
        return self.vaccines_dal.get_all_vaccines()

    @tracer.capture_method
    def list_vaccines_by_pet(self, pet_id: Optional[str]) -> List[Vaccine]:
        """
        List the vaccine records of an existing pet.

        Raises:
            ValidationError: If the pet ID is missing
            PetNotFoundError: If the pet does not exist
        """
        pet_id = require_path_parameter(pet_id, "Pet ID is required")
        if self.pets_dal.get_pet_by_id(pet_id) is None:
            raise PetNotFoundError(pet_id)
        return self.vaccines_dal.get_vaccines_by_pet_id(pet_id)

    @tracer.capture_method
    def update_vaccine(self, vaccine_id: Optional[str], body: Optional[str]) -> Vaccine:
        """
        Partially update a vaccine record.

        Only the supplied dates are checked for parseability; their order is
        not re-checked, and neither is the pet reference.

        Raises:
            ValidationError: If the ID or body is missing or invalid
            VaccineNotFoundError: If no record has this ID
        """
        vaccine_id = require_path_parameter(vaccine_id, VACCINE_ID_REQUIRED)
        payload = parse_request_body(body)

        if payload.get('applicationDate') and parse_date(payload['applicationDate']) is None:
            raise ValidationError(INVALID_APPLICATION_DATE)

        if payload.get('expirationDate') and parse_date(payload['expirationDate']) is None:
            raise ValidationError(INVALID_EXPIRATION_DATE)

        request = validate_model(UpdateVaccineRequest, payload)
        vaccine = self.vaccines_dal.update_vaccine_in_db(vaccine_id, request.to_updates())
        if vaccine is None:
            raise VaccineNotFoundError(vaccine_id)

        metrics.add_metric(name="VaccineUpdated", unit=MetricUnit.Count, value=1)
        return vaccine

    @tracer.capture_method
    def delete_vaccine(self, vaccine_id: Optional[str]) -> DeleteResult:
        """
        Delete a vaccine record after checking it exists.

        Raises:
            ValidationError: If the ID is missing
            VaccineNotFoundError: If no record has this ID
        """
        vaccine = self.get_vaccine(vaccine_id)
        result = self.vaccines_dal.delete_vaccine_by_id(vaccine.id)
        if result.deleted:
            metrics.add_metric(name="VaccineDeleted", unit=MetricUnit.Count, value=1)
        return result
