"""
Input models for request validation using Pydantic.

This module defines the schema checks applied to request bodies once the
ordered presence and range checks of the logic layer have passed. Unknown
keys are ignored, which also drops ``id``, ``createdAt`` and ``updatedAt``
from update payloads.
"""

from typing import Annotated, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from service.models.pet import Species
from service.models.vaccine import VaccineType


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
    )


class _PartialRequestModel(_RequestModel):
    """Request whose fields are all optional but some may not be set to null."""

    NON_NULLABLE_FIELDS: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode='after')
    def reject_null_required_fields(self):
        for field_name in self.NON_NULLABLE_FIELDS:
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f'{to_camel(field_name)} cannot be null')
        return self

    def to_updates(self) -> dict:
        """Only the fields present in the request, keyed by their camelCase name."""
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class CreatePetRequest(_RequestModel):
    """Request model for creating a new pet."""

    name: Annotated[str, Field(min_length=1, description='Pet name', examples=['Rex'])]
    species: Annotated[Species, Field(description='Pet species', examples=['dog'])]
    breed: Annotated[Optional[str], Field(default=None, description='Optional breed')] = None
    age: Annotated[float, Field(ge=0, description='Age in years', examples=[3])]
    weight: Annotated[float, Field(gt=0, description='Weight in kilograms', examples=[20])]
    owner_id: Annotated[str, Field(min_length=1, description='Owner identifier')]
    owner_name: Annotated[str, Field(min_length=1, description='Owner full name')]
    owner_email: Annotated[str, Field(min_length=1, description='Owner email address')]
    owner_phone: Annotated[Optional[str], Field(default=None, description='Owner phone number')] = None


class UpdatePetRequest(_PartialRequestModel):
    """Request model for partially updating a pet."""

    NON_NULLABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        'name', 'species', 'age', 'weight', 'owner_id', 'owner_name', 'owner_email',
    )

    name: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    species: Annotated[Optional[Species], Field(default=None)] = None
    breed: Annotated[Optional[str], Field(default=None)] = None
    age: Annotated[Optional[float], Field(default=None, ge=0)] = None
    weight: Annotated[Optional[float], Field(default=None, gt=0)] = None
    owner_id: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    owner_name: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    owner_email: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    owner_phone: Annotated[Optional[str], Field(default=None)] = None


class CreateVaccineRequest(_RequestModel):
    """Request model for registering a vaccine application."""

    pet_id: Annotated[str, Field(min_length=1, description='Identifier of an existing pet')]
    vaccine_name: Annotated[str, Field(min_length=1, examples=['Rabies shot'])]
    vaccine_type: Annotated[VaccineType, Field(examples=['rabies'])]
    application_date: Annotated[str, Field(min_length=1, examples=['2024-01-01'])]
    expiration_date: Annotated[str, Field(min_length=1, examples=['2025-01-01'])]
    veterinarian_name: Annotated[str, Field(min_length=1, examples=['Dr. X'])]
    clinic: Annotated[str, Field(min_length=1, examples=['VetCo'])]
    batch_number: Annotated[Optional[str], Field(default=None)] = None
    notes: Annotated[Optional[str], Field(default=None)] = None


class UpdateVaccineRequest(_PartialRequestModel):
    """Request model for partially updating a vaccine record."""

    NON_NULLABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        'pet_id', 'vaccine_name', 'vaccine_type', 'application_date',
        'expiration_date', 'veterinarian_name', 'clinic',
    )

    pet_id: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    vaccine_name: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    vaccine_type: Annotated[Optional[VaccineType], Field(default=None)] = None
    application_date: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    expiration_date: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    veterinarian_name: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    clinic: Annotated[Optional[str], Field(default=None, min_length=1)] = None
    batch_number: Annotated[Optional[str], Field(default=None)] = None
    notes: Annotated[Optional[str], Field(default=None)] = None
