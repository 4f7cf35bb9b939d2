"""
Vaccine domain model for the business logic layer.

A vaccine record always belongs to a pet through ``petId``. The reference is
checked when the record is created and never again afterwards.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from service.models.input import CreateVaccineRequest


class VaccineType(str, Enum):
    """Vaccine type enumeration."""

    RABIES = 'rabies'
    DISTEMPER = 'distemper'
    PARVOVIRUS = 'parvovirus'
    HEPATITIS = 'hepatitis'
    OTHER = 'other'


class Vaccine(BaseModel):
    """Core Vaccine domain model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    id: Annotated[str, Field(min_length=1, description='Unique identifier for the vaccine')]

    pet_id: Annotated[str, Field(
        min_length=1,
        description='Identifier of the vaccinated pet'
    )]

    vaccine_name: Annotated[str, Field(
        min_length=1,
        description='Commercial or common name of the vaccine',
        examples=['Rabies shot']
    )]

    vaccine_type: Annotated[VaccineType, Field(description='Vaccine type')]

    application_date: Annotated[str, Field(
        description='Date the vaccine was applied',
        examples=['2024-01-01']
    )]

    expiration_date: Annotated[str, Field(
        description='Date the vaccine expires',
        examples=['2025-01-01']
    )]

    veterinarian_name: Annotated[str, Field(min_length=1, description='Applying veterinarian')]
    clinic: Annotated[str, Field(min_length=1, description='Clinic where it was applied')]
    batch_number: Annotated[Optional[str], Field(default=None, description='Vaccine batch number')] = None
    notes: Annotated[Optional[str], Field(default=None, description='Free-form notes')] = None

    created_at: Annotated[str, Field(description='ISO timestamp when the record was created')]
    updated_at: Annotated[str, Field(description='ISO timestamp when the record was last updated')]

    @classmethod
    def create(cls, request: 'CreateVaccineRequest') -> 'Vaccine':
        """Create a new vaccine record with generated ID and timestamps."""
        now = datetime.now(timezone.utc).isoformat()
        return cls(
            id=str(uuid4()),
            **request.model_dump(),
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict:
        """Flat camelCase representation used for storage and responses."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
