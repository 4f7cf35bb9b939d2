"""
Pet domain model for the business logic layer.

This module defines the core Pet entity as persisted in the pets table and
returned by the API. Field names travel in camelCase on the wire and in
storage; Python code uses the snake_case attributes.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from service.models.input import CreatePetRequest


class Species(str, Enum):
    """Species enumeration."""

    DOG = 'dog'
    CAT = 'cat'
    BIRD = 'bird'
    RABBIT = 'rabbit'
    OTHER = 'other'


class Pet(BaseModel):
    """Core Pet domain model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Rex",
                "species": "dog",
                "breed": "Labrador",
                "age": 3,
                "weight": 20.5,
                "ownerId": "owner-1",
                "ownerName": "Ana",
                "ownerEmail": "ana@example.com",
                "ownerPhone": "+34 600 000 000",
                "createdAt": "2024-01-15T10:30:00+00:00",
                "updatedAt": "2024-01-15T10:30:00+00:00",
            }
        },
    )

    id: Annotated[str, Field(
        min_length=1,
        description='Unique identifier for the pet',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Pet name',
        examples=['Rex']
    )]

    species: Annotated[Species, Field(
        description='Pet species'
    )]

    breed: Annotated[Optional[str], Field(
        default=None,
        description='Optional breed'
    )] = None

    age: Annotated[float, Field(
        ge=0,
        description='Age in years',
        examples=[3]
    )]

    weight: Annotated[float, Field(
        gt=0,
        description='Weight in kilograms',
        examples=[20.5]
    )]

    owner_id: Annotated[str, Field(min_length=1, description='Owner identifier')]
    owner_name: Annotated[str, Field(min_length=1, description='Owner full name')]
    owner_email: Annotated[str, Field(min_length=1, description='Owner email address')]

    owner_phone: Annotated[Optional[str], Field(
        default=None,
        description='Optional owner phone number'
    )] = None

    created_at: Annotated[str, Field(
        description='ISO timestamp when the pet was created'
    )]

    updated_at: Annotated[str, Field(
        description='ISO timestamp when the pet was last updated'
    )]

    @classmethod
    def create(cls, request: 'CreatePetRequest') -> 'Pet':
        """
        Create a new pet with generated ID and timestamps.

        Args:
            request: Validated creation request

        Returns:
            New Pet instance whose createdAt and updatedAt are equal
        """
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
