"""
Pytest configuration and shared fixtures for the pets and vaccines service.

This module provides common test fixtures and configuration used across
unit, integration, and end-to-end tests.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import pytest

# Test environment configuration, applied before the service modules are
# imported so Powertools picks it up at construction time
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "PETS_TABLE": "test-pets-table",
    "VACCINES_TABLE": "test-vaccines-table",
    "POWERTOOLS_SERVICE_NAME": "test-pets-vaccines-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestPetsVaccines",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import boto3  # noqa: E402
from moto import mock_aws  # noqa: E402

from service.dal import DeleteResult  # noqa: E402
from service.models.input import CreatePetRequest, CreateVaccineRequest  # noqa: E402
from service.models.pet import Pet  # noqa: E402
from service.models.vaccine import Vaccine  # noqa: E402

PETS_TABLE = os.environ["PETS_TABLE"]
VACCINES_TABLE = os.environ["VACCINES_TABLE"]


# DynamoDB fixtures
@pytest.fixture
def dynamodb():
    """Mock DynamoDB with both service tables created."""
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")

        for table_name in (PETS_TABLE, VACCINES_TABLE):
            table = resource.create_table(
                TableName=table_name,
                KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
                AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
                BillingMode="PAY_PER_REQUEST",
            )
            table.wait_until_exists()

        yield resource


@pytest.fixture
def pets_dal(dynamodb):
    from service.dal import get_pets_dal_handler

    return get_pets_dal_handler(PETS_TABLE, dynamodb=dynamodb)


@pytest.fixture
def vaccines_dal(dynamodb):
    from service.dal import get_vaccines_dal_handler

    return get_vaccines_dal_handler(VACCINES_TABLE, dynamodb=dynamodb)


# Sample data fixtures
@pytest.fixture
def pet_payload() -> Dict[str, Any]:
    """Valid pet creation body."""
    return {
        "name": "Rex",
        "species": "dog",
        "age": 3,
        "weight": 20,
        "ownerId": "o1",
        "ownerName": "Ana",
        "ownerEmail": "a@x.com",
    }


@pytest.fixture
def vaccine_payload() -> Callable[[str], Dict[str, Any]]:
    """Valid vaccine creation body for a given pet."""

    def build(pet_id: str, **overrides: Any) -> Dict[str, Any]:
        payload = {
            "petId": pet_id,
            "vaccineName": "Rabies shot",
            "vaccineType": "rabies",
            "applicationDate": "2024-01-01",
            "expirationDate": "2025-01-01",
            "veterinarianName": "Dr. X",
            "clinic": "VetCo",
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Build an API Gateway REST (payload v1) event."""

    def build(method: str, path: str, body: Any = None) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": method,
            "path": path,
            "resource": path,
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
            },
            "multiValueHeaders": {},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


@pytest.fixture
def parse_response() -> Callable[[Dict[str, Any]], tuple]:
    """Split a proxy response into status code, flat headers and decoded body."""

    def parse(response: Dict[str, Any]) -> tuple:
        if "multiValueHeaders" in response:
            headers = {
                name: ", ".join(values) if isinstance(values, list) else values
                for name, values in response["multiValueHeaders"].items()
            }
        else:
            headers = response.get("headers", {})
        return response["statusCode"], headers, json.loads(response["body"])

    return parse


# In-memory implementations of the DAL protocols
class InMemoryPetsDal:
    """Pets DAL keeping records in a dict and recording every write."""

    def __init__(self):
        self.items: Dict[str, Pet] = {}
        self.writes: list = []
        self.fail_deletes = False

    def create_pet_in_db(self, request: CreatePetRequest) -> Pet:
        pet = Pet.create(request)
        self.items[pet.id] = pet
        self.writes.append(("put", pet.id))
        return pet

    def get_pet_by_id(self, pet_id: str) -> Optional[Pet]:
        return self.items.get(pet_id)

    def get_all_pets(self) -> list:
        return list(self.items.values())

    def get_pets_by_owner_id(self, owner_id: str) -> list:
        return [pet for pet in self.items.values() if pet.owner_id == owner_id]

    def update_pet_in_db(self, pet_id: str, updates: Dict[str, Any]) -> Optional[Pet]:
        existing = self.items.get(pet_id)
        if existing is None:
            return None
        pet = Pet.model_validate(_merge(existing.to_dict(), updates))
        self.items[pet_id] = pet
        self.writes.append(("put", pet_id))
        return pet

    def delete_pet_by_id(self, pet_id: str) -> DeleteResult:
        if self.fail_deletes:
            return DeleteResult(deleted=False, error="InternalServerError")
        self.items.pop(pet_id, None)
        self.writes.append(("delete", pet_id))
        return DeleteResult(deleted=True)


class InMemoryVaccinesDal:
    """Vaccines DAL keeping records in a dict and recording every write."""

    def __init__(self):
        self.items: Dict[str, Vaccine] = {}
        self.writes: list = []
        self.fail_deletes = False

    def create_vaccine_in_db(self, request: CreateVaccineRequest) -> Vaccine:
        vaccine = Vaccine.create(request)
        self.items[vaccine.id] = vaccine
        self.writes.append(("put", vaccine.id))
        return vaccine

    def get_vaccine_by_id(self, vaccine_id: str) -> Optional[Vaccine]:
        return self.items.get(vaccine_id)

    def get_all_vaccines(self) -> list:
        return list(self.items.values())

    def get_vaccines_by_pet_id(self, pet_id: str) -> list:
        return [vaccine for vaccine in self.items.values() if vaccine.pet_id == pet_id]

    def update_vaccine_in_db(self, vaccine_id: str, updates: Dict[str, Any]) -> Optional[Vaccine]:
        existing = self.items.get(vaccine_id)
        if existing is None:
            return None
        vaccine = Vaccine.model_validate(_merge(existing.to_dict(), updates))
        self.items[vaccine_id] = vaccine
        self.writes.append(("put", vaccine_id))
        return vaccine

    def delete_vaccine_by_id(self, vaccine_id: str) -> DeleteResult:
        if self.fail_deletes:
            return DeleteResult(deleted=False, error="InternalServerError")
        self.items.pop(vaccine_id, None)
        self.writes.append(("delete", vaccine_id))
        return DeleteResult(deleted=True)


def _merge(existing: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    allowed = {key: value for key, value in updates.items() if key not in ("id", "createdAt", "updatedAt")}
    return {**existing, **allowed, "updatedAt": datetime.now(timezone.utc).isoformat()}


@pytest.fixture
def memory_pets_dal() -> InMemoryPetsDal:
    return InMemoryPetsDal()


@pytest.fixture
def memory_vaccines_dal() -> InMemoryVaccinesDal:
    return InMemoryVaccinesDal()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line("markers", "benchmark: Performance benchmark tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Add markers based on test location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
        elif "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)
