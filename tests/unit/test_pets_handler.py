"""
Unit tests for the pets API routes.

Events are resolved against the in-memory DAL; wiring failures are simulated
through the service factory handed to ``resolve_request``.
"""

import json

import pytest

from service.handlers.pets_handler import resolve_request
from service.logic.pet_service import PetService


@pytest.fixture
def call(api_gateway_event, lambda_context, parse_response, memory_pets_dal):
    """Resolve a request against the in-memory pets DAL."""

    def invoke(method, path, body=None, factory=None):
        event = api_gateway_event(method, path, body)
        factory = factory or (lambda: PetService(memory_pets_dal))
        return parse_response(resolve_request(event, lambda_context, factory))

    return invoke


@pytest.fixture
def created_pet(call, pet_payload):
    _, _, body = call("POST", "/pets", pet_payload)
    return body["data"]


class TestCreatePetRoute:

    def test_created(self, call, pet_payload):
        status, headers, body = call("POST", "/pets", pet_payload)

        assert status == 201
        assert body["success"] is True
        assert body["data"]["name"] == "Rex"
        assert body["data"]["createdAt"] == body["data"]["updatedAt"]
        assert headers["Access-Control-Allow-Origin"] == "*"

    def test_missing_fields_is_400_without_write(self, call, memory_pets_dal):
        status, headers, body = call("POST", "/pets", {"name": "Rex"})

        assert status == 400
        assert body == {
            "success": False,
            "error": "Validation error: Name, species, ownerId and ownerName are required",
        }
        assert headers["Content-Type"] == "application/json"
        assert memory_pets_dal.writes == []

    def test_missing_body(self, call):
        status, _, body = call("POST", "/pets")

        assert status == 400
        assert body["error"] == "Validation error: Request body is required"

    def test_invalid_json(self, call):
        status, _, body = call("POST", "/pets", "{not json")

        assert status == 400
        assert body["error"] == "Validation error: Invalid JSON in request body"

    @pytest.mark.parametrize("constant", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_number_is_400_without_write(self, call, pet_payload, memory_pets_dal, constant):
        pet_payload["weight"] = 1
        body = json.dumps(pet_payload).replace('"weight": 1', f'"weight": {constant}')

        status, _, response_body = call("POST", "/pets", body)

        assert status == 400
        assert response_body["error"] == "Validation error: Invalid JSON in request body"
        assert memory_pets_dal.writes == []

    def test_store_failure_is_500_with_fixed_message(self, call, pet_payload, memory_pets_dal, monkeypatch):
        def fail(request):
            raise RuntimeError("throttled")

        monkeypatch.setattr(memory_pets_dal, "create_pet_in_db", fail)

        status, headers, body = call("POST", "/pets", pet_payload)

        assert status == 500
        assert body == {"success": False, "error": "Could not create pet"}
        assert headers["Access-Control-Allow-Methods"] == "GET, POST, PUT, DELETE, OPTIONS"

    def test_wiring_failure_is_500(self, call, pet_payload):
        def broken_factory():
            raise KeyError("PETS_TABLE")

        status, _, body = call("POST", "/pets", pet_payload, factory=broken_factory)

        assert status == 500
        assert body["error"] == "Could not create pet"


class TestReadPetRoutes:

    def test_get_pet(self, call, created_pet):
        status, _, body = call("GET", f"/pets/{created_pet['id']}")

        assert status == 200
        assert body["data"] == created_pet

    def test_get_unknown_pet(self, call):
        status, _, body = call("GET", "/pets/does-not-exist")

        assert status == 404
        assert body == {"success": False, "error": "Pet not found"}

    def test_list_pets(self, call, created_pet):
        status, _, body = call("GET", "/pets")

        assert status == 200
        assert body["data"] == [created_pet]

    def test_list_pets_empty(self, call):
        status, _, body = call("GET", "/pets")

        assert status == 200
        assert body == {"success": True, "data": []}

    def test_list_by_owner(self, call, created_pet):
        _, _, body = call("GET", "/pets/owner/o1")
        _, _, empty = call("GET", "/pets/owner/nobody")

        assert body["data"] == [created_pet]
        assert empty["data"] == []

    def test_list_failure_is_500(self, call, memory_pets_dal, monkeypatch):
        monkeypatch.setattr(memory_pets_dal, "get_all_pets", lambda: 1 / 0)

        status, _, body = call("GET", "/pets")

        assert status == 500
        assert body["error"] == "Could not get pets"


class TestUpdatePetRoute:

    def test_update(self, call, created_pet):
        status, _, body = call("PUT", f"/pets/{created_pet['id']}", {"age": 4})

        assert status == 200
        assert body["data"]["age"] == 4
        assert body["data"]["name"] == "Rex"
        assert body["data"]["createdAt"] == created_pet["createdAt"]

    def test_update_unknown_pet(self, call, memory_pets_dal):
        status, _, body = call("PUT", "/pets/does-not-exist", {"name": "Max"})

        assert status == 404
        assert body["error"] == "Pet not found"
        assert memory_pets_dal.writes == []

    def test_update_negative_age(self, call, created_pet):
        status, _, body = call("PUT", f"/pets/{created_pet['id']}", {"age": -2})

        assert status == 400
        assert body["error"] == "Validation error: Age must be positive"


class TestDeletePetRoute:

    def test_delete(self, call, created_pet):
        status, _, body = call("DELETE", f"/pets/{created_pet['id']}")

        assert status == 200
        assert body == {"success": True, "data": {"message": "Pet deleted successfully"}}
        assert call("GET", f"/pets/{created_pet['id']}")[0] == 404

    def test_delete_unknown_pet(self, call):
        status, _, body = call("DELETE", "/pets/does-not-exist")

        assert status == 404
        assert body["error"] == "Pet not found"

    def test_rejected_delete_is_500(self, call, created_pet, memory_pets_dal):
        memory_pets_dal.fail_deletes = True

        status, _, body = call("DELETE", f"/pets/{created_pet['id']}")

        assert status == 500
        assert body == {"success": False, "error": "Could not delete pet"}


class TestUnmatchedRoutes:

    @pytest.mark.parametrize("method,path", [
        ("GET", "/pets/a/b"),
        ("GET", "/owners"),
        ("PATCH", "/pets/abc"),
    ])
    def test_unmatched_route_is_enveloped_404(self, call, method, path):
        status, headers, body = call(method, path)

        assert status == 404
        assert body == {"success": False, "error": "Resource not found"}
        assert headers["Access-Control-Allow-Origin"] == "*"
        assert headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
