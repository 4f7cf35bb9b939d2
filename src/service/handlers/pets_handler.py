"""
Pets Handler - Lambda function for the pet management API.

This module implements the handler layer for pet operations: routing of
API Gateway requests, delegation to the logic layer and mapping of results
and errors to response envelopes.
"""

from typing import Any, Callable, Dict

from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import get_pets_dal_handler
from service.handlers.models.env_vars import HandlerEnvVars, get_dynamodb_resource, get_handler_env_vars
from service.handlers.utils.error_handler import handle_service_errors
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.responses import error_response, not_found_response, success_response
from service.handlers.utils.rest_api_resolver import PETS_PATH, PETS_TAG, create_app
from service.logic.pet_service import PetService
from service.models.output import MessageOutput

app = create_app()

PET_SERVICE_FACTORY_KEY = "pet_service_factory"


def _pet_service() -> PetService:
    return app.context[PET_SERVICE_FACTORY_KEY]()


@app.not_found
def handle_not_found(ex: NotFoundError):
    logger.info("No route matched", extra={
        "path": app.current_event.path,
        "http_method": app.current_event.http_method,
    })
    return not_found_response()


@app.post(PETS_PATH, tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not create pet")
def create_pet():
    pet = _pet_service().create_pet(app.current_event.body)
    return success_response(pet.to_dict(), 201)


@app.get(f'{PETS_PATH}/<pet_id>', tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not get pet")
def get_pet(pet_id: str):
    tracer.put_annotation("pet_id", pet_id)
    pet = _pet_service().get_pet(pet_id)
    return success_response(pet.to_dict())


@app.get(PETS_PATH, tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not get pets")
def get_all_pets():
    pets = _pet_service().list_pets()
    return success_response([pet.to_dict() for pet in pets])


@app.put(f'{PETS_PATH}/<pet_id>', tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not update pet")
def update_pet(pet_id: str):
    tracer.put_annotation("pet_id", pet_id)
    pet = _pet_service().update_pet(pet_id, app.current_event.body)
    return success_response(pet.to_dict())


@app.delete(f'{PETS_PATH}/<pet_id>', tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not delete pet")
def delete_pet(pet_id: str):
    tracer.put_annotation("pet_id", pet_id)
    result = _pet_service().delete_pet(pet_id)
    if not result.deleted:
        logger.error("Pet delete was not accepted by the store", extra={
            "pet_id": pet_id,
            "error_code": result.error,
        })
        return error_response("Could not delete pet")
    return success_response(MessageOutput(message="Pet deleted successfully").model_dump())


@app.get(f'{PETS_PATH}/owner/<owner_id>', tags=[PETS_TAG])
@tracer.capture_method
@handle_service_errors("Could not get pets")
def get_pets_by_owner(owner_id: str):
    tracer.put_annotation("owner_id", owner_id)
    pets = _pet_service().list_pets_by_owner(owner_id)
    return success_response([pet.to_dict() for pet in pets])


def build_pet_service(env_vars: HandlerEnvVars) -> PetService:
    """
    Wire the pet service for one invocation.

    Args:
        env_vars: Validated environment variables

    Returns:
        PetService backed by DynamoDB
    """
    dynamodb = get_dynamodb_resource(env_vars)
    return PetService(pets_dal=get_pets_dal_handler(env_vars.PETS_TABLE, dynamodb=dynamodb))


def resolve_request(
    event: Dict[str, Any],
    context: LambdaContext,
    pet_service_factory: Callable[[], PetService],
) -> Dict[str, Any]:
    """
    Route an API Gateway event.

    The service is built by the matched route, inside its error boundary,
    so a wiring failure is answered like any other unexpected error.

    Args:
        event: API Gateway REST event
        context: Lambda context object
        pet_service_factory: Builds the service used for this request

    Returns:
        API Gateway response
    """
    app.append_context(**{PET_SERVICE_FACTORY_KEY: pet_service_factory})
    return app.resolve(event, context)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function for the pets API.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "pets-api")

    return resolve_request(event, context, lambda: build_pet_service(get_handler_env_vars()))
