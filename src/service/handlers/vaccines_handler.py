"""
Vaccines Handler - Lambda function for the vaccination records API.

Routes vaccine requests to the logic layer. The vaccine service is wired with
both tables because creation and per-pet listing look the referenced pet up.
"""

from typing import Any, Callable, Dict

from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import get_pets_dal_handler, get_vaccines_dal_handler
from service.handlers.models.env_vars import HandlerEnvVars, get_dynamodb_resource, get_handler_env_vars
from service.handlers.utils.error_handler import handle_service_errors
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.responses import error_response, not_found_response, success_response
from service.handlers.utils.rest_api_resolver import VACCINES_PATH, VACCINES_TAG, create_app
from service.logic.vaccine_service import VaccineService
from service.models.output import MessageOutput

app = create_app()

VACCINE_SERVICE_FACTORY_KEY = "vaccine_service_factory"


def _vaccine_service() -> VaccineService:
    return app.context[VACCINE_SERVICE_FACTORY_KEY]()


@app.not_found
def handle_not_found(ex: NotFoundError):
    logger.info("No route matched", extra={
        "path": app.current_event.path,
        "http_method": app.current_event.http_method,
    })
    return not_found_response()


@app.post(VACCINES_PATH, tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not create vaccine")
def create_vaccine():
    vaccine = _vaccine_service().create_vaccine(app.current_event.body)
    return success_response(vaccine.to_dict(), 201)


@app.get(f'{VACCINES_PATH}/<vaccine_id>', tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not get vaccine")
def get_vaccine(vaccine_id: str):
    tracer.put_annotation("vaccine_id", vaccine_id)
    vaccine = _vaccine_service().get_vaccine(vaccine_id)
    return success_response(vaccine.to_dict())


@app.get(VACCINES_PATH, tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not get vaccines")
def get_all_vaccines():
    vaccines = _vaccine_service().list_vaccines()
    return success_response([vaccine.to_dict() for vaccine in vaccines])


@app.get(f'{VACCINES_PATH}/pet/<pet_id>', tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not get vaccines")
def get_vaccines_by_pet(pet_id: str):
    tracer.put_annotation("pet_id", pet_id)
    vaccines = _vaccine_service().list_vaccines_by_pet(pet_id)
    return success_response([vaccine.to_dict() for vaccine in vaccines])


@app.put(f'{VACCINES_PATH}/<vaccine_id>', tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not update vaccine")
def update_vaccine(vaccine_id: str):
    tracer.put_annotation("vaccine_id", vaccine_id)
    vaccine = _vaccine_service().update_vaccine(vaccine_id, app.current_event.body)
    return success_response(vaccine.to_dict())


@app.delete(f'{VACCINES_PATH}/<vaccine_id>', tags=[VACCINES_TAG])
@tracer.capture_method
@handle_service_errors("Could not delete vaccine")
def delete_vaccine(vaccine_id: str):
    tracer.put_annotation("vaccine_id", vaccine_id)
    result = _vaccine_service().delete_vaccine(vaccine_id)
    if not result.deleted:
        logger.error("Vaccine delete was not accepted by the store", extra={
            "vaccine_id": vaccine_id,
            "error_code": result.error,
        })
        return error_response("Could not delete vaccine")
    return success_response(MessageOutput(message="Vaccine deleted successfully").model_dump())


def build_vaccine_service(env_vars: HandlerEnvVars) -> VaccineService:
    """
    Wire the vaccine service for one invocation.

    Both DAL handlers share one DynamoDB resource.
    """
    dynamodb = get_dynamodb_resource(env_vars)
    return VaccineService(
        vaccines_dal=get_vaccines_dal_handler(env_vars.VACCINES_TABLE, dynamodb=dynamodb),
        pets_dal=get_pets_dal_handler(env_vars.PETS_TABLE, dynamodb=dynamodb),
    )


def resolve_request(
    event: Dict[str, Any],
    context: LambdaContext,
    vaccine_service_factory: Callable[[], VaccineService],
) -> Dict[str, Any]:
    """
    Route an API Gateway event.

    Args:
        event: API Gateway REST event
        context: Lambda context object
        vaccine_service_factory: Builds the service used for this request

    Returns:
        API Gateway response
    """
    app.append_context(**{VACCINE_SERVICE_FACTORY_KEY: vaccine_service_factory})
    return app.resolve(event, context)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function for the vaccines API.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "vaccines-api")

    return resolve_request(event, context, lambda: build_vaccine_service(get_handler_env_vars()))
