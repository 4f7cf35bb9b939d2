"""
REST API resolver utility for the pets and vaccines Lambda handlers.

This module provides the API path constants and the factory for the
API Gateway REST resolvers used by each handler module.
"""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver

# API path constants
PETS_PATH = '/pets'
VACCINES_PATH = '/vaccines'

# OpenAPI tags for documentation
PETS_TAG = 'Pets'
VACCINES_TAG = 'Vaccines'


def create_app() -> APIGatewayRestResolver:
    """
    Create an API Gateway REST resolver.

    Request validation is done by the logic layer so that failures keep the
    service's envelope and ordering instead of the resolver's 422 payload.
    """
    return APIGatewayRestResolver(enable_validation=False, debug=False)
