"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by
the pets and vaccines Lambda handlers, and the factory building the DynamoDB
resource they share for one invocation.
"""

from typing import Annotated, Any, Optional

import boto3
from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class HandlerEnvVars(BaseModel):
    """Environment variables for Lambda handlers."""

    # DynamoDB table names, supplied by the deployment
    PETS_TABLE: Annotated[str, Field(
        description='DynamoDB table name for pet storage',
        min_length=1
    )]

    VACCINES_TABLE: Annotated[str, Field(
        description='DynamoDB table name for vaccine storage',
        min_length=1
    )]

    # AWS region
    AWS_REGION: Annotated[str, Field(
        default='us-east-1',
        description='AWS region for service deployment'
    )] = 'us-east-1'

    # Local DynamoDB endpoint, unset in AWS
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        default=None,
        description='DynamoDB endpoint URL override for local testing'
    )] = None

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='pets-vaccines-service',
        description='Service name for AWS Powertools'
    )] = 'pets-vaccines-service'

    # Metrics namespace
    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='PetsVaccines',
        description='Namespace for CloudWatch metrics'
    )] = 'PetsVaccines'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Enable/disable X-Ray tracing
    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        default='false',
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'


def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)


def get_dynamodb_resource(env_vars: HandlerEnvVars) -> Any:
    """
    Build the boto3 DynamoDB resource described by the environment.

    Args:
        env_vars: Validated environment variables

    Returns:
        boto3 DynamoDB service resource
    """
    resource_kwargs = {'region_name': env_vars.AWS_REGION}
    if env_vars.DYNAMODB_ENDPOINT:
        resource_kwargs['endpoint_url'] = env_vars.DYNAMODB_ENDPOINT
    return boto3.resource('dynamodb', **resource_kwargs)
