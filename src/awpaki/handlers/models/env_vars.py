"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by the
toolkit: region and endpoint overrides for the AWS clients, and the Powertools
settings shared by every handler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class ToolkitEnvVars(BaseModel):
    """Environment variables consumed by awpaki."""

    # AWS region, Lambda sets AWS_REGION; local tooling usually sets AWS_DEFAULT_REGION
    AWS_REGION: Annotated[Optional[str], Field(
        default=None,
        description='AWS region of the running function'
    )] = None

    AWS_DEFAULT_REGION: Annotated[Optional[str], Field(
        default=None,
        description='Fallback AWS region'
    )] = None

    # Global endpoint override (LocalStack, moto server)
    AWS_ENDPOINT_URL: Annotated[Optional[str], Field(
        default=None,
        description='Endpoint URL used by every AWS client'
    )] = None

    # Per-service endpoint overrides
    AWS_ENDPOINT_URL_DYNAMODB: Annotated[Optional[str], Field(default=None)] = None
    AWS_ENDPOINT_URL_SQS: Annotated[Optional[str], Field(default=None)] = None
    AWS_ENDPOINT_URL_SNS: Annotated[Optional[str], Field(default=None)] = None
    AWS_ENDPOINT_URL_S3: Annotated[Optional[str], Field(default=None)] = None
    AWS_ENDPOINT_URL_LAMBDA: Annotated[Optional[str], Field(default=None)] = None

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='awpaki',
        description='Service name for AWS Powertools'
    )] = 'awpaki'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    @property
    def region(self) -> Optional[str]:
        """Region the AWS clients are created in."""
        return self.AWS_REGION or self.AWS_DEFAULT_REGION

    def endpoint_url(self, service_name: str) -> Optional[str]:
        """
        Endpoint URL for a given AWS service.

        Args:
            service_name: boto3 service name (dynamodb, sqs, sns, s3, lambda)

        Returns:
            The service specific override, the global override, or None
        """
        specific = getattr(self, f'AWS_ENDPOINT_URL_{service_name.upper()}', None)
        return specific or self.AWS_ENDPOINT_URL


def get_toolkit_env_vars() -> ToolkitEnvVars:
    """
    Get typed environment variables for the toolkit.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ToolkitEnvVars)
