"""AWS Secrets Manager path reader.

This module provides the AWSSecretsManagerPathReader class which treats a
resolved path as a secret identifier in AWS Secrets Manager.
"""

import os
from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from tlskit_core.exceptions import ConfigurationError, ReadFailure

# Get logger for this module
logger = structlog.get_logger(__name__)


def create_aws_client(
    service_name: str,
    region: str | None = None,
    endpoint_url: str | None = None,
    profile_name: str | None = None,
) -> Any:  # noqa: ANN401
    """Create a boto3 client, respecting AWS profile overrides.

    Args:
        service_name: AWS service name (e.g. "secretsmanager", "ssm").
        region: AWS region. Defaults to TLSKIT_READER_AWS_REGION, then
            AWS_REGION env vars, then eu-west-2.
        endpoint_url: Optional custom endpoint URL for LocalStack testing.
        profile_name: Optional AWS profile. Defaults to
            TLSKIT_READER_AWS_PROFILE or AWS_PROFILE env vars.

    Returns:
        A boto3 client for the service.

    Raises:
        ConfigurationError: When the session or client cannot be created,
            e.g. for an unknown profile.
    """
    if region is None:
        region = (
            os.getenv("TLSKIT_READER_AWS_REGION")
            or os.getenv("AWS_REGION")
            or "eu-west-2"
        )
    if profile_name is None:
        profile_name = os.getenv(
            "TLSKIT_READER_AWS_PROFILE", os.getenv("AWS_PROFILE")
        )
    client_kwargs = {"service_name": service_name, "region_name": region}
    if endpoint_url:
        client_kwargs["endpoint_url"] = endpoint_url
    try:
        if profile_name:
            session = boto3.session.Session(profile_name=profile_name)
        else:
            session = boto3.session.Session()
        return session.client(**client_kwargs)  # type: ignore[call-overload]
    except BotoCoreError as e:
        logger.warning(
            "AWS_CLIENT_CREATE_FAILED",
            service_name=service_name,
            profile_name=profile_name,
            error=str(e),
        )
        raise ConfigurationError(
            f"cannot create AWS {service_name} client: {e}", "readers"
        ) from e


class AWSSecretsManagerPathReader:
    """Path reader that fetches secret values from AWS Secrets Manager."""

    def __init__(
        self,
        client: Any = None,  # noqa: ANN401
        region: str | None = None,
        endpoint_url: str | None = None,
        profile_name: str | None = None,
    ) -> None:
        """Initialize the AWS Secrets Manager path reader.

        Args:
            client: Optional pre-built Secrets Manager client. When omitted a
                client is created from the remaining arguments.
            region: AWS region to use for Secrets Manager.
            endpoint_url: Optional custom endpoint URL for testing or local development.
            profile_name: Optional AWS profile name.
        """
        if client is None:
            client = create_aws_client(
                "secretsmanager",
                region=region,
                endpoint_url=endpoint_url,
                profile_name=profile_name,
            )
        self.client = client

    def read_path(self, path: str) -> bytes:
        """Get a secret value by id.

        The secret's string payload is returned UTF-8 encoded. Binary secrets
        are returned as stored.

        Raises:
            ReadFailure: When the secret cannot be fetched or has no payload.
        """
        try:
            response = self.client.get_secret_value(SecretId=path)
        except ClientError as e:
            logger.warning(
                "SECRET_READ_FAILED",
                path=path,
                error_code=e.response.get("Error", {}).get("Code"),
                error=str(e),
            )
            raise ReadFailure(
                f"PathReader: cannot get secret value by id {path}: {e}",
                path=path,
                reader="aws-secrets",
            ) from e
        except BotoCoreError as e:
            logger.warning("SECRET_READ_FAILED", path=path, error=str(e))
            raise ReadFailure(
                f"PathReader: cannot get secret value by id {path}: {e}",
                path=path,
                reader="aws-secrets",
            ) from e

        secret_string = response.get("SecretString")
        if secret_string is not None:
            content = secret_string.encode("utf-8")
        elif response.get("SecretBinary") is not None:
            content = bytes(response["SecretBinary"])
        else:
            raise ReadFailure(
                f"PathReader: secret {path} has no value",
                path=path,
                reader="aws-secrets",
            )

        logger.debug("SECRET_READ", path=path, size=len(content))
        return content
