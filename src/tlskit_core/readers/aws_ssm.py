"""AWS Systems Manager Parameter Store path reader.

This module provides the AWSParameterStorePathReader class which treats a
resolved path as a parameter name and requests decryption of secure strings.
"""

from typing import Any

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from tlskit_core.exceptions import ReadFailure
from tlskit_core.readers.aws_secrets import create_aws_client

# Get logger for this module
logger = structlog.get_logger(__name__)


class AWSParameterStorePathReader:
    """Path reader that fetches parameter values from AWS SSM Parameter Store."""

    def __init__(
        self,
        client: Any = None,  # noqa: ANN401
        region: str | None = None,
        endpoint_url: str | None = None,
        profile_name: str | None = None,
    ) -> None:
        """Initialize the AWS Parameter Store path reader.

        Args:
            client: Optional pre-built SSM client.
            region: AWS region to use for SSM.
            endpoint_url: Optional custom endpoint URL for testing or local development.
            profile_name: Optional AWS profile name.
        """
        if client is None:
            client = create_aws_client(
                "ssm",
                region=region,
                endpoint_url=endpoint_url,
                profile_name=profile_name,
            )
        self.client = client

    def read_path(self, path: str) -> bytes:
        """Get a decrypted parameter value by name.

        Raises:
            ReadFailure: When the parameter cannot be fetched.
        """
        try:
            response = self.client.get_parameter(Name=path, WithDecryption=True)
        except (ClientError, BotoCoreError) as e:
            logger.warning("PARAMETER_READ_FAILED", path=path, error=str(e))
            raise ReadFailure(
                f"PathReader: cannot get parameter by name {path}: {e}",
                path=path,
                reader="aws-ssm",
            ) from e

        content = response["Parameter"]["Value"].encode("utf-8")
        logger.debug("PARAMETER_READ", path=path, size=len(content))
        return content
