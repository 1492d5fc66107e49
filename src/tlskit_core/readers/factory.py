"""Path reader factory functions.

This module provides factory functions for creating path reader instances
backed by the local file system, AWS Secrets Manager or AWS SSM Parameter
Store. InMemoryPathReader is not selectable here since it only serves values
put into it by code.
"""

import os

from tlskit_core.exceptions import UnknownReaderTypeError

from .aws_secrets import AWSSecretsManagerPathReader
from .aws_ssm import AWSParameterStorePathReader
from .base import PathReader
from .local import LocalPathReader

READER_TYPES = ("local", "aws-secrets", "aws-ssm")


def _get_aws_region() -> str:
    """Get AWS region with precedence: TLSKIT_READER_AWS_REGION > AWS_REGION > default."""
    return (
        os.getenv("TLSKIT_READER_AWS_REGION")
        or os.getenv("AWS_REGION")
        or "eu-west-2"
    )


def create_path_reader(
    reader_type: str | None = None,
    aws_region: str | None = None,
    aws_endpoint_url: str | None = None,
    aws_profile: str | None = None,
) -> PathReader:
    """Create a path reader instance.

    Args:
        reader_type: Reader type to use ("local", "aws-secrets" or "aws-ssm").
                     If None, uses TLSKIT_READER_TYPE env var or "local".
        aws_region: AWS region for the AWS readers.
                    If None, uses TLSKIT_READER_AWS_REGION, then AWS_REGION env vars.
        aws_endpoint_url: AWS endpoint URL for LocalStack testing.
                          If None, uses TLSKIT_READER_AWS_ENDPOINT_URL env var.
        aws_profile: AWS profile for the AWS readers.
                     If None, uses TLSKIT_READER_AWS_PROFILE or AWS_PROFILE env vars.

    Returns:
        Configured path reader instance.

    Raises:
        UnknownReaderTypeError: If reader_type is not supported.
        ConfigurationError: If the AWS client cannot be created.
    """
    reader_type_str = (
        reader_type or os.getenv("TLSKIT_READER_TYPE", "local") or "local"
    ).lower()

    if reader_type_str == "local":
        return LocalPathReader()

    if reader_type_str in ("aws-secrets", "aws-ssm"):
        if aws_region is None:
            aws_region = _get_aws_region()
        if aws_endpoint_url is None:
            aws_endpoint_url = os.getenv("TLSKIT_READER_AWS_ENDPOINT_URL")

        if reader_type_str == "aws-secrets":
            return AWSSecretsManagerPathReader(
                region=aws_region,
                endpoint_url=aws_endpoint_url,
                profile_name=aws_profile,
            )
        return AWSParameterStorePathReader(
            region=aws_region,
            endpoint_url=aws_endpoint_url,
            profile_name=aws_profile,
        )

    raise UnknownReaderTypeError(reader_type_str)
