"""Provider configuration from environment variables.

This module defines the environ-config class used to configure a
PathBasedProvider and a factory building the provider and its reader.

Environment Variables:
    TLSKIT_BASE_PATH: Prefix joined in front of every resolved path. Default: ""
    TLSKIT_PATH_SEPARATOR: Separator between base path and file name. Default: "/"
    TLSKIT_CERTIFICATE_EXTENSION: Certificate file extension. Default: ".crt"
    TLSKIT_KEY_EXTENSION: Private key file extension. Default: ".key"
    TLSKIT_READER_TYPE: Reader to use ("local", "aws-secrets", "aws-ssm"). Default: "local"
    TLSKIT_READER_AWS_REGION: AWS region for AWS readers (takes precedence over AWS_REGION). Default: "eu-west-2"
    TLSKIT_READER_AWS_ENDPOINT_URL: AWS endpoint URL for LocalStack testing. Default: None
    TLSKIT_READER_AWS_PROFILE: AWS profile for AWS readers (falls back to AWS_PROFILE). Default: None
"""

import os
from collections.abc import Mapping

import environ
import structlog

from tlskit_core.path_based import (
    PathBasedProvider,
    PathOption,
    with_base_path,
    with_certificate_extension,
    with_key_extension,
    with_path_separator,
)
from tlskit_core.readers import PathReader, create_path_reader

# Get logger for this module
logger = structlog.get_logger(__name__)


@environ.config(prefix="TLSKIT")
class ProviderConfig:
    """Configuration for a path based provider and its reader."""

    base_path: str | None = environ.var(
        default=None, help="Prefix joined in front of every resolved path"
    )
    path_separator: str | None = environ.var(
        default=None, help="Separator between base path and file name"
    )
    certificate_extension: str | None = environ.var(
        default=None, help="Extension appended to names for certificates"
    )
    key_extension: str | None = environ.var(
        default=None, help="Extension appended to names for private keys"
    )

    reader_type: str | None = environ.var(
        default=None, help="Path reader to use (local, aws-secrets, aws-ssm)"
    )
    reader_aws_region: str | None = environ.var(
        default=None, help="AWS region for AWS readers"
    )
    reader_aws_endpoint_url: str | None = environ.var(
        default=None, help="AWS endpoint URL for AWS readers (e.g., LocalStack)"
    )
    reader_aws_profile: str | None = environ.var(
        default=None, help="AWS profile for AWS readers"
    )


def load_provider_config(env: Mapping[str, str] | None = None) -> ProviderConfig:
    """Load a ProviderConfig from environment variables.

    Args:
        env: Environment mapping. If None, uses os.environ.

    Returns:
        ProviderConfig populated from the environment.
    """
    return environ.to_config(ProviderConfig, environ=os.environ if env is None else env)


def provider_options(config: ProviderConfig) -> list[PathOption]:
    """Build path options for the settings present in a configuration."""
    options: list[PathOption] = []
    if config.base_path is not None:
        options.append(with_base_path(config.base_path))
    if config.path_separator is not None:
        options.append(with_path_separator(config.path_separator))
    if config.certificate_extension is not None:
        options.append(with_certificate_extension(config.certificate_extension))
    if config.key_extension is not None:
        options.append(with_key_extension(config.key_extension))
    return options


def create_path_based_provider(
    config: ProviderConfig | None = None,
    reader: PathReader | None = None,
) -> PathBasedProvider:
    """Create a path based provider from configuration.

    Args:
        config: Provider configuration. If None, loaded from the environment.
        reader: Path reader to use. If None, created from the configuration.

    Returns:
        Configured path based provider.
    """
    if config is None:
        config = load_provider_config()
    if reader is None:
        reader = create_path_reader(
            reader_type=config.reader_type,
            aws_region=config.reader_aws_region,
            aws_endpoint_url=config.reader_aws_endpoint_url,
            aws_profile=config.reader_aws_profile,
        )

    provider = PathBasedProvider(reader, *provider_options(config))
    logger.debug(
        "PATH_BASED_PROVIDER_CREATED",
        reader=type(reader).__name__,
        base_path=provider.options.base_path,
        path_separator=provider.options.path_separator,
        certificate_extension=provider.options.certificate_extension,
        key_extension=provider.options.key_extension,
    )
    return provider
