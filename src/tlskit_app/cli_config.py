"""CLI configuration using environ-config.

Command line options are mapped onto the environment variables read by the
configuration classes, so every option can also be given as a variable:
provider options use the TLSKIT_ prefix (e.g. --base-path -> TLSKIT_BASE_PATH)
and application options use TLSKIT_APP_ (e.g. --log-level -> TLSKIT_APP_LOG_LEVEL).
"""

import os
from collections.abc import Mapping

import environ

from tlskit_core.config import ProviderConfig, load_provider_config
from tlskit_core.exceptions import ConfigurationError

PROVIDER_OPTIONS = (
    "base-path",
    "path-separator",
    "certificate-extension",
    "key-extension",
    "reader-type",
    "reader-aws-region",
    "reader-aws-endpoint-url",
    "reader-aws-profile",
)
APP_OPTIONS = ("log-level",)
APP_FLAGS = ("dev-mode",)


@environ.config(prefix="TLSKIT_APP")
class CommandConfig:
    """Configuration shared by the ca-certs and key-pair commands."""

    name: str = environ.var(help="Logical name of the certificate material")
    log_level: str = environ.var(default="WARNING", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


def _env_name(prefix: str, option: str) -> str:
    return f"{prefix}_{option.upper().replace('-', '_')}"


def args_to_environ(
    args: list[str], base: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Map command line options onto environment variables.

    Args:
        args: Options such as ["--base-path", "/etc/tls", "--dev-mode"].
        base: Environment to extend. If None, uses os.environ.

    Returns:
        A new environment mapping including the options.

    Raises:
        ConfigurationError: On unknown options or missing option values.
    """
    env = dict(os.environ if base is None else base)
    remaining = list(args)
    while remaining:
        arg = remaining.pop(0)
        if not arg.startswith("--"):
            raise ConfigurationError(f"Unexpected argument: {arg}", "cli")
        option, sep, inline_value = arg[2:].partition("=")

        if option in APP_FLAGS:
            env[_env_name("TLSKIT_APP", option)] = inline_value if sep else "true"
            continue
        if option not in PROVIDER_OPTIONS and option not in APP_OPTIONS:
            raise ConfigurationError(f"Unknown option: --{option}", "cli")

        if sep:
            value = inline_value
        elif remaining:
            value = remaining.pop(0)
        else:
            raise ConfigurationError(f"Option --{option} requires a value", "cli")

        prefix = "TLSKIT_APP" if option in APP_OPTIONS else "TLSKIT"
        env[_env_name(prefix, option)] = value
    return env


def create_command_config(
    name: str, args: list[str] | None = None
) -> tuple[CommandConfig, ProviderConfig]:
    """Create command and provider configuration from arguments and environment.

    Args:
        name: Logical name given as the command's positional argument.
        args: Remaining command line options.

    Returns:
        The command configuration and the provider configuration.
    """
    env = args_to_environ(args or [])
    env["TLSKIT_APP_NAME"] = name
    return environ.to_config(CommandConfig, environ=env), load_provider_config(env)
