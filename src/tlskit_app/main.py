"""Command-line interface and main entry point.

This module provides the tlskit CLI for loading CA bundles and verifying
certificate key pairs through a configured path based provider.
"""
# ruff: noqa: T201

import sys

import structlog

from tlskit_app.cli_config import create_command_config
from tlskit_core.config import create_path_based_provider
from tlskit_core.exceptions import TlsKitError
from tlskit_core.keypair import CertificateKeyPair
from tlskit_core.logging_config import configure_logging

__version__ = "0.1.0"

# Get logger for this module
logger = structlog.get_logger(__name__)


def _split_name(args: list[str] | None) -> tuple[str, list[str]]:
    if not args or args[0].startswith("--"):
        msg = "name is required"
        raise TlsKitError(msg)
    return args[0], args[1:]


def ca_certs_command(args: list[str] | None = None) -> None:
    """Print the PEM encoded CA bundle registered under a name.

    Args:
        args: The name followed by command line options.
    """
    try:
        name, options = _split_name(args)
        config, provider_config = create_command_config(name, options)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        provider = create_path_based_provider(provider_config)
        data = provider.ca_pem_certs(config.name)
        sys.stdout.buffer.write(data)
        sys.stdout.flush()

    except TlsKitError as e:
        logger.warning("CA_CERTS_COMMAND_FAILED", error=str(e))
        print(f"Error: {e!s}")
        sys.exit(1)


def describe_key_pair(key_pair: CertificateKeyPair) -> str:
    """Summarize a key pair for display."""
    certificate = key_pair.certificate
    lines = [
        f"Subject:    {certificate.subject.rfc4514_string()}",
        f"Issuer:     {certificate.issuer.rfc4514_string()}",
        f"Serial:     {certificate.serial_number:x}",
        f"Not after:  {certificate.not_valid_after_utc.isoformat()}",
        f"Key type:   {type(key_pair.private_key).__name__}",
        f"Chain:      {len(key_pair.chain)} certificate(s)",
    ]
    return "\n".join(lines)


def key_pair_command(args: list[str] | None = None) -> None:
    """Load and verify the certificate key pair registered under a name.

    Args:
        args: The name followed by command line options.
    """
    try:
        name, options = _split_name(args)
        config, provider_config = create_command_config(name, options)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        provider = create_path_based_provider(provider_config)
        key_pair = provider.x509_key_pair(config.name)
        print(describe_key_pair(key_pair))

    except TlsKitError as e:
        logger.warning("KEY_PAIR_COMMAND_FAILED", error=str(e))
        print(f"Error: {e!s}")
        sys.exit(1)


def show_help() -> None:
    """Show help information for the CLI."""
    help_text = """
tlskit

Usage:
    tlskit <command> <name> [options]

Commands:
    ca-certs <name>     Print the PEM encoded CA bundle registered under <name>
    key-pair <name>     Load and verify the certificate key pair under <name>
    --help, -h          Show this help message
    --version, -v       Show version information

Options:
    --base-path <path>                 Prefix joined in front of every path
    --path-separator <sep>             Separator between base path and file name
    --certificate-extension <ext>      Certificate extension (default .crt)
    --key-extension <ext>              Private key extension (default .key)
    --reader-type <type>               Reader (local, aws-secrets, aws-ssm)
    --reader-aws-region <region>       AWS region for AWS readers
    --reader-aws-endpoint-url <url>    AWS endpoint URL (e.g., LocalStack)
    --reader-aws-profile <profile>     AWS profile for AWS readers
    --log-level <level>                Log level (DEBUG, INFO, WARNING, ERROR)
    --dev-mode                         Enable development mode logging

Examples:
    tlskit ca-certs ca --base-path /etc/tls
    tlskit key-pair server --reader-type aws-ssm --base-path /prod/tls
"""
    print(help_text)


def main() -> None:
    """Main entry point for the CLI."""
    min_args = 2
    if len(sys.argv) < min_args:
        show_help()
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]

    if command == "ca-certs":
        ca_certs_command(args)
    elif command == "key-pair":
        key_pair_command(args)
    elif command in ["--help", "-h", "help"]:
        show_help()
        sys.exit(0)
    elif command in ["--version", "-v", "version"]:
        print(f"tlskit, version {__version__}")
        sys.exit(0)
    else:
        show_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
