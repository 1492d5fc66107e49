"""Standardized exceptions for the tlskit core module.

This module provides the error taxonomy raised by path readers, the path
based provider and key pair parsing.
"""


class TlsKitError(Exception):
    """Base exception for all tlskit errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the error with a message and optional error code.

        Args:
            message: Human-readable error message.
            error_code: Optional error code for programmatic handling.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ReadFailure(TlsKitError):
    """Raised when a path reader cannot produce bytes for a resolved path."""

    def __init__(
        self, message: str, path: str, reader: str | None = None
    ) -> None:
        """Initialize read failure.

        Args:
            message: Error message, including the underlying cause.
            path: The resolved path that was attempted.
            reader: Optional name of the reader that failed.
        """
        super().__init__(message, "READ_ERROR")
        self.path = path
        self.reader = reader


class KeyPairParseFailure(TlsKitError):
    """Raised when certificate and key bytes do not form a matching pair."""

    def __init__(self, message: str) -> None:
        """Initialize key pair parse failure.

        Args:
            message: Error message with the parser diagnostic.
        """
        super().__init__(message, "KEY_PAIR_PARSE_ERROR")


class ConfigurationError(TlsKitError):
    """Raised when there are configuration-related errors."""

    def __init__(self, message: str, component: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message describing the configuration issue.
            component: Optional component name where the error occurred.
        """
        super().__init__(message, "CONFIG_ERROR")
        self.component = component


class UnknownReaderTypeError(ConfigurationError):
    """Raised when an unknown path reader type is specified."""

    def __init__(self, reader_type: str) -> None:
        """Initialize the unknown reader type error.

        Args:
            reader_type: The unknown reader type that was specified.
        """
        super().__init__(f"Unknown reader type: {reader_type}", "readers")
        self.reader_type = reader_type


class CABundleParseFailure(TlsKitError):
    """Raised when a CA bundle holds no usable certificates."""

    def __init__(self, message: str, name: str) -> None:
        """Initialize CA bundle parse failure.

        Args:
            message: Error message with the parser diagnostic.
            name: Logical name of the CA bundle.
        """
        super().__init__(message, "CA_BUNDLE_PARSE_ERROR")
        self.name = name
