"""Path based certificate provider.

This module provides the PathBasedProvider class, which resolves a logical
name to reader paths by joining a base path and the name plus a file
extension with a path separator, then delegates the read to a PathReader.

Example:
    provider = PathBasedProvider(
        LocalPathReader(),
        with_base_path("/etc/tls"),
        with_key_extension(".pem"),
    )
    ca = provider.ca_pem_certs("ca")              # reads /etc/tls/ca.crt
    pair = provider.x509_key_pair("server")       # reads server.crt, server.pem
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

import structlog

from tlskit_core.exceptions import ReadFailure
from tlskit_core.keypair import CertificateKeyPair, x509_key_pair
from tlskit_core.readers.base import PathReader

# Get logger for this module
logger = structlog.get_logger(__name__)

DEFAULT_CERTIFICATE_EXTENSION = ".crt"
DEFAULT_KEY_EXTENSION = ".key"
DEFAULT_PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class PathProviderOptions:
    """Path resolution settings of a PathBasedProvider."""

    base_path: str = ""
    path_separator: str = DEFAULT_PATH_SEPARATOR
    certificate_extension: str = DEFAULT_CERTIFICATE_EXTENSION
    key_extension: str = DEFAULT_KEY_EXTENSION


PathOption = Callable[[PathProviderOptions], PathProviderOptions]


def with_base_path(base_path: str) -> PathOption:
    """Set the prefix joined in front of every resolved path."""

    def option(options: PathProviderOptions) -> PathProviderOptions:
        return replace(options, base_path=base_path)

    return option


def with_path_separator(path_separator: str) -> PathOption:
    """Set the separator joining the base path and the file name."""

    def option(options: PathProviderOptions) -> PathProviderOptions:
        return replace(options, path_separator=path_separator)

    return option


def with_certificate_extension(extension: str) -> PathOption:
    """Set the extension appended to names for certificate reads."""

    def option(options: PathProviderOptions) -> PathProviderOptions:
        return replace(options, certificate_extension=extension)

    return option


def with_key_extension(extension: str) -> PathOption:
    """Set the extension appended to names for private key reads."""

    def option(options: PathProviderOptions) -> PathProviderOptions:
        return replace(options, key_extension=extension)

    return option


def make_path(separator: str, *elements: str) -> str:
    """Join path elements with a separator.

    Empty elements are kept, so an empty base path yields a leading
    separator: make_path("/", "", "ca.crt") == "/ca.crt".
    """
    return separator.join(elements)


def with_extension(name: str, extension: str) -> str:
    return name + extension


class PathBasedProvider:
    """Certificate provider that resolves names to paths of a PathReader."""

    def __init__(self, reader: PathReader, *options: PathOption) -> None:
        """Initialize the provider.

        Options are applied in order, so a later option overrides an earlier
        one for the same setting. Nothing is validated here.

        Args:
            reader: Path reader used to fetch raw bytes.
            *options: Path options overriding the defaults.
        """
        resolved = PathProviderOptions()
        for option in options:
            resolved = option(resolved)
        self._options = resolved
        self._reader = reader

    @property
    def options(self) -> PathProviderOptions:
        return self._options

    @property
    def reader(self) -> PathReader:
        return self._reader

    def certificate_path(self, name: str) -> str:
        """Resolve the certificate path for a name."""
        return make_path(
            self._options.path_separator,
            self._options.base_path,
            with_extension(name, self._options.certificate_extension),
        )

    def key_path(self, name: str) -> str:
        """Resolve the private key path for a name."""
        return make_path(
            self._options.path_separator,
            self._options.base_path,
            with_extension(name, self._options.key_extension),
        )

    def _read(self, path: str) -> bytes:
        try:
            return self._reader.read_path(path)
        except Exception as e:
            logger.warning("PATH_READ_FAILED", path=path, error=str(e))
            raise ReadFailure(
                f"cannot read path {path}: {e}",
                path=path,
                reader=type(self._reader).__name__,
            ) from e

    def ca_pem_certs(self, name: str) -> bytes:
        """Read the PEM encoded CA certificates registered under a name.

        The bytes are returned as read; PEM validity is not checked.

        Raises:
            ReadFailure: When the reader cannot read the certificate path.
        """
        path = self.certificate_path(name)
        data = self._read(path)
        logger.debug("CA_CERTS_LOADED", name=name, path=path, size=len(data))
        return data

    def x509_key_pair(self, name: str) -> CertificateKeyPair:
        """Read and parse the certificate key pair registered under a name.

        The certificate is read first; when that read fails the private key
        is not read.

        Raises:
            ReadFailure: When the reader cannot read either path.
            KeyPairParseFailure: When the data is malformed or the private
                key does not match the certificate.
        """
        cert_path = self.certificate_path(name)
        cert_data = self._read(cert_path)
        key_path = self.key_path(name)
        key_data = self._read(key_path)
        key_pair = x509_key_pair(cert_data, key_data)
        logger.debug(
            "KEY_PAIR_LOADED",
            name=name,
            certificate_path=cert_path,
            key_path=key_path,
            chain_length=len(key_pair.chain),
        )
        return key_pair
