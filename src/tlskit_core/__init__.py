"""Loading of TLS certificate material by logical name."""

from .config import ProviderConfig, create_path_based_provider, load_provider_config
from .exceptions import (
    CABundleParseFailure,
    ConfigurationError,
    KeyPairParseFailure,
    ReadFailure,
    TlsKitError,
    UnknownReaderTypeError,
)
from .keypair import CertificateKeyPair, x509_key_pair
from .path_based import (
    DEFAULT_CERTIFICATE_EXTENSION,
    DEFAULT_KEY_EXTENSION,
    DEFAULT_PATH_SEPARATOR,
    PathBasedProvider,
    PathOption,
    PathProviderOptions,
    with_base_path,
    with_certificate_extension,
    with_key_extension,
    with_path_separator,
)
from .provider import (
    CertificateAuthorityProvider,
    CertificateProvider,
    KeyPairProvider,
)
from .readers import PathReader, create_path_reader
from .ssl_context import create_client_ssl_context, create_server_ssl_context

__all__ = [
    "DEFAULT_CERTIFICATE_EXTENSION",
    "DEFAULT_KEY_EXTENSION",
    "DEFAULT_PATH_SEPARATOR",
    "CABundleParseFailure",
    "CertificateAuthorityProvider",
    "CertificateKeyPair",
    "CertificateProvider",
    "ConfigurationError",
    "KeyPairParseFailure",
    "KeyPairProvider",
    "PathBasedProvider",
    "PathOption",
    "PathProviderOptions",
    "PathReader",
    "ProviderConfig",
    "ReadFailure",
    "TlsKitError",
    "UnknownReaderTypeError",
    "create_client_ssl_context",
    "create_path_based_provider",
    "create_path_reader",
    "create_server_ssl_context",
    "load_provider_config",
    "with_base_path",
    "with_certificate_extension",
    "with_key_extension",
    "with_path_separator",
    "x509_key_pair",
]
