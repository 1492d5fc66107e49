"""SSL context construction from certificate providers.

This module builds ssl.SSLContext objects for servers and clients from the
CA bundles and key pairs served by providers.
"""

import ssl

import structlog

from tlskit_core.exceptions import CABundleParseFailure
from tlskit_core.keypair import certificate_blocks
from tlskit_core.provider import CertificateAuthorityProvider, KeyPairProvider

# Get logger for this module
logger = structlog.get_logger(__name__)


def _load_ca(
    context: ssl.SSLContext, provider: CertificateAuthorityProvider, ca_name: str
) -> None:
    ca_pem = provider.ca_pem_certs(ca_name)
    blocks = certificate_blocks(ca_pem)
    if not blocks:
        raise CABundleParseFailure(
            f"no certificate PEM data in CA bundle {ca_name}", ca_name
        )
    try:
        context.load_verify_locations(cadata=b"".join(blocks).decode("ascii"))
    except ssl.SSLError as e:
        raise CABundleParseFailure(
            f"cannot load CA bundle {ca_name}: {e}", ca_name
        ) from e


def create_server_ssl_context(
    provider: KeyPairProvider,
    name: str,
    ca_provider: CertificateAuthorityProvider | None = None,
    ca_name: str | None = None,
) -> ssl.SSLContext:
    """Create a server side SSL context.

    Args:
        provider: Provider of the server certificate key pair.
        name: Logical name of the server key pair.
        ca_provider: Provider of the CA bundle used to verify clients.
            Defaults to provider when it also serves CA bundles.
        ca_name: Logical name of the client CA bundle. When given, clients
            must present a certificate signed by it.

    Returns:
        The configured SSL context.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    provider.x509_key_pair(name).load_into(context)

    if ca_name is not None:
        _load_ca(context, _ca_provider(provider, ca_provider), ca_name)
        context.verify_mode = ssl.CERT_REQUIRED

    logger.debug("SERVER_SSL_CONTEXT_CREATED", name=name, ca_name=ca_name)
    return context


def create_client_ssl_context(
    provider: CertificateAuthorityProvider,
    ca_name: str,
    key_pair_provider: KeyPairProvider | None = None,
    name: str | None = None,
) -> ssl.SSLContext:
    """Create a client side SSL context trusting a CA bundle.

    Args:
        provider: Provider of the CA bundle used to verify servers.
        ca_name: Logical name of the CA bundle.
        key_pair_provider: Provider of the client key pair. Defaults to
            provider when it also serves key pairs.
        name: Logical name of the client key pair, for mutual TLS.

    Returns:
        The configured SSL context.
    """
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    _load_ca(context, provider, ca_name)

    if name is not None:
        if key_pair_provider is None:
            if not isinstance(provider, KeyPairProvider):
                raise TypeError("a key pair provider is required for a client key pair")
            key_pair_provider = provider
        key_pair_provider.x509_key_pair(name).load_into(context)

    logger.debug("CLIENT_SSL_CONTEXT_CREATED", ca_name=ca_name, name=name)
    return context


def _ca_provider(
    provider: KeyPairProvider, ca_provider: CertificateAuthorityProvider | None
) -> CertificateAuthorityProvider:
    if ca_provider is not None:
        return ca_provider
    if isinstance(provider, CertificateAuthorityProvider):
        return provider
    raise TypeError("a CA provider is required for client verification")
