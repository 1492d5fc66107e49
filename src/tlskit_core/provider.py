"""Certificate provider capability interfaces.

Callers depend on the narrowest capability they need: CA bundles only, key
pairs only, or both.
"""

from typing import Protocol, runtime_checkable

from tlskit_core.keypair import CertificateKeyPair


@runtime_checkable
class CertificateAuthorityProvider(Protocol):
    """Interface for providers of PEM encoded CA certificate bundles."""

    def ca_pem_certs(self, name: str) -> bytes:
        """Get the PEM encoded CA certificates registered under a name."""
        ...


@runtime_checkable
class KeyPairProvider(Protocol):
    """Interface for providers of certificate/private key pairs."""

    def x509_key_pair(self, name: str) -> CertificateKeyPair:
        """Get the verified certificate key pair registered under a name."""
        ...


@runtime_checkable
class CertificateProvider(CertificateAuthorityProvider, KeyPairProvider, Protocol):
    """Interface for providers of both CA bundles and key pairs."""
