"""Certificate/private key pair parsing.

This module provides the CertificateKeyPair result type and the
x509_key_pair function, which parses PEM encoded certificate and private key
data and verifies that the private key belongs to the leaf certificate.
"""

import re
import ssl
import tempfile
from dataclasses import dataclass
from pathlib import Path

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed448, ed25519, rsa
from cryptography.hazmat.primitives.asymmetric.types import (
    CertificatePublicKeyTypes,
    PrivateKeyTypes,
)

from tlskit_core.exceptions import KeyPairParseFailure

_PEM_BLOCK = re.compile(
    rb"-----BEGIN ([A-Z0-9 ]+)-----[ \t]*\r?\n(.*?)-----END \1-----[ \t]*",
    re.DOTALL,
)

_KEY_ALGORITHMS: tuple[tuple[str, tuple[type, ...]], ...] = (
    ("RSA", (rsa.RSAPublicKey, rsa.RSAPrivateKey)),
    ("EC", (ec.EllipticCurvePublicKey, ec.EllipticCurvePrivateKey)),
    ("Ed25519", (ed25519.Ed25519PublicKey, ed25519.Ed25519PrivateKey)),
    ("Ed448", (ed448.Ed448PublicKey, ed448.Ed448PrivateKey)),
    ("DSA", (dsa.DSAPublicKey, dsa.DSAPrivateKey)),
)


@dataclass(frozen=True)
class CertificateKeyPair:
    """A parsed certificate chain together with its matching private key."""

    certificate: x509.Certificate
    chain: tuple[x509.Certificate, ...]
    private_key: PrivateKeyTypes
    certificate_pem: bytes
    private_key_pem: bytes

    @property
    def certificate_der(self) -> tuple[bytes, ...]:
        """DER encoding of every certificate in the chain, leaf first."""
        return tuple(
            cert.public_bytes(serialization.Encoding.DER) for cert in self.chain
        )

    @property
    def public_key(self) -> CertificatePublicKeyTypes:
        """Public key of the leaf certificate."""
        return self.certificate.public_key()

    def load_into(self, context: ssl.SSLContext) -> None:
        """Load the certificate chain and private key into an SSL context.

        The ssl module only loads key material from files, so the pair is
        written to a private temporary directory that is removed afterwards.
        """
        chain_pem = b"".join(
            cert.public_bytes(serialization.Encoding.PEM) for cert in self.chain
        )
        key_pem = self.private_key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
        with tempfile.TemporaryDirectory(prefix="tlskit-") as tmp_dir:
            cert_file = Path(tmp_dir) / "cert.pem"
            key_file = Path(tmp_dir) / "key.pem"
            cert_file.write_bytes(chain_pem)
            key_file.write_bytes(key_pem)
            key_file.chmod(0o600)
            context.load_cert_chain(certfile=cert_file, keyfile=key_file)


def _canonical_block(block_type: bytes, body: bytes) -> bytes:
    # Trailing spaces, tabs and carriage returns are dropped from every line
    lines = [line.rstrip(b" \t\r") for line in body.split(b"\n")]
    return (
        b"-----BEGIN " + block_type + b"-----\n"
        + b"\n".join(lines)
        + b"-----END " + block_type + b"-----\n"
    )


def _pem_blocks(data: bytes) -> list[tuple[str, bytes]]:
    """Split PEM data into (block type, block bytes) pairs.

    Text outside the blocks, such as comment lines in CA bundles, is ignored.
    """
    return [
        (
            match.group(1).decode("ascii"),
            _canonical_block(match.group(1), match.group(2)),
        )
        for match in _PEM_BLOCK.finditer(data)
    ]


def certificate_blocks(data: bytes) -> list[bytes]:
    """Get every CERTIFICATE block of PEM data, normalized."""
    return [
        block for block_type, block in _pem_blocks(data) if block_type == "CERTIFICATE"
    ]


def _is_private_key_block(block_type: str) -> bool:
    return block_type == "PRIVATE KEY" or block_type.endswith(" PRIVATE KEY")


def _key_algorithm(key: object) -> str | None:
    for name, classes in _KEY_ALGORITHMS:
        if isinstance(key, classes):
            return name
    return None


def _public_key_info(key: CertificatePublicKeyTypes) -> bytes:
    return key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def _load_chain(cert_pem: bytes) -> tuple[x509.Certificate, ...]:
    blocks = _pem_blocks(cert_pem)
    chain = tuple(
        x509.load_pem_x509_certificate(block)
        for block_type, block in blocks
        if block_type == "CERTIFICATE"
    )
    if chain:
        return chain
    if not blocks:
        raise ValueError("failed to find any PEM data in certificate input")
    if any(_is_private_key_block(block_type) for block_type, _ in blocks):
        raise ValueError(
            "failed to find certificate PEM data in certificate input, "
            "but did find a private key; PEM inputs may have been switched"
        )
    raise ValueError(
        "failed to find certificate PEM data in certificate input after "
        f"skipping PEM blocks of the following types: {[t for t, _ in blocks]}"
    )


def _load_private_key(key_pem: bytes) -> PrivateKeyTypes:
    blocks = _pem_blocks(key_pem)
    for block_type, block in blocks:
        if _is_private_key_block(block_type):
            return serialization.load_pem_private_key(block, password=None)
    if not blocks:
        raise ValueError("failed to find any PEM data in key input")
    if any(block_type == "CERTIFICATE" for block_type, _ in blocks):
        raise ValueError(
            "found a certificate rather than a key in the PEM for the private key"
        )
    raise ValueError(
        "failed to find PEM block with type ending in \"PRIVATE KEY\" in key "
        f"input after skipping PEM blocks of the following types: "
        f"{[t for t, _ in blocks]}"
    )


def _verify_match(
    certificate: x509.Certificate, private_key: PrivateKeyTypes
) -> None:
    public_key = certificate.public_key()
    public_algorithm = _key_algorithm(public_key)
    if public_algorithm is None:
        raise ValueError("unknown public key algorithm")
    if _key_algorithm(private_key) != public_algorithm:
        raise ValueError("private key type does not match public key type")
    if _public_key_info(public_key) != _public_key_info(
        private_key.public_key()  # type: ignore[arg-type]
    ):
        raise ValueError("private key does not match public key")


def x509_key_pair(cert_pem: bytes, key_pem: bytes) -> CertificateKeyPair:
    """Parse a public/private key pair from PEM encoded data.

    Every CERTIFICATE block of cert_pem becomes part of the chain; the first
    block is the leaf. The first private key block of key_pem (PKCS#1, PKCS#8
    or SEC1, unencrypted) must match the leaf certificate's public key.

    Args:
        cert_pem: PEM encoded certificate chain.
        key_pem: PEM encoded private key.

    Returns:
        The parsed certificate key pair.

    Raises:
        KeyPairParseFailure: When the data is malformed or the private key
            does not belong to the certificate.
    """
    try:
        chain = _load_chain(cert_pem)
        private_key = _load_private_key(key_pem)
        _verify_match(chain[0], private_key)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyPairParseFailure(
            f"parse a public/private key pair: {e}"
        ) from e

    return CertificateKeyPair(
        certificate=chain[0],
        chain=chain,
        private_key=private_key,
        certificate_pem=cert_pem,
        private_key_pem=key_pem,
    )
