"""
Key Pair Module

secp256k1 key pairs for ECIES:
- Key pair generation from an injectable random source
- Secret scalar parsing with range checks (0 < k < n)
- SEC1 public point parsing (compressed or uncompressed)

Encodings:
    secret key:  32-byte big-endian scalar
    public key:  65 bytes uncompressed (0x04 || x || y) or 33 bytes compressed
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.backends import default_backend

from .errors import InvalidPrivateKey, InvalidPublicKey

logger = logging.getLogger(__name__)


# Constants
CURVE = ec.SECP256K1()
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECRET_KEY_SIZE = 32
UNCOMPRESSED_PUBLIC_KEY_SIZE = 65
COMPRESSED_PUBLIC_KEY_SIZE = 33


class RandomSource(Protocol):
    """Anything that can hand out cryptographically secure random bytes."""

    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """Process-wide CSPRNG backed by the operating system."""

    @staticmethod
    def token_bytes(n: int) -> bytes:
        return secrets.token_bytes(n)


SYSTEM_RANDOM = SystemRandomSource()


def parse_secret_key(data: bytes) -> ec.EllipticCurvePrivateKey:
    """
    Parse a 32-byte big-endian secret scalar.

    Args:
        data: Scalar bytes

    Returns:
        Private key object

    Raises:
        InvalidPrivateKey: If the length is wrong or the scalar is not in (0, n)
    """
    if len(data) != SECRET_KEY_SIZE:
        raise InvalidPrivateKey(
            f"Secret key must be {SECRET_KEY_SIZE} bytes, got {len(data)}"
        )
    scalar = int.from_bytes(data, byteorder='big')
    if not 0 < scalar < CURVE_ORDER:
        raise InvalidPrivateKey("Secret key must be in the range (0, curve order)")
    return ec.derive_private_key(scalar, CURVE, default_backend())


def parse_public_key(data: bytes) -> ec.EllipticCurvePublicKey:
    """
    Parse a SEC1-encoded secp256k1 point.

    Raises:
        InvalidPublicKey: If the encoding is malformed or the point is off the curve
    """
    if len(data) not in (UNCOMPRESSED_PUBLIC_KEY_SIZE, COMPRESSED_PUBLIC_KEY_SIZE):
        raise InvalidPublicKey(
            f"Public key must be {UNCOMPRESSED_PUBLIC_KEY_SIZE} or "
            f"{COMPRESSED_PUBLIC_KEY_SIZE} bytes, got {len(data)}"
        )
    try:
        return ec.EllipticCurvePublicKey.from_encoded_point(CURVE, data)
    except ValueError as e:
        raise InvalidPublicKey(f"Invalid public key: {e}") from None


def secret_bytes(private_key: ec.EllipticCurvePrivateKey) -> bytes:
    """Private key as a 32-byte big-endian scalar."""
    value = private_key.private_numbers().private_value
    return value.to_bytes(SECRET_KEY_SIZE, byteorder='big')


def public_bytes(public_key: ec.EllipticCurvePublicKey,
                 compressed: bool = False) -> bytes:
    """Public key as a SEC1 point, uncompressed unless asked otherwise."""
    point_format = (serialization.PublicFormat.CompressedPoint if compressed
                    else serialization.PublicFormat.UncompressedPoint)
    return public_key.public_bytes(
        encoding=serialization.Encoding.X962,
        format=point_format
    )


@dataclass(frozen=True)
class KeyPair:
    """secp256k1 key pair container. private_key is None for a peer's key."""
    private_key: Optional[ec.EllipticCurvePrivateKey]
    public_key: ec.EllipticCurvePublicKey

    @classmethod
    def generate(cls, rng: Optional[RandomSource] = None,
                 attempts: Optional[int] = None) -> 'KeyPair':
        """
        Generate a new key pair.

        Draws 32 bytes at a time until they encode a scalar in (0, n).
        For secp256k1 a single draw fails with probability below 2^-127.

        Args:
            rng: Random source, the system CSPRNG if None
            attempts: Maximum number of draws, from configuration if None

        Returns:
            Fresh KeyPair

        Raises:
            RuntimeError: If the source never produced a valid scalar
        """
        if rng is None:
            rng = SYSTEM_RANDOM
        if attempts is None:
            from .config import get_config
            attempts = get_config().keygen_attempts

        for _ in range(attempts):
            try:
                private_key = parse_secret_key(rng.token_bytes(SECRET_KEY_SIZE))
            except InvalidPrivateKey:
                continue
            logger.debug("Generated secp256k1 key pair")
            return cls(private_key, private_key.public_key())

        raise RuntimeError(
            f"Random source produced no valid secp256k1 scalar in {attempts} attempts"
        )

    @classmethod
    def from_secret_bytes(cls, data: bytes) -> 'KeyPair':
        """Rebuild a full key pair from a 32-byte secret scalar."""
        private_key = parse_secret_key(data)
        return cls(private_key, private_key.public_key())

    @classmethod
    def from_public_bytes(cls, data: bytes) -> 'KeyPair':
        """Create KeyPair from public key bytes (public key only)."""
        return cls(None, parse_public_key(data))

    def public_bytes(self, compressed: bool = False) -> bytes:
        """Get public key as bytes (uncompressed point by default)."""
        return public_bytes(self.public_key, compressed)

    def secret_bytes(self) -> bytes:
        """Get the secret scalar as 32 big-endian bytes."""
        if self.private_key is None:
            raise ValueError("Key pair has no private key")
        return secret_bytes(self.private_key)


def generate_keypair(rng: Optional[RandomSource] = None) -> KeyPair:
    """Generate a fresh secp256k1 key pair."""
    return KeyPair.generate(rng)


PrivateKeyLike = Union[ec.EllipticCurvePrivateKey, bytes]
PublicKeyLike = Union[ec.EllipticCurvePublicKey, bytes]


def as_private_key(key: PrivateKeyLike) -> ec.EllipticCurvePrivateKey:
    """Accept either a private key object or its 32-byte scalar."""
    if isinstance(key, (bytes, bytearray)):
        return parse_secret_key(bytes(key))
    if not isinstance(key.curve, ec.SECP256K1):
        raise InvalidPrivateKey(f"Expected a secp256k1 key, got {key.curve.name}")
    return key


def as_public_key(key: PublicKeyLike) -> ec.EllipticCurvePublicKey:
    """Accept either a public key object or its SEC1 encoding."""
    if isinstance(key, (bytes, bytearray)):
        return parse_public_key(bytes(key))
    if not isinstance(key.curve, ec.SECP256K1):
        raise InvalidPublicKey(f"Expected a secp256k1 key, got {key.curve.name}")
    return key
