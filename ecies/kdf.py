"""
Shared Secret Derivation

ECDH over secp256k1 followed by HKDF-SHA256.

The HKDF input is the sender's ephemeral public point followed by the full
shared point, both 65-byte uncompressed:

    master = ephemeral_public (65) || shared_point (65)

Both sides build the same master: the sender names itself by its own public
key, the receiver names the sender by the public key it received.
"""


import coincurve
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.backends import default_backend

from .errors import InvalidInputLength, InvalidPublicKey
from .keys import (
    PrivateKeyLike, PublicKeyLike,
    as_private_key, as_public_key, public_bytes, secret_bytes,
)


# Constants
SYMMETRIC_KEY_SIZE = 32     # 256-bit derived key
HKDF_MAX_LENGTH = 255 * 32  # 255 * SHA-256 digest size
EMPTY_BYTES = b""


def hkdf_sha256(master: bytes, length: int = SYMMETRIC_KEY_SIZE) -> bytes:
    """
    Expand key material with HKDF-SHA256, no salt and empty info.

    Args:
        master: Input key material
        length: Output length in bytes

    Returns:
        Derived key bytes

    Raises:
        InvalidInputLength: If length is outside 1..255*32
    """
    if not 0 < length <= HKDF_MAX_LENGTH:
        raise InvalidInputLength(
            f"HKDF-SHA256 output length must be 1..{HKDF_MAX_LENGTH}, got {length}"
        )
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=length,
        salt=None,
        info=EMPTY_BYTES,
        backend=default_backend()
    )
    return hkdf.derive(master)


def _shared_point(public_key, private_key) -> bytes:
    """Full uncompressed point public_key * scalar(private_key)."""
    try:
        point = coincurve.PublicKey(public_bytes(public_key))
        shared = point.multiply(secret_bytes(private_key))
    except ValueError as e:
        raise InvalidPublicKey(f"Scalar multiplication failed: {e}") from None
    return shared.format(compressed=False)


def encapsulate(own_private: PrivateKeyLike, peer_public: PublicKeyLike) -> bytes:
    """
    Derive the symmetric key on the sending side.

    Args:
        own_private: Sender's (ephemeral) private key or 32-byte scalar
        peer_public: Receiver's public key or SEC1 bytes

    Returns:
        32-byte symmetric key

    Raises:
        InvalidPrivateKey: If own_private is not a valid scalar
        InvalidPublicKey: If peer_public is not a valid point
    """
    private_key = as_private_key(own_private)
    public_key = as_public_key(peer_public)

    master = public_bytes(private_key.public_key()) + _shared_point(public_key, private_key)
    return hkdf_sha256(master)


def decapsulate(peer_public: PublicKeyLike, own_private: PrivateKeyLike) -> bytes:
    """
    Derive the symmetric key on the receiving side.

    Args:
        peer_public: Sender's ephemeral public key or SEC1 bytes
        own_private: Receiver's private key or 32-byte scalar

    Returns:
        32-byte symmetric key, equal to what encapsulate() produced
    """
    public_key = as_public_key(peer_public)
    private_key = as_private_key(own_private)

    master = public_bytes(public_key) + _shared_point(public_key, private_key)
    return hkdf_sha256(master)
