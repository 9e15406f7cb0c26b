"""
ECIES Hybrid Encryption

Combines ephemeral ECDH (secp256k1) + HKDF-SHA256 + an AEAD backend.

Two surfaces:
- encrypt_for_peer / decrypt_with_private keep the ephemeral public key and
  the framed ciphertext apart, for callers that transport them separately.
- encrypt / decrypt pack both into one blob:

    [ephemeral public key (65) | ciphertext | tag | nonce]

Example:
    receiver = KeyPair.generate()
    blob = encrypt(receiver.public_bytes(), b"hello")
    assert decrypt(receiver.secret_bytes(), blob) == b"hello"
"""

import logging
from typing import Optional, Tuple

from .config import get_config
from .errors import InvalidPublicKey
from .kdf import decapsulate, encapsulate
from .keys import (
    UNCOMPRESSED_PUBLIC_KEY_SIZE, KeyPair, PrivateKeyLike, PublicKeyLike,
    RandomSource, as_private_key,
)
from .symmetric import SymmetricBackend, get_backend

logger = logging.getLogger(__name__)


_configured_backend: Optional[SymmetricBackend] = None


def configured_backend() -> SymmetricBackend:
    """The configured backend, resolved once per process."""
    global _configured_backend
    if _configured_backend is None:
        _configured_backend = get_backend(get_config().symmetric_backend)
        logger.debug("Using symmetric backend %s", _configured_backend.NAME)
    return _configured_backend


def encrypt_for_peer(peer_public: PublicKeyLike, plaintext: bytes,
                     backend: Optional[SymmetricBackend] = None,
                     rng: Optional[RandomSource] = None) -> Tuple[bytes, bytes]:
    """
    Encrypt plaintext for the holder of peer_public.

    Args:
        peer_public: Receiver's public key or SEC1 bytes
        plaintext: Message to encrypt
        backend: Symmetric backend, the configured default if None
        rng: Random source for the ephemeral key pair

    Returns:
        Tuple of (ephemeral_public_bytes, framed_ciphertext)

    Raises:
        InvalidPublicKey: If peer_public is not a valid secp256k1 point
    """
    backend = backend or configured_backend()
    ephemeral = KeyPair.generate(rng)
    key = encapsulate(ephemeral.private_key, peer_public)
    framed = backend.encrypt(key, plaintext)
    logger.debug("Encrypted %d bytes with %s", len(plaintext), backend.NAME)
    return ephemeral.public_bytes(), framed


def decrypt_with_private(own_private: PrivateKeyLike, ephemeral_public: PublicKeyLike,
                         framed: bytes,
                         backend: Optional[SymmetricBackend] = None) -> Optional[bytes]:
    """
    Decrypt a framed ciphertext addressed to own_private.

    Returns:
        Plaintext, or None if the ciphertext is malformed or forged

    Raises:
        InvalidPrivateKey: If own_private is not a valid scalar
        InvalidPublicKey: If ephemeral_public is not a valid point
    """
    backend = backend or configured_backend()
    key = decapsulate(ephemeral_public, own_private)
    return backend.decrypt(key, framed)


def encrypt(receiver_public: PublicKeyLike, plaintext: bytes,
            backend: Optional[SymmetricBackend] = None,
            rng: Optional[RandomSource] = None) -> bytes:
    """Encrypt into a single blob: ephemeral public key || framed ciphertext."""
    ephemeral_public, framed = encrypt_for_peer(receiver_public, plaintext, backend, rng)
    return ephemeral_public + framed


def decrypt(receiver_secret: PrivateKeyLike, blob: bytes,
            backend: Optional[SymmetricBackend] = None) -> Optional[bytes]:
    """
    Decrypt a blob produced by encrypt().

    The blob is untrusted: a short blob or a bad ephemeral key yields None.
    A bad receiver_secret is the caller's mistake and raises InvalidPrivateKey.
    """
    own_private = as_private_key(receiver_secret)
    if len(blob) < UNCOMPRESSED_PUBLIC_KEY_SIZE:
        return None
    ephemeral_public = blob[:UNCOMPRESSED_PUBLIC_KEY_SIZE]
    framed = blob[UNCOMPRESSED_PUBLIC_KEY_SIZE:]
    try:
        return decrypt_with_private(own_private, ephemeral_public, framed, backend)
    except InvalidPublicKey:
        return None


class Ecies:
    """
    ECIES bound to one symmetric backend.

    Example:
        ecies = Ecies("xchacha20-poly1305")
        blob = ecies.encrypt(bob.public_bytes(), b"hi")
        ecies.decrypt(bob.secret_bytes(), blob)
    """

    def __init__(self, backend: Optional[str] = None,
                 rng: Optional[RandomSource] = None):
        if backend is None:
            backend = get_config().symmetric_backend
        self._backend = get_backend(backend, rng)
        self._rng = rng

    @property
    def backend(self) -> SymmetricBackend:
        return self._backend

    def encrypt_for_peer(self, peer_public: PublicKeyLike,
                         plaintext: bytes) -> Tuple[bytes, bytes]:
        return encrypt_for_peer(peer_public, plaintext, self._backend, self._rng)

    def decrypt_with_private(self, own_private: PrivateKeyLike,
                             ephemeral_public: PublicKeyLike,
                             framed: bytes) -> Optional[bytes]:
        return decrypt_with_private(own_private, ephemeral_public, framed, self._backend)

    def encrypt(self, receiver_public: PublicKeyLike, plaintext: bytes) -> bytes:
        return encrypt(receiver_public, plaintext, self._backend, self._rng)

    def decrypt(self, receiver_secret: PrivateKeyLike, blob: bytes) -> Optional[bytes]:
        return decrypt(receiver_secret, blob, self._backend)


# Self-test when run directly
if __name__ == "__main__":
    print("ECIES Module Test")
    print("=" * 70)

    alice = KeyPair.generate()
    bob = KeyPair.generate()
    message = b"Hello Bob! This is an ECIES message from Alice."

    for name in ("aes-256-gcm", "aes-256-gcm-96", "xchacha20-poly1305"):
        ecies = Ecies(name)
        blob = ecies.encrypt(bob.public_bytes(), message)
        ok = ecies.decrypt(bob.secret_bytes(), blob) == message
        wrong = ecies.decrypt(alice.secret_bytes(), blob) is None
        print(f"\n[{name}] blob size: {len(blob)} bytes")
        print(f"  Round trip: {'✓ PASS' if ok else '✗ FAIL'}")
        print(f"  Wrong key rejected: {'✓ PASS' if wrong else '✗ FAIL'}")
