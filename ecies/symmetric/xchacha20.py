"""
XChaCha20-Poly1305 backend (libsodium via PyNaCl).

The 192-bit nonce makes random nonces safe for practically unlimited
messages under one key.
"""

from typing import Optional

from nacl import bindings
from nacl.exceptions import CryptoError

from .base import SymmetricBackend


class XChaCha20Poly1305Backend(SymmetricBackend):
    """XChaCha20-Poly1305 (IETF construction) with a 24-byte nonce."""

    NAME = "xchacha20-poly1305"
    KEY_LENGTH = bindings.crypto_aead_xchacha20poly1305_ietf_KEYBYTES
    NONCE_LENGTH = bindings.crypto_aead_xchacha20poly1305_ietf_NPUBBYTES
    TAG_LENGTH = bindings.crypto_aead_xchacha20poly1305_ietf_ABYTES

    def _seal(self, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
        return bindings.crypto_aead_xchacha20poly1305_ietf_encrypt(
            plaintext, None, nonce, key
        )

    def _open(self, key: bytes, nonce: bytes, sealed: bytes) -> Optional[bytes]:
        try:
            return bindings.crypto_aead_xchacha20poly1305_ietf_decrypt(
                sealed, None, nonce, key
            )
        except CryptoError:
            return None
