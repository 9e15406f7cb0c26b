"""
AES-256-GCM backends.

Two nonce widths share one implementation:
- aes-256-gcm     16-byte nonce, the portable default framing
- aes-256-gcm-96  12-byte nonce, the NIST-recommended width that
                  OpenSSL accelerates with AES-NI/PCLMULQDQ
"""

from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .base import SymmetricBackend


class AESGCMBackend(SymmetricBackend):
    """AES-256-GCM with a 128-bit nonce and 128-bit tag."""

    NAME = "aes-256-gcm"
    NONCE_LENGTH = 16
    TAG_LENGTH = 16

    def _seal(self, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
        # GCM appends the tag to the ciphertext
        return AESGCM(key).encrypt(nonce, plaintext, None)

    def _open(self, key: bytes, nonce: bytes, sealed: bytes) -> Optional[bytes]:
        try:
            return AESGCM(key).decrypt(nonce, sealed, None)
        except InvalidTag:
            return None


class AESGCM96Backend(AESGCMBackend):
    """AES-256-GCM with a 96-bit nonce."""

    NAME = "aes-256-gcm-96"
    NONCE_LENGTH = 12
