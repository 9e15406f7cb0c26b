"""
Symmetric backend contract and ciphertext framing.

Framed ciphertext layout shared by every backend and both peers:

    [ciphertext (len(plaintext)) | tag (TAG_LENGTH)] | nonce (NONCE_LENGTH)

The nonce goes at the END. Keep it there: peers must agree on byte layout.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..keys import SYSTEM_RANDOM, RandomSource


def split_frame(framed: bytes, nonce_length: int) -> Tuple[bytes, bytes]:
    """Split a framed ciphertext into (ciphertext || tag, nonce)."""
    boundary = len(framed) - nonce_length
    return framed[:boundary], framed[boundary:]


class SymmetricBackend(ABC):
    """
    AEAD cipher keyed by a 32-byte ECIES symmetric key.

    Subclasses fix NAME, NONCE_LENGTH and TAG_LENGTH and implement
    _seal/_open. Backends hold no key material between calls.
    """

    NAME = ""
    KEY_LENGTH = 32
    NONCE_LENGTH = 0
    TAG_LENGTH = 16

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng or SYSTEM_RANDOM

    @property
    def overhead(self) -> int:
        """Bytes added to every plaintext."""
        return self.TAG_LENGTH + self.NONCE_LENGTH

    def _check_key(self, key: bytes) -> None:
        if len(key) != self.KEY_LENGTH:
            raise ValueError(f"Key must be {self.KEY_LENGTH} bytes")

    def encrypt(self, key: bytes, plaintext: bytes) -> bytes:
        """
        Seal plaintext under key with a fresh random nonce.

        Args:
            key: 32-byte symmetric key
            plaintext: Data to encrypt

        Returns:
            ciphertext || tag || nonce
        """
        self._check_key(key)
        nonce = self._rng.token_bytes(self.NONCE_LENGTH)
        return self._seal(key, nonce, plaintext) + nonce

    def decrypt(self, key: bytes, framed: bytes) -> Optional[bytes]:
        """
        Open a framed ciphertext.

        Returns None if the frame is too short or does not authenticate;
        the two cases are indistinguishable to the caller.
        """
        if len(framed) < self.overhead:
            return None
        self._check_key(key)
        sealed, nonce = split_frame(framed, self.NONCE_LENGTH)
        return self._open(key, nonce, sealed)

    @abstractmethod
    def _seal(self, key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
        """Return ciphertext || tag."""

    @abstractmethod
    def _open(self, key: bytes, nonce: bytes, sealed: bytes) -> Optional[bytes]:
        """Return plaintext, or None if the tag does not verify."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.NAME!r})"
