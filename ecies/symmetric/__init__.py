# Symmetric Backends
"""
AEAD backends for the ECIES payload:
- aes-256-gcm         AES-256-GCM, 16-byte nonce (default)
- aes-256-gcm-96      AES-256-GCM, 12-byte nonce
- xchacha20-poly1305  XChaCha20-Poly1305, 24-byte nonce

Framed ciphertext: [ciphertext | tag | nonce]
"""

from typing import Dict, List, Optional, Type

from ..errors import ConfigurationError
from ..keys import RandomSource
from .base import SymmetricBackend, split_frame
from .aes_gcm import AESGCMBackend, AESGCM96Backend
from .xchacha20 import XChaCha20Poly1305Backend


BACKENDS: Dict[str, Type[SymmetricBackend]] = {
    cls.NAME: cls
    for cls in (AESGCMBackend, AESGCM96Backend, XChaCha20Poly1305Backend)
}

DEFAULT_BACKEND = AESGCMBackend.NAME


def available_backends() -> List[str]:
    """Names accepted by get_backend()."""
    return sorted(BACKENDS)


def get_backend(name: str = DEFAULT_BACKEND,
                rng: Optional[RandomSource] = None) -> SymmetricBackend:
    """
    Instantiate a backend by name.

    Raises:
        ConfigurationError: If the name is unknown
    """
    try:
        cls = BACKENDS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown symmetric backend {name!r}, "
            f"expected one of: {', '.join(available_backends())}"
        ) from None
    return cls(rng)


__all__ = [
    'SymmetricBackend',
    'AESGCMBackend',
    'AESGCM96Backend',
    'XChaCha20Poly1305Backend',
    'BACKENDS',
    'DEFAULT_BACKEND',
    'available_backends',
    'get_backend',
    'split_frame',
]
