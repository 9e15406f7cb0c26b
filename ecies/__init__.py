# ECIES
"""
Elliptic Curve Integrated Encryption Scheme over secp256k1:
- Ephemeral ECDH key agreement
- HKDF-SHA256 key derivation
- AEAD payload encryption (AES-256-GCM or XChaCha20-Poly1305)

Ciphertext format: [ephemeral public key (65) | ciphertext | tag | nonce]
"""

import logging

from .errors import (
    EciesError,
    InvalidPrivateKey,
    InvalidPublicKey,
    InvalidInputLength,
    ConfigurationError,
)
from .keys import (
    KeyPair,
    RandomSource,
    SystemRandomSource,
    generate_keypair,
    parse_secret_key,
    parse_public_key,
    CURVE_ORDER,
)
from .kdf import encapsulate, decapsulate, hkdf_sha256
from .symmetric import (
    SymmetricBackend,
    AESGCMBackend,
    AESGCM96Backend,
    XChaCha20Poly1305Backend,
    available_backends,
    get_backend,
)
from .config import EciesConfig, load_config, get_config
from .hybrid import (
    Ecies,
    encrypt,
    decrypt,
    encrypt_for_peer,
    decrypt_with_private,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    'EciesError',
    'InvalidPrivateKey',
    'InvalidPublicKey',
    'InvalidInputLength',
    'ConfigurationError',
    # Keys
    'KeyPair',
    'RandomSource',
    'SystemRandomSource',
    'generate_keypair',
    'parse_secret_key',
    'parse_public_key',
    'CURVE_ORDER',
    # Derivation
    'encapsulate',
    'decapsulate',
    'hkdf_sha256',
    # Symmetric
    'SymmetricBackend',
    'AESGCMBackend',
    'AESGCM96Backend',
    'XChaCha20Poly1305Backend',
    'available_backends',
    'get_backend',
    # Configuration
    'EciesConfig',
    'load_config',
    'get_config',
    # Hybrid
    'Ecies',
    'encrypt',
    'decrypt',
    'encrypt_for_peer',
    'decrypt_with_private',
]
