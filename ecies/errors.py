"""
Error types raised by the ECIES package.

Key validity problems are programming or input mistakes and are raised.
Symmetric decryption failures are not errors: backends return None.
"""


class EciesError(Exception):
    """Base class for all ECIES errors."""


class InvalidPrivateKey(EciesError, ValueError):
    """Secret scalar is zero, not below the group order, or not 32 bytes."""


class InvalidPublicKey(EciesError, ValueError):
    """Encoded point is not on secp256k1 or multiplies to infinity."""


class InvalidInputLength(EciesError, ValueError):
    """HKDF was asked for more output than it can produce."""


class ConfigurationError(EciesError):
    """Unknown backend name or malformed configuration value."""
