"""
Configuration

The symmetric backend is chosen once per process. Values come from
environment variables:

    ECIES_SYMMETRIC_BACKEND   aes-256-gcm | aes-256-gcm-96 | xchacha20-poly1305
    ECIES_KEYGEN_ATTEMPTS     bound on random draws when generating a key pair
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .symmetric import BACKENDS, DEFAULT_BACKEND

logger = logging.getLogger(__name__)

ENV_BACKEND = "ECIES_SYMMETRIC_BACKEND"
ENV_KEYGEN_ATTEMPTS = "ECIES_KEYGEN_ATTEMPTS"

DEFAULT_KEYGEN_ATTEMPTS = 64


@dataclass(frozen=True)
class EciesConfig:
    """Process-wide ECIES settings."""
    symmetric_backend: str = DEFAULT_BACKEND
    keygen_attempts: int = DEFAULT_KEYGEN_ATTEMPTS


def load_config(env: Optional[Mapping[str, str]] = None) -> EciesConfig:
    """
    Build configuration from environment variables.

    Args:
        env: Mapping to read instead of os.environ

    Returns:
        Validated EciesConfig

    Raises:
        ConfigurationError: If a value is unknown or malformed
    """
    if env is None:
        env = os.environ

    backend = env.get(ENV_BACKEND, DEFAULT_BACKEND).strip().lower()
    if backend not in BACKENDS:
        raise ConfigurationError(
            f"Unknown symmetric backend {backend!r}, "
            f"expected one of: {', '.join(sorted(BACKENDS))}"
        )

    raw_attempts = env.get(ENV_KEYGEN_ATTEMPTS, str(DEFAULT_KEYGEN_ATTEMPTS))
    try:
        attempts = int(raw_attempts)
    except ValueError:
        raise ConfigurationError(
            f"{ENV_KEYGEN_ATTEMPTS} must be an integer, got {raw_attempts!r}"
        ) from None
    if attempts < 1:
        raise ConfigurationError(f"{ENV_KEYGEN_ATTEMPTS} must be at least 1")

    config = EciesConfig(symmetric_backend=backend, keygen_attempts=attempts)
    logger.debug("Loaded configuration: %s", config)
    return config


_config: Optional[EciesConfig] = None


def get_config() -> EciesConfig:
    """Return the cached process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
