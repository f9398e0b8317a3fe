"""Configuration management for the scan result model.

Loads configuration from environment variables using Pydantic. Every
setting has a default, so an empty environment yields the built-in
catalog and the standard strong-cipher policy.

Provides:
- Config: Pydantic model with all settings
- load_config: Factory function to create Config instance
- build_catalog: Instantiate the catalog a Config names
"""

import os
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from sslscan.catalog import (
    STRONG_CIPHER_POLICY,
    CipherCatalog,
    SystemCipherCatalog,
    default_catalog,
)
from sslscan.errors import InvalidArgument


class Config(BaseModel):
    """Settings loaded from the environment.

    Attributes:
        strong_cipher_policy: Cipher string that selects strong suites
            (from SSLSCAN_STRONG_CIPHER_POLICY)
        cipher_catalog: "static" for the built-in suite table, "system"
            for the local OpenSSL build (from SSLSCAN_CIPHER_CATALOG)
    """

    strong_cipher_policy: str = Field(
        default_factory=lambda: os.getenv(
            "SSLSCAN_STRONG_CIPHER_POLICY", STRONG_CIPHER_POLICY
        )
    )
    cipher_catalog: Literal["static", "system"] = Field(
        default_factory=lambda: os.getenv("SSLSCAN_CIPHER_CATALOG", "static"),
        validate_default=True,
    )


def load_config() -> Config:
    """Load configuration from the environment.

    Returns:
        Populated Config instance

    Raises:
        InvalidArgument: If an environment variable holds an unusable value
    """
    try:
        return Config()
    except ValidationError as e:
        raise InvalidArgument(f"Invalid sslscan configuration: {e}") from e


def build_catalog(config: Config) -> CipherCatalog:
    """Return the catalog selected by config."""
    if config.cipher_catalog == "system":
        return SystemCipherCatalog()
    return default_catalog()
