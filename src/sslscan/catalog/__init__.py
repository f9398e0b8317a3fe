"""Protocol-capability catalogs for cipher validation and classification.

Provides:
- CipherCatalog: Protocol for catalogs
- StaticCipherCatalog: Default catalog over the built-in suite table
- SystemCipherCatalog: Catalog backed by the local OpenSSL build
- default_catalog: Shared static catalog, so selections are cached process-wide
- STRONG_CIPHER_POLICY: Cipher string selecting the strong suites
- evaluate_policy: OpenSSL cipher string evaluation
"""

from functools import lru_cache

from .base import CipherCatalog
from .policy import DEFAULT_POLICY, STRONG_CIPHER_POLICY, evaluate_policy
from .static import StaticCipherCatalog
from .suites import CIPHER_SUITES, CipherSuite, Strength
from .system import SystemCipherCatalog


@lru_cache(maxsize=None)
def default_catalog() -> StaticCipherCatalog:
    """Shared StaticCipherCatalog over the built-in suite table."""
    return StaticCipherCatalog()


__all__ = [
    "CipherCatalog",
    "StaticCipherCatalog",
    "SystemCipherCatalog",
    "CipherSuite",
    "Strength",
    "CIPHER_SUITES",
    "DEFAULT_POLICY",
    "STRONG_CIPHER_POLICY",
    "default_catalog",
    "evaluate_policy",
]
