"""Protocol for cipher catalogs.

A catalog answers two questions for a protocol version: which cipher
suite names are valid at all, and which of them a cipher string selects.
ScanResult uses the first to validate insertions and the second to
classify them as weak or strong.

Provides:
- CipherCatalog: Protocol every catalog implements
"""

from typing import Protocol, runtime_checkable

from sslscan.models import ProtocolVersion


@runtime_checkable
class CipherCatalog(Protocol):
    """Protocol for cipher catalogs."""

    def ciphers(self, version: ProtocolVersion) -> frozenset[str]:
        """Return every cipher suite name valid for version."""
        ...

    def select(self, version: ProtocolVersion, policy: str) -> frozenset[str]:
        """Return the names policy selects from the version's catalog."""
        ...
