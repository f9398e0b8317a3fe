"""Version filters for the accepted/rejected queries.

Callers may pass the ALL marker, a single protocol version, or a
collection of versions. Each shape is normalized once on entry into one
of three tagged variants so the query code never inspects raw input.

Provides:
- AllVersions / OneVersion / VersionSet: Tagged filter variants
- ALL: The AllVersions singleton
- normalize_version_filter: Turn caller input into a filter variant
"""

from collections.abc import Iterable, Sequence, Set
from dataclasses import dataclass
from typing import Any, Union

from sslscan.errors import InvalidArgument
from sslscan.models import CipherRecord, ProtocolVersion, coerce_version


@dataclass(frozen=True)
class AllVersions:
    """No version restriction."""

    def matches(self, record: CipherRecord) -> bool:
        return True


@dataclass(frozen=True)
class OneVersion:
    """Restrict to a single protocol version."""

    version: ProtocolVersion

    def matches(self, record: CipherRecord) -> bool:
        return record.version is self.version


@dataclass(frozen=True)
class VersionSet:
    """Restrict to any of several protocol versions (never empty)."""

    versions: frozenset[ProtocolVersion]

    def matches(self, record: CipherRecord) -> bool:
        return record.version in self.versions


VersionFilter = Union[AllVersions, OneVersion, VersionSet]

ALL = AllVersions()


def normalize_version_filter(
    value: Any, supported: Iterable[ProtocolVersion]
) -> VersionFilter:
    """Normalize a caller-supplied version filter.

    Accepted shapes:
    - ALL, an AllVersions instance, or the string "all"
    - a ProtocolVersion, or its string value ("SSLv2", "SSLv3", "TLSv1")
    - any sequence or set of versions (list, tuple, set, deque, dict keys, ...)

    For collections, members that are not supported versions are dropped.
    If nothing survives, the filter falls back to ALL rather than matching
    nothing, so ``accepted(["Bogus"])`` returns the same records as
    ``accepted(ALL)``.

    Args:
        value: Filter as passed to accepted()/rejected()
        supported: Versions the owning result understands

    Returns:
        AllVersions, OneVersion or VersionSet

    Raises:
        InvalidArgument: For an unknown version string or an unsupported
            filter type
    """
    if isinstance(value, (AllVersions, OneVersion, VersionSet)):
        return value

    if isinstance(value, str):
        if value == "all":
            return ALL
        version = coerce_version(value)
        if version is None:
            raise InvalidArgument(f"Invalid SSL version supplied: {value}")
        return OneVersion(version)

    if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
        allowed = set(supported)
        versions = frozenset(
            version
            for version in (coerce_version(item) for item in value)
            if version is not None and version in allowed
        )
        if not versions:
            return ALL
        return VersionSet(versions)

    raise InvalidArgument(
        f"Was expecting a version, 'all' or a collection of versions, "
        f"got {type(value).__name__}"
    )
