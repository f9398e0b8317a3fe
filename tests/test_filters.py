"""Tests for version filter normalization.

Tests cover:
- Each accepted input shape and the variant it maps to
- Dropping unsupported members and the fall back to ALL
- Rejection of unusable inputs
"""

from collections import deque

import pytest

from sslscan.errors import InvalidArgument
from sslscan.filters import ALL, AllVersions, OneVersion, VersionSet, normalize_version_filter
from sslscan.models import SUPPORTED_VERSIONS, CipherRecord, CipherStatus, ProtocolVersion


def _record(version):
    return CipherRecord(
        version=version,
        cipher="DES-CBC3-SHA",
        key_length=168,
        weak=False,
        status=CipherStatus.ACCEPTED,
    )


def test_all_marker():
    """Test that ALL and "all" both normalize to AllVersions."""
    assert normalize_version_filter(ALL, SUPPORTED_VERSIONS) is ALL
    assert normalize_version_filter("all", SUPPORTED_VERSIONS) == AllVersions()


def test_single_version():
    """Test that an enum member or its value becomes OneVersion."""
    assert normalize_version_filter(ProtocolVersion.SSLV3, SUPPORTED_VERSIONS) == OneVersion(
        ProtocolVersion.SSLV3
    )
    assert normalize_version_filter("TLSv1", SUPPORTED_VERSIONS) == OneVersion(
        ProtocolVersion.TLSV1
    )


def test_already_normalized_filter_passes_through():
    """Test that variants are returned unchanged."""
    variant = VersionSet(frozenset({ProtocolVersion.SSLV2}))

    assert normalize_version_filter(variant, SUPPORTED_VERSIONS) is variant


@pytest.mark.parametrize("shape", [list, tuple, set, frozenset])
def test_collection_shapes(shape):
    """Test that every collection type becomes a VersionSet."""
    value = shape(["SSLv2", ProtocolVersion.TLSV1])

    assert normalize_version_filter(value, SUPPORTED_VERSIONS) == VersionSet(
        frozenset({ProtocolVersion.SSLV2, ProtocolVersion.TLSV1})
    )


def test_collection_drops_unknown_members():
    """Test that unknown members are dropped while known ones are kept."""
    assert normalize_version_filter(["SSLv2", "Bogus", 7], SUPPORTED_VERSIONS) == VersionSet(
        frozenset({ProtocolVersion.SSLV2})
    )


def test_collection_drops_versions_outside_supported():
    """Test intersection with the supported versions of the result."""
    supported = (ProtocolVersion.TLSV1,)

    assert normalize_version_filter(["SSLv3", "TLSv1"], supported) == VersionSet(
        frozenset({ProtocolVersion.TLSV1})
    )
    assert normalize_version_filter(["SSLv3"], supported) is ALL


@pytest.mark.parametrize("value", [[], ["Bogus"], ("all",), {None}])
def test_empty_intersection_falls_back_to_all(value):
    """Test that a collection with nothing supported means no restriction."""
    assert normalize_version_filter(value, SUPPORTED_VERSIONS) is ALL


@pytest.mark.parametrize("value", ["Bogus", "tlsv1", "", None, 1, 2.0, {"TLSv1": True}, b"TLSv1"])
def test_unusable_filters_raise(value):
    """Test that unknown strings and unsupported types raise InvalidArgument."""
    with pytest.raises(InvalidArgument):
        normalize_version_filter(value, SUPPORTED_VERSIONS)


def test_variant_matching():
    """Test the matches() predicate of each variant."""
    sslv2 = _record(ProtocolVersion.SSLV2)
    tlsv1 = _record(ProtocolVersion.TLSV1)

    assert ALL.matches(sslv2) and ALL.matches(tlsv1)
    assert OneVersion(ProtocolVersion.SSLV2).matches(sslv2)
    assert not OneVersion(ProtocolVersion.SSLV2).matches(tlsv1)
    both = VersionSet(frozenset({ProtocolVersion.SSLV2, ProtocolVersion.TLSV1}))
    assert both.matches(sslv2) and both.matches(tlsv1)
    assert not VersionSet(frozenset({ProtocolVersion.SSLV3})).matches(tlsv1)


def test_other_sequences_and_sets():
    """Test that any sequence or set type is treated as a collection."""
    expected = VersionSet(frozenset({ProtocolVersion.SSLV3, ProtocolVersion.TLSV1}))

    assert normalize_version_filter(deque(["SSLv3", "TLSv1"]), SUPPORTED_VERSIONS) == expected
    assert normalize_version_filter({"SSLv3": 1, "TLSv1": 2}.keys(), SUPPORTED_VERSIONS) == expected
    assert normalize_version_filter(range(3), SUPPORTED_VERSIONS) is ALL
