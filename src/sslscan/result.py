"""Accumulated results of one SSL/TLS capability scan.

The scanner creates one ScanResult per target, calls add_cipher() after
every (version, cipher) handshake attempt, optionally attaches the server
certificate, and the report side then reads the views and predicates.

Provides:
- ScanResult: Validated cipher record store with query and predicate views
"""

from collections.abc import Iterator

import structlog
from cryptography.x509 import Certificate

from sslscan.catalog import CipherCatalog
from sslscan.core.config import build_catalog, load_config
from sslscan.errors import InvalidArgument
from sslscan.filters import ALL, normalize_version_filter
from sslscan.models import (
    SUPPORTED_VERSIONS,
    CipherRecord,
    CipherStatus,
    ProtocolVersion,
    coerce_status,
    coerce_version,
)

logger = structlog.get_logger()


class ScanResult:
    """Cipher handshake results for a single scan target.

    Records are kept in the order they were added. Adding a record equal to one already
    stored (all five fields) leaves the collection unchanged. Every view
    and predicate is recomputed from the current records on access.

    Not safe for concurrent mutation; parallel scan workers each own their
    own instance.
    """

    def __init__(
        self,
        catalog: CipherCatalog | None = None,
        strong_cipher_policy: str | None = None,
    ):
        """Create an empty result.

        Args:
            catalog: Cipher catalog used for validation and classification.
                Defaults to the one named by load_config().
            strong_cipher_policy: Cipher string selecting strong suites.
                Defaults to the configured policy.
        """
        if catalog is None or strong_cipher_policy is None:
            config = load_config()
            if catalog is None:
                catalog = build_catalog(config)
            if strong_cipher_policy is None:
                strong_cipher_policy = config.strong_cipher_policy

        self.catalog = catalog
        self.strong_cipher_policy = strong_cipher_policy
        self._supported_versions = SUPPORTED_VERSIONS
        self._cert: Certificate | None = None
        # dict keys give O(1) duplicate checks and keep first-seen order
        self._records: dict[CipherRecord, None] = {}

    def __repr__(self) -> str:
        return (
            f"<ScanResult records={len(self._records)} "
            f"cert={'yes' if self._cert is not None else 'no'}>"
        )

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CipherRecord]:
        return iter(tuple(self._records))

    @property
    def supported_versions(self) -> tuple[ProtocolVersion, ...]:
        return self._supported_versions

    @property
    def ciphers(self) -> list[CipherRecord]:
        """All records in insertion order."""
        return list(self._records)

    # Certificate

    @property
    def cert(self) -> Certificate | None:
        return self._cert

    @cert.setter
    def cert(self, value: Certificate | None) -> None:
        if value is not None and not isinstance(value, Certificate):
            raise InvalidArgument(
                f"Must be an X509 certificate, got {type(value).__name__}"
            )
        self._cert = value

    # Insertion

    def add_cipher(self, version, cipher: str, key_length: int, status) -> None:
        """Record the outcome of one cipher handshake.

        The weak flag is computed here: a cipher is weak unless the strong
        cipher policy selects it from the catalog for this version.

        Args:
            version: ProtocolVersion or its string value ("SSLv2", ...)
            cipher: Cipher suite name valid for version
            key_length: Key length in bits
            status: CipherStatus or "accepted" / "rejected"

        Raises:
            InvalidArgument: If any argument fails validation. Nothing is
                recorded in that case.
        """
        log = logger.bind(version=getattr(version, "value", version), cipher=cipher)

        try:
            record_version = self._validate_version(version)
            if not isinstance(cipher, str) or cipher not in self.catalog.ciphers(
                record_version
            ):
                raise InvalidArgument(
                    f"Must be a valid SSL cipher for {record_version.value}: {cipher!r}"
                )
            if (
                not isinstance(key_length, int)
                or isinstance(key_length, bool)
                or key_length < 0
            ):
                raise InvalidArgument(
                    f"Must supply a valid key length, got {key_length!r}"
                )
            record_status = coerce_status(status)
        except InvalidArgument as e:
            log.warning("cipher_rejected_invalid", error=str(e))
            raise

        strong = self.catalog.select(record_version, self.strong_cipher_policy)
        record = CipherRecord(
            version=record_version,
            cipher=cipher,
            key_length=key_length,
            weak=cipher not in strong,
            status=record_status,
        )

        if record in self._records:
            log.debug("duplicate_cipher_ignored")
            return

        self._records[record] = None
        log.debug(
            "cipher_recorded",
            key_length=key_length,
            weak=record.weak,
            status=record_status.value,
        )

    def _validate_version(self, version) -> ProtocolVersion:
        record_version = coerce_version(version)
        if record_version is None or record_version not in self._supported_versions:
            raise InvalidArgument(f"Must be a supported SSL version, got {version!r}")
        return record_version

    # Version partitions

    def _by_version(self, version: ProtocolVersion) -> list[CipherRecord]:
        return [r for r in self._records if r.version is version]

    @property
    def sslv2(self) -> list[CipherRecord]:
        return self._by_version(ProtocolVersion.SSLV2)

    @property
    def sslv3(self) -> list[CipherRecord]:
        return self._by_version(ProtocolVersion.SSLV3)

    @property
    def tlsv1(self) -> list[CipherRecord]:
        return self._by_version(ProtocolVersion.TLSV1)

    # Strength partitions

    @property
    def weak_ciphers(self) -> list[CipherRecord]:
        return [r for r in self._records if r.weak]

    @property
    def strong_ciphers(self) -> list[CipherRecord]:
        return [r for r in self._records if not r.weak]

    # Status queries

    def _with_status(self, status: CipherStatus, version_filter) -> Iterator[CipherRecord]:
        """Lazily filter a snapshot of the records by status and version.

        The filter is normalized before the iterator is returned, so an
        invalid filter fails at call time rather than on first iteration.
        """
        selector = normalize_version_filter(version_filter, self._supported_versions)
        snapshot = tuple(self._records)
        return (r for r in snapshot if r.status is status and selector.matches(r))

    def accepted(self, version_filter=ALL) -> list[CipherRecord]:
        """Records the target accepted, optionally limited by version.

        Args:
            version_filter: ALL (default), a single version, or a
                collection of versions. A collection with no supported
                versions in it behaves like ALL.

        Raises:
            InvalidArgument: If version_filter has an unusable shape
        """
        return list(self._with_status(CipherStatus.ACCEPTED, version_filter))

    def rejected(self, version_filter=ALL) -> list[CipherRecord]:
        """Records the target rejected. Same filter rules as accepted()."""
        return list(self._with_status(CipherStatus.REJECTED, version_filter))

    def each_accepted(self, version_filter=ALL) -> Iterator[CipherRecord]:
        return self._with_status(CipherStatus.ACCEPTED, version_filter)

    def each_rejected(self, version_filter=ALL) -> Iterator[CipherRecord]:
        return self._with_status(CipherStatus.REJECTED, version_filter)

    # Predicates

    def _supports(self, version: ProtocolVersion) -> bool:
        return any(self._with_status(CipherStatus.ACCEPTED, version))

    @property
    def supports_sslv2(self) -> bool:
        return self._supports(ProtocolVersion.SSLV2)

    @property
    def supports_sslv3(self) -> bool:
        return self._supports(ProtocolVersion.SSLV3)

    @property
    def supports_tlsv1(self) -> bool:
        return self._supports(ProtocolVersion.TLSV1)

    @property
    def supports_ssl(self) -> bool:
        return self.supports_sslv2 or self.supports_sslv3 or self.supports_tlsv1

    @property
    def supports_weak_ciphers(self) -> bool:
        """True if any weak cipher was recorded, accepted or not."""
        return any(r.weak for r in self._records)

    @property
    def standards_compliant(self) -> bool:
        """False if the target speaks SSL and offers SSLv2 or weak ciphers.

        A target that supports no protocol at all is compliant.
        """
        if self.supports_ssl:
            if self.supports_sslv2:
                return False
            if self.supports_weak_ciphers:
                return False
        return True
