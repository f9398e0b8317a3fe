"""Value types for SSL/TLS scan results.

Provides:
- ProtocolVersion: Enum of the protocol revisions the model understands
- CipherStatus: Enum for the outcome of a single cipher handshake
- CipherRecord: Immutable observation of one (version, cipher) handshake
- coerce_version / coerce_status: Normalize caller input to the enums
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sslscan.errors import InvalidArgument


class ProtocolVersion(str, Enum):
    """Transport security protocol revision being tested."""

    SSLV2 = "SSLv2"
    SSLV3 = "SSLv3"
    TLSV1 = "TLSv1"


class CipherStatus(str, Enum):
    """Whether the target negotiated a cipher for a version.

    ACCEPTED: Handshake completed with this cipher
    REJECTED: Target refused the cipher
    """

    ACCEPTED = "accepted"
    REJECTED = "rejected"


SUPPORTED_VERSIONS: tuple[ProtocolVersion, ...] = (
    ProtocolVersion.SSLV2,
    ProtocolVersion.SSLV3,
    ProtocolVersion.TLSV1,
)


@dataclass(frozen=True)
class CipherRecord:
    """One cipher handshake result.

    Records compare and hash on all five fields, which is what makes a
    repeated observation collapse into the existing entry.

    Attributes:
        version: Protocol version the cipher was offered under
        cipher: Cipher suite name, meaningful only relative to version
        key_length: Key length in bits
        weak: True unless the strong-cipher policy selects this cipher
        status: Handshake outcome
    """

    version: ProtocolVersion
    cipher: str
    key_length: int
    weak: bool
    status: CipherStatus

    @property
    def accepted(self) -> bool:
        return self.status is CipherStatus.ACCEPTED


def coerce_version(value: Any) -> ProtocolVersion | None:
    """Map an enum member or its string value to a ProtocolVersion.

    Returns None for anything that does not name a version.
    """
    if isinstance(value, ProtocolVersion):
        return value
    if isinstance(value, str):
        try:
            return ProtocolVersion(value)
        except ValueError:
            return None
    return None


def coerce_status(value: Any) -> CipherStatus:
    """Map an enum member or its string value to a CipherStatus.

    Raises:
        InvalidArgument: If value is not "accepted" or "rejected"
    """
    if isinstance(value, CipherStatus):
        return value
    if isinstance(value, str):
        try:
            return CipherStatus(value)
        except ValueError:
            pass
    raise InvalidArgument(
        f"status must be either 'accepted' or 'rejected', got {value!r}"
    )
