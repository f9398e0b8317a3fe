"""Result accumulation and cipher classification for SSL/TLS capability scans.

Provides:
- ScanResult: Per-target store of cipher handshake results with query views
- CipherRecord / ProtocolVersion / CipherStatus: Record value types
- ALL / AllVersions / OneVersion / VersionSet: Version filters
- InvalidArgument: Raised for every validation failure
- assess: Structured findings for a populated ScanResult
"""

from .errors import InvalidArgument
from .filters import ALL, AllVersions, OneVersion, VersionSet, normalize_version_filter
from .models import CipherRecord, CipherStatus, ProtocolVersion
from .result import ScanResult
from .assessment import assess

__all__ = [
    "InvalidArgument",
    "ALL",
    "AllVersions",
    "OneVersion",
    "VersionSet",
    "normalize_version_filter",
    "CipherRecord",
    "CipherStatus",
    "ProtocolVersion",
    "ScanResult",
    "assess",
]
