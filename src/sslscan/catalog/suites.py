"""Static cipher suite definitions.

Attribute names follow the OpenSSL ``ciphers -v`` columns (Kx, Au, Enc,
Mac) so that cipher-string aliases can be evaluated against them.

Provides:
- Strength: Enum for the OpenSSL strength classes
- CipherSuite: Definition of one named suite
- CIPHER_SUITES: Every suite the static catalog knows, in preference order
"""

from dataclasses import dataclass
from enum import Enum

from sslscan.models import ProtocolVersion


class Strength(str, Enum):
    """OpenSSL strength class of a suite."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    EXPORT = "export"
    NONE = "none"


@dataclass(frozen=True)
class CipherSuite:
    """A named cipher suite.

    Attributes:
        name: OpenSSL suite name (e.g. "AES256-SHA")
        protocols: Versions the suite can be offered under
        kx: Key exchange (RSA, DH, ECDH)
        au: Authentication (RSA, DSS, ECDSA, None)
        enc: Bulk cipher (AES, 3DES, RC4, ..., None)
        bits: Effective encryption key bits
        mac: Message digest (MD5, SHA1)
        strength: OpenSSL strength class
    """

    name: str
    protocols: frozenset[ProtocolVersion]
    kx: str
    au: str
    enc: str
    bits: int
    mac: str
    strength: Strength

    @property
    def export(self) -> bool:
        return self.strength is Strength.EXPORT

    @property
    def null_encryption(self) -> bool:
        return self.enc == "None"

    @property
    def anonymous(self) -> bool:
        return self.au == "None"


# A v2-compatible hello can carry SSL 3.0 suites, so that family is valid
# under SSLv2 as well.
_V2_ONLY = frozenset({ProtocolVersion.SSLV2})
_SSL3 = frozenset(
    {ProtocolVersion.SSLV2, ProtocolVersion.SSLV3, ProtocolVersion.TLSV1}
)
_TLS1 = frozenset({ProtocolVersion.TLSV1})

_H = Strength.HIGH
_M = Strength.MEDIUM
_L = Strength.LOW
_E = Strength.EXPORT
_N = Strength.NONE


def _suite(name, protocols, kx, au, enc, bits, mac, strength) -> CipherSuite:
    return CipherSuite(name, protocols, kx, au, enc, bits, mac, strength)


CIPHER_SUITES: tuple[CipherSuite, ...] = (
    # TLS 1.0 additions
    _suite("ECDHE-RSA-AES256-SHA", _TLS1, "ECDH", "RSA", "AES", 256, "SHA1", _H),
    _suite("ECDHE-ECDSA-AES256-SHA", _TLS1, "ECDH", "ECDSA", "AES", 256, "SHA1", _H),
    _suite("DHE-RSA-AES256-SHA", _TLS1, "DH", "RSA", "AES", 256, "SHA1", _H),
    _suite("DHE-DSS-AES256-SHA", _TLS1, "DH", "DSS", "AES", 256, "SHA1", _H),
    _suite("DHE-RSA-CAMELLIA256-SHA", _TLS1, "DH", "RSA", "CAMELLIA", 256, "SHA1", _H),
    _suite("AECDH-AES256-SHA", _TLS1, "ECDH", "None", "AES", 256, "SHA1", _H),
    _suite("ADH-AES256-SHA", _TLS1, "DH", "None", "AES", 256, "SHA1", _H),
    _suite("AES256-SHA", _TLS1, "RSA", "RSA", "AES", 256, "SHA1", _H),
    _suite("CAMELLIA256-SHA", _TLS1, "RSA", "RSA", "CAMELLIA", 256, "SHA1", _H),
    _suite("ECDHE-RSA-DES-CBC3-SHA", _TLS1, "ECDH", "RSA", "3DES", 168, "SHA1", _H),
    _suite("ECDHE-RSA-AES128-SHA", _TLS1, "ECDH", "RSA", "AES", 128, "SHA1", _H),
    _suite("DHE-RSA-AES128-SHA", _TLS1, "DH", "RSA", "AES", 128, "SHA1", _H),
    _suite("DHE-DSS-AES128-SHA", _TLS1, "DH", "DSS", "AES", 128, "SHA1", _H),
    _suite("ADH-AES128-SHA", _TLS1, "DH", "None", "AES", 128, "SHA1", _H),
    _suite("AES128-SHA", _TLS1, "RSA", "RSA", "AES", 128, "SHA1", _H),
    _suite("CAMELLIA128-SHA", _TLS1, "RSA", "RSA", "CAMELLIA", 128, "SHA1", _H),
    _suite("DHE-RSA-SEED-SHA", _TLS1, "DH", "RSA", "SEED", 128, "SHA1", _M),
    _suite("SEED-SHA", _TLS1, "RSA", "RSA", "SEED", 128, "SHA1", _M),
    _suite("ECDHE-RSA-RC4-SHA", _TLS1, "ECDH", "RSA", "RC4", 128, "SHA1", _M),
    _suite("ECDHE-ECDSA-RC4-SHA", _TLS1, "ECDH", "ECDSA", "RC4", 128, "SHA1", _M),
    _suite("AECDH-RC4-SHA", _TLS1, "ECDH", "None", "RC4", 128, "SHA1", _M),
    _suite("EXP1024-DES-CBC-SHA", _TLS1, "RSA", "RSA", "DES", 56, "SHA1", _E),
    _suite("EXP1024-RC4-SHA", _TLS1, "RSA", "RSA", "RC4", 56, "SHA1", _E),
    _suite("ECDHE-RSA-NULL-SHA", _TLS1, "ECDH", "RSA", "None", 0, "SHA1", _N),
    # SSL 3.0 family
    _suite("EDH-RSA-DES-CBC3-SHA", _SSL3, "DH", "RSA", "3DES", 168, "SHA1", _H),
    _suite("EDH-DSS-DES-CBC3-SHA", _SSL3, "DH", "DSS", "3DES", 168, "SHA1", _H),
    _suite("ADH-DES-CBC3-SHA", _SSL3, "DH", "None", "3DES", 168, "SHA1", _H),
    _suite("DES-CBC3-SHA", _SSL3, "RSA", "RSA", "3DES", 168, "SHA1", _H),
    _suite("IDEA-CBC-SHA", _SSL3, "RSA", "RSA", "IDEA", 128, "SHA1", _M),
    _suite("RC4-SHA", _SSL3, "RSA", "RSA", "RC4", 128, "SHA1", _M),
    _suite("RC4-MD5", _SSL3, "RSA", "RSA", "RC4", 128, "MD5", _M),
    _suite("ADH-RC4-MD5", _SSL3, "DH", "None", "RC4", 128, "MD5", _M),
    _suite("EDH-RSA-DES-CBC-SHA", _SSL3, "DH", "RSA", "DES", 56, "SHA1", _L),
    _suite("EDH-DSS-DES-CBC-SHA", _SSL3, "DH", "DSS", "DES", 56, "SHA1", _L),
    _suite("ADH-DES-CBC-SHA", _SSL3, "DH", "None", "DES", 56, "SHA1", _L),
    _suite("DES-CBC-SHA", _SSL3, "RSA", "RSA", "DES", 56, "SHA1", _L),
    _suite("EXP-EDH-RSA-DES-CBC-SHA", _SSL3, "DH", "RSA", "DES", 40, "SHA1", _E),
    _suite("EXP-EDH-DSS-DES-CBC-SHA", _SSL3, "DH", "DSS", "DES", 40, "SHA1", _E),
    _suite("EXP-ADH-DES-CBC-SHA", _SSL3, "DH", "None", "DES", 40, "SHA1", _E),
    _suite("EXP-DES-CBC-SHA", _SSL3, "RSA", "RSA", "DES", 40, "SHA1", _E),
    _suite("EXP-RC2-CBC-MD5", _SSL3, "RSA", "RSA", "RC2", 40, "MD5", _E),
    _suite("EXP-ADH-RC4-MD5", _SSL3, "DH", "None", "RC4", 40, "MD5", _E),
    _suite("EXP-RC4-MD5", _SSL3, "RSA", "RSA", "RC4", 40, "MD5", _E),
    _suite("NULL-SHA", _SSL3, "RSA", "RSA", "None", 0, "SHA1", _N),
    _suite("NULL-MD5", _SSL3, "RSA", "RSA", "None", 0, "MD5", _N),
    # SSLv2 native cipher kinds
    _suite("DES-CBC3-MD5", _V2_ONLY, "RSA", "RSA", "3DES", 168, "MD5", _H),
    _suite("IDEA-CBC-MD5", _V2_ONLY, "RSA", "RSA", "IDEA", 128, "MD5", _M),
    _suite("RC2-CBC-MD5", _V2_ONLY, "RSA", "RSA", "RC2", 128, "MD5", _M),
    _suite("DES-CBC-MD5", _V2_ONLY, "RSA", "RSA", "DES", 56, "MD5", _L),
)
