"""OpenSSL-style cipher string evaluation.

Evaluates cipher strings such as ``"ALL:!aNULL:!eNULL:!LOW"`` against a
list of CipherSuite definitions, following the OpenSSL ``ciphers(1)``
rules:

- entries are separated by colons, commas or spaces
- ``!`` permanently removes the matching suites
- ``-`` removes them, but later entries may add them back
- ``+`` moves matching suites that are already selected to the end
- no prefix appends matching suites that are not selected or killed
- aliases joined with ``+`` inside an entry must all match
- ``@STRENGTH`` sorts the current selection by key bits, strongest first

Provides:
- STRONG_CIPHER_POLICY: Policy that selects the suites considered strong
- DEFAULT_POLICY: Expansion of the DEFAULT keyword
- evaluate_policy: Select suites for a cipher string
"""

import re
from collections.abc import Callable, Sequence

import structlog

from sslscan.catalog.suites import CipherSuite, Strength
from sslscan.errors import InvalidArgument
from sslscan.models import ProtocolVersion

logger = structlog.get_logger()

STRONG_CIPHER_POLICY = "ALL:!aNULL:!eNULL:!LOW:!EXP:!RC4+RSA:+HIGH:+MEDIUM"

DEFAULT_POLICY = "ALL:!EXPORT:!LOW:!aNULL:!eNULL:!SSLv2"

_ENTRY_SEPARATOR = re.compile(r"[:, ]+")


def _family(suite: CipherSuite) -> ProtocolVersion:
    """Oldest protocol revision that defines the suite."""
    if ProtocolVersion.SSLV3 in suite.protocols:
        return ProtocolVersion.SSLV3
    if ProtocolVersion.SSLV2 in suite.protocols:
        return ProtocolVersion.SSLV2
    return ProtocolVersion.TLSV1


def _enc(name: str, bits: int | None = None) -> Callable[[CipherSuite], bool]:
    if bits is None:
        return lambda s: s.enc == name
    return lambda s: s.enc == name and s.bits == bits


_ALIASES: dict[str, Callable[[CipherSuite], bool]] = {
    "ALL": lambda s: not s.null_encryption,
    "COMPLEMENTOFALL": lambda s: s.null_encryption,
    # strength classes
    "HIGH": lambda s: s.strength is Strength.HIGH,
    "MEDIUM": lambda s: s.strength is Strength.MEDIUM,
    "LOW": lambda s: s.strength is Strength.LOW,
    "EXP": lambda s: s.export,
    "EXPORT": lambda s: s.export,
    "EXPORT40": lambda s: s.export and s.bits == 40,
    "EXPORT56": lambda s: s.export and s.bits == 56,
    "NULL": lambda s: s.null_encryption,
    "eNULL": lambda s: s.null_encryption,
    "aNULL": lambda s: s.anonymous,
    # key exchange and authentication
    "kRSA": lambda s: s.kx == "RSA",
    "aRSA": lambda s: s.au == "RSA",
    "RSA": lambda s: s.kx == "RSA" and s.au == "RSA",
    "kEDH": lambda s: s.kx == "DH",
    "kDHE": lambda s: s.kx == "DH",
    "EDH": lambda s: s.kx == "DH" and not s.anonymous,
    "DHE": lambda s: s.kx == "DH" and not s.anonymous,
    "ADH": lambda s: s.kx == "DH" and s.anonymous,
    "kECDHE": lambda s: s.kx == "ECDH",
    "kEECDH": lambda s: s.kx == "ECDH",
    "ECDHE": lambda s: s.kx == "ECDH" and not s.anonymous,
    "EECDH": lambda s: s.kx == "ECDH" and not s.anonymous,
    "AECDH": lambda s: s.kx == "ECDH" and s.anonymous,
    "aDSS": lambda s: s.au == "DSS",
    "DSS": lambda s: s.au == "DSS",
    "aECDSA": lambda s: s.au == "ECDSA",
    "ECDSA": lambda s: s.au == "ECDSA",
    # bulk ciphers
    "RC4": _enc("RC4"),
    "RC2": _enc("RC2"),
    "DES": _enc("DES"),
    "3DES": _enc("3DES"),
    "IDEA": _enc("IDEA"),
    "SEED": _enc("SEED"),
    "AES": _enc("AES"),
    "AES128": _enc("AES", 128),
    "AES256": _enc("AES", 256),
    "CAMELLIA": _enc("CAMELLIA"),
    "CAMELLIA128": _enc("CAMELLIA", 128),
    "CAMELLIA256": _enc("CAMELLIA", 256),
    # digests
    "MD5": lambda s: s.mac == "MD5",
    "SHA1": lambda s: s.mac == "SHA1",
    "SHA": lambda s: s.mac == "SHA1",
    # protocol families
    "SSLv2": lambda s: _family(s) is ProtocolVersion.SSLV2,
    "SSLv3": lambda s: _family(s) is ProtocolVersion.SSLV3,
    "TLSv1": lambda s: _family(s) is ProtocolVersion.TLSV1,
}


def _matcher(
    expression: str, suites: Sequence[CipherSuite]
) -> Callable[[CipherSuite], bool]:
    """Build a predicate for one entry such as ``RC4+RSA``."""
    names = {s.name for s in suites}
    predicates = []
    for alias in expression.split("+"):
        if alias in _ALIASES:
            predicates.append(_ALIASES[alias])
        elif alias in names:
            predicates.append(lambda s, name=alias: s.name == name)
        else:
            logger.debug("unknown_cipher_alias", alias=alias, expression=expression)
            return lambda s: False
    return lambda s: all(predicate(s) for predicate in predicates)


def _apply(
    policy: str,
    suites: Sequence[CipherSuite],
    selected: list[CipherSuite],
    killed: set[str],
) -> None:
    for entry in _ENTRY_SEPARATOR.split(policy.strip()):
        if not entry:
            continue

        if entry.startswith("@"):
            if entry != "@STRENGTH":
                raise InvalidArgument(f"Unknown cipher string command: {entry}")
            selected.sort(key=lambda s: s.bits, reverse=True)
            continue

        op, expression = "", entry
        if entry[0] in "!-+":
            op, expression = entry[0], entry[1:]

        if expression == "DEFAULT" and not op:
            _apply(DEFAULT_POLICY, suites, selected, killed)
            continue

        matches = _matcher(expression, suites)

        if op == "!":
            killed.update(s.name for s in suites if matches(s))
            selected[:] = [s for s in selected if s.name not in killed]
        elif op == "-":
            selected[:] = [s for s in selected if not matches(s)]
        elif op == "+":
            selected[:] = [s for s in selected if not matches(s)] + [
                s for s in selected if matches(s)
            ]
        else:
            for suite in suites:
                if matches(suite) and suite.name not in killed and suite not in selected:
                    selected.append(suite)


def evaluate_policy(
    policy: str, suites: Sequence[CipherSuite]
) -> tuple[CipherSuite, ...]:
    """Select suites for an OpenSSL cipher string.

    Args:
        policy: Cipher string (e.g. STRONG_CIPHER_POLICY)
        suites: Candidate suites, in preference order

    Returns:
        Selected suites in the order the cipher string leaves them

    Raises:
        InvalidArgument: If the string contains an unknown @ command

    Example:
        >>> from sslscan.catalog.suites import CIPHER_SUITES
        >>> names = [s.name for s in evaluate_policy("RC4+RSA", CIPHER_SUITES)]
        >>> "RC4-SHA" in names and "ECDHE-RSA-RC4-SHA" not in names
        True
    """
    selected: list[CipherSuite] = []
    killed: set[str] = set()
    _apply(policy, suites, selected, killed)
    return tuple(selected)
