"""Catalog backed by the built-in suite table."""

from collections.abc import Sequence

import structlog

from sslscan.catalog.policy import evaluate_policy
from sslscan.catalog.suites import CIPHER_SUITES, CipherSuite
from sslscan.models import ProtocolVersion

logger = structlog.get_logger()


class StaticCipherCatalog:
    """Cipher catalog over a fixed list of suite definitions.

    Independent of the OpenSSL build the interpreter links against, so
    SSLv2 and export-grade suites stay known even where no local library
    could negotiate them. Policy selections are computed once per
    (version, policy) pair.
    """

    def __init__(self, suites: Sequence[CipherSuite] = CIPHER_SUITES):
        self.suites = tuple(suites)
        self._selections: dict[tuple[ProtocolVersion, str], frozenset[str]] = {}

    def suites_for(self, version: ProtocolVersion) -> tuple[CipherSuite, ...]:
        return tuple(s for s in self.suites if version in s.protocols)

    def ciphers(self, version: ProtocolVersion) -> frozenset[str]:
        return frozenset(s.name for s in self.suites_for(version))

    def select(self, version: ProtocolVersion, policy: str) -> frozenset[str]:
        key = (version, policy)
        if key not in self._selections:
            selected = evaluate_policy(policy, self.suites_for(version))
            self._selections[key] = frozenset(s.name for s in selected)
            logger.debug(
                "cipher_policy_evaluated",
                version=version.value,
                policy=policy,
                selected=len(selected),
            )
        return self._selections[key]
