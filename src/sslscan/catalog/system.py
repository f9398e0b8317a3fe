"""Catalog backed by the interpreter's linked OpenSSL.

Uses the standard library ``ssl`` module, the same way the handshake
side of a scanner builds its contexts. Current OpenSSL builds cannot
construct SSLv2 or SSLv3 contexts, so only TLSv1 yields ciphers here.
"""

import ssl

import structlog

from sslscan.models import ProtocolVersion

logger = structlog.get_logger()

_TLS_VERSIONS = {
    ProtocolVersion.TLSV1: "TLSv1",
}

# get_ciphers() reports the protocol that introduced each suite and lists
# TLS 1.2/1.3 suites regardless of the pinned version
_SUITE_PROTOCOLS = {
    ProtocolVersion.TLSV1: frozenset({"SSLv3", "TLSv1", "TLSv1.0"}),
}


class SystemCipherCatalog:
    """Cipher catalog that asks the local OpenSSL library.

    Policy selections are computed once per (version, policy) pair.
    """

    def __init__(self):
        self._selections: dict[tuple[ProtocolVersion, str], frozenset[str]] = {}

    def _context(self, version: ProtocolVersion) -> ssl.SSLContext | None:
        tls_version = getattr(ssl.TLSVersion, _TLS_VERSIONS.get(version, ""), None)
        if tls_version is None:
            logger.warning("protocol_unavailable", version=version.value)
            return None

        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        context.minimum_version = tls_version
        context.maximum_version = tls_version
        return context

    def _names(self, context: ssl.SSLContext, version: ProtocolVersion) -> frozenset[str]:
        protocols = _SUITE_PROTOCOLS.get(version, frozenset())
        return frozenset(
            cipher["name"]
            for cipher in context.get_ciphers()
            if cipher.get("protocol") in protocols
        )

    def ciphers(self, version: ProtocolVersion) -> frozenset[str]:
        context = self._context(version)
        if context is None:
            return frozenset()
        context.set_ciphers("ALL:COMPLEMENTOFALL")
        return self._names(context, version)

    def select(self, version: ProtocolVersion, policy: str) -> frozenset[str]:
        key = (version, policy)
        if key in self._selections:
            return self._selections[key]

        context = self._context(version)
        if context is None:
            selected = frozenset()
        else:
            try:
                context.set_ciphers(policy)
                selected = self._names(context, version)
            except ssl.SSLError:
                # OpenSSL refuses strings that select nothing
                logger.debug("cipher_policy_empty", version=version.value, policy=policy)
                selected = frozenset()

        self._selections[key] = selected
        logger.debug(
            "cipher_policy_evaluated",
            version=version.value,
            policy=policy,
            selected=len(selected),
        )
        return selected
