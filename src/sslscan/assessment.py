"""Derive structured findings from a populated ScanResult.

Findings are data only; turning them into text is left to the report
renderer.

Provides:
- assess: Produce the findings for one scan result
"""

import structlog

from sslscan.core.output import Finding, SourceType
from sslscan.core.severity import calculate_severity, severity_to_cvss_defaults
from sslscan.models import CipherRecord, ProtocolVersion
from sslscan.result import ScanResult

logger = structlog.get_logger()


def _record_data(record: CipherRecord) -> dict:
    return {
        "version": record.version.value,
        "cipher": record.cipher,
        "key_length": record.key_length,
        "status": record.status.value,
    }


def _finding(kind: str, title: str, description: str) -> Finding:
    score, label = calculate_severity(severity_to_cvss_defaults(kind))
    return Finding(
        kind=kind,
        title=title,
        severity=label,
        cvss_score=score,
        description=description,
    )


def assess(result: ScanResult) -> list[Finding]:
    """Produce findings for a scan result.

    Rules:
    - sslv2_supported: the target accepted at least one SSLv2 cipher
    - sslv3_supported: the target accepted at least one SSLv3 cipher
    - weak_ciphers_accepted: the target accepted at least one weak cipher
    - weak_ciphers_offered: weak ciphers were recorded but none accepted
    - missing_certificate: a protocol is supported but no certificate
      was attached

    Args:
        result: Populated scan result

    Returns:
        Findings in the order listed above, possibly empty
    """
    findings: list[Finding] = []

    for version, kind in (
        (ProtocolVersion.SSLV2, "sslv2_supported"),
        (ProtocolVersion.SSLV3, "sslv3_supported"),
    ):
        accepted = result.accepted(version)
        if not accepted:
            continue
        finding = _finding(
            kind,
            f"{version.value} protocol supported",
            f"The target completed {version.value} handshakes with "
            f"{len(accepted)} cipher suite(s). {version.value} is obsolete "
            f"and has known protocol-level attacks.",
        )
        for record in accepted:
            finding.add_evidence(SourceType.HANDSHAKE, _record_data(record))
        findings.append(finding)

    weak = result.weak_ciphers
    weak_accepted = [r for r in weak if r.accepted]
    if weak_accepted:
        finding = _finding(
            "weak_ciphers_accepted",
            "Weak cipher suites accepted",
            f"The target negotiated {len(weak_accepted)} cipher suite(s) "
            f"outside the strong cipher policy.",
        )
        for record in weak_accepted:
            finding.add_evidence(SourceType.POLICY, {**_record_data(record), "weak": True})
        findings.append(finding)
    elif weak:
        finding = _finding(
            "weak_ciphers_offered",
            "Weak cipher suites tested",
            f"{len(weak)} weak cipher suite(s) were tested. The target "
            f"rejected all of them, but the result is not standards "
            f"compliant while they remain in the inventory.",
        )
        for record in weak:
            finding.add_evidence(SourceType.POLICY, {**_record_data(record), "weak": True})
        findings.append(finding)

    if result.supports_ssl and result.cert is None:
        findings.append(
            _finding(
                "missing_certificate",
                "No server certificate recorded",
                "The target supports SSL/TLS but no certificate was "
                "retrieved during the scan.",
            )
        )

    logger.debug(
        "scan_result_assessed",
        findings=[f.kind for f in findings],
        standards_compliant=result.standards_compliant,
    )
    return findings
