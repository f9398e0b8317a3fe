"""CVSS v3.1 severity calculation for SSL/TLS findings.

Provides:
- calculate_severity: CVSS v3.1 score and severity label from characteristics
- severity_to_cvss_defaults: Default CVSS characteristics per finding kind
"""

from typing import Any

import structlog
from cvss import CVSS3
from cvss.exceptions import CVSSError

logger = structlog.get_logger()

# Friendly names to CVSS metric codes
_METRIC_MAP = {
    "attack_vector": "AV",
    "attack_complexity": "AC",
    "privileges_required": "PR",
    "user_interaction": "UI",
    "scope": "S",
    "confidentiality": "C",
    "integrity": "I",
    "availability": "A",
}


def calculate_severity(characteristics: dict[str, Any]) -> tuple[float, str]:
    """Calculate CVSS v3.1 score and severity label from characteristics.

    Args:
        characteristics: Dictionary of CVSS metrics:
            - attack_vector: N (network), A (adjacent), L (local), P (physical)
            - attack_complexity: L (low), H (high)
            - privileges_required: N (none), L (low), H (high)
            - user_interaction: N (none), R (required)
            - scope: U (unchanged), C (changed)
            - confidentiality: N (none), L (low), H (high)
            - integrity: N (none), L (low), H (high)
            - availability: N (none), L (low), H (high)

    Returns:
        Tuple of (score, label) where label is one of
        "info" | "low" | "medium" | "high" | "critical". Incomplete or
        malformed characteristics yield (0.0, "info").

    Example:
        >>> score, label = calculate_severity(severity_to_cvss_defaults("sslv2_supported"))
        >>> label
        'medium'
    """
    vector_parts = ["CVSS:3.1"]
    for key, code in _METRIC_MAP.items():
        value = characteristics.get(key)
        if value:
            vector_parts.append(f"{code}:{value}")
    vector = "/".join(vector_parts)

    try:
        score = float(CVSS3(vector).base_score)
    except CVSSError as e:
        logger.warning("cvss_vector_invalid", vector=vector, error=str(e))
        return (0.0, "info")

    if score == 0.0:
        label = "info"
    elif score < 4.0:
        label = "low"
    elif score < 7.0:
        label = "medium"
    elif score < 9.0:
        label = "high"
    else:
        label = "critical"

    return (score, label)


def severity_to_cvss_defaults(kind: str) -> dict[str, str]:
    """Return default CVSS characteristics for a finding kind.

    Supported kinds:
        - sslv2_supported: SSLv2 accepted (DROWN-class exposure)
        - sslv3_supported: SSLv3 accepted (POODLE-class exposure)
        - weak_ciphers_accepted: Weak suites negotiated by the target
        - weak_ciphers_offered: Weak suites tested but none accepted
        - missing_certificate: Protocol supported but no certificate retrieved

    Unknown kinds get a generic informational vector.
    """
    defaults = {
        "sslv2_supported": {
            "attack_vector": "N",
            "attack_complexity": "H",
            "privileges_required": "N",
            "user_interaction": "N",
            "scope": "U",
            "confidentiality": "H",
            "integrity": "N",
            "availability": "N",
        },
        "sslv3_supported": {
            "attack_vector": "N",
            "attack_complexity": "H",
            "privileges_required": "N",
            "user_interaction": "R",
            "scope": "U",
            "confidentiality": "L",
            "integrity": "N",
            "availability": "N",
        },
        "weak_ciphers_accepted": {
            "attack_vector": "N",
            "attack_complexity": "H",
            "privileges_required": "N",
            "user_interaction": "N",
            "scope": "U",
            "confidentiality": "H",
            "integrity": "L",
            "availability": "N",
        },
        "weak_ciphers_offered": {
            "attack_vector": "N",
            "attack_complexity": "H",
            "privileges_required": "N",
            "user_interaction": "R",
            "scope": "U",
            "confidentiality": "L",
            "integrity": "N",
            "availability": "N",
        },
        "missing_certificate": {
            "attack_vector": "N",
            "attack_complexity": "H",
            "privileges_required": "N",
            "user_interaction": "R",
            "scope": "U",
            "confidentiality": "N",
            "integrity": "N",
            "availability": "N",
        },
    }

    return defaults.get(kind, {
        "attack_vector": "N",
        "attack_complexity": "H",
        "privileges_required": "N",
        "user_interaction": "R",
        "scope": "U",
        "confidentiality": "N",
        "integrity": "N",
        "availability": "N",
    })
