"""Structured findings with source attribution.

Every piece of evidence is tagged with where it came from, so a report
can tell an observed handshake outcome apart from a conclusion drawn by
the classification policy.

Provides:
- SourceType: Enum for evidence source classification
- Evidence: Single piece of evidence with source attribution
- Finding: Security finding with source-attributed evidence
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SourceType(str, Enum):
    """Source of a piece of evidence.

    HANDSHAKE: Observed outcome of a protocol/cipher handshake
    POLICY: Result of applying the cipher classification policy
    """

    HANDSHAKE = "handshake"
    POLICY = "policy"


class Evidence(BaseModel):
    """Single piece of evidence with source attribution.

    Attributes:
        source: Where this evidence came from
        timestamp: When the evidence was collected
        data: Key-value pairs of evidence data
    """

    source: SourceType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: dict[str, Any]


class Finding(BaseModel):
    """Security finding derived from a scan result.

    Attributes:
        kind: Rule that produced the finding (e.g. "sslv2_supported")
        title: Short description of the finding
        severity: Impact level (info, low, medium, high, critical)
        cvss_score: CVSS v3.1 base score backing the severity
        description: Detailed description of the finding
        evidence: List of evidence items with source attribution
    """

    kind: str
    title: str
    severity: str  # info, low, medium, high, critical
    cvss_score: float = 0.0
    description: str
    evidence: list[Evidence] = Field(default_factory=list)

    def add_evidence(self, source: SourceType, data: dict):
        """Add evidence with source attribution.

        Args:
            source: Source type of the evidence
            data: Key-value pairs of evidence data
        """
        self.evidence.append(Evidence(source=source, data=data))
