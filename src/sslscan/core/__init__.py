"""Ambient support for the scan result model.

Provides:
- Configuration loading
- Structured findings with source attribution
- CVSS severity calculation
"""

from .config import Config, build_catalog, load_config
from .output import Evidence, Finding, SourceType
from .severity import calculate_severity, severity_to_cvss_defaults

__all__ = [
    "Config",
    "build_catalog",
    "load_config",
    "Evidence",
    "Finding",
    "SourceType",
    "calculate_severity",
    "severity_to_cvss_defaults",
]
