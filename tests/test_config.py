"""Tests for configuration loading."""

import pytest

from sslscan import InvalidArgument, ScanResult
from sslscan.catalog import STRONG_CIPHER_POLICY, StaticCipherCatalog, SystemCipherCatalog
from sslscan.core.config import Config, build_catalog, load_config


def test_defaults(monkeypatch):
    """Test defaults with an empty environment."""
    monkeypatch.delenv("SSLSCAN_STRONG_CIPHER_POLICY", raising=False)
    monkeypatch.delenv("SSLSCAN_CIPHER_CATALOG", raising=False)

    config = load_config()

    assert config.strong_cipher_policy == STRONG_CIPHER_POLICY
    assert config.cipher_catalog == "static"
    assert isinstance(build_catalog(config), StaticCipherCatalog)


def test_environment_overrides(monkeypatch):
    """Test that environment variables override the defaults."""
    monkeypatch.setenv("SSLSCAN_STRONG_CIPHER_POLICY", "HIGH")
    monkeypatch.setenv("SSLSCAN_CIPHER_CATALOG", "system")

    config = load_config()

    assert config.strong_cipher_policy == "HIGH"
    assert isinstance(build_catalog(config), SystemCipherCatalog)


def test_invalid_catalog_name(monkeypatch):
    """Test that an unknown catalog name fails validation."""
    monkeypatch.setenv("SSLSCAN_CIPHER_CATALOG", "openssl")

    with pytest.raises(InvalidArgument):
        load_config()


def test_scan_result_with_invalid_catalog_name(monkeypatch):
    """Test that ScanResult() reports bad configuration as InvalidArgument."""
    monkeypatch.setenv("SSLSCAN_CIPHER_CATALOG", "bogus")

    with pytest.raises(InvalidArgument):
        ScanResult()


def test_scan_result_uses_configured_policy(monkeypatch):
    """Test that ScanResult() picks up the configured policy."""
    monkeypatch.setenv("SSLSCAN_STRONG_CIPHER_POLICY", "HIGH")
    monkeypatch.delenv("SSLSCAN_CIPHER_CATALOG", raising=False)

    result = ScanResult()
    result.add_cipher("TLSv1", "SEED-SHA", 128, "accepted")

    assert result.strong_cipher_policy == "HIGH"
    assert result.ciphers[0].weak is True


def test_explicit_arguments_override_config(monkeypatch):
    """Test that constructor arguments win over the environment."""
    monkeypatch.setenv("SSLSCAN_STRONG_CIPHER_POLICY", "HIGH")
    catalog = StaticCipherCatalog()

    result = ScanResult(catalog=catalog, strong_cipher_policy=STRONG_CIPHER_POLICY)

    assert result.catalog is catalog
    assert result.strong_cipher_policy == STRONG_CIPHER_POLICY
    assert Config(strong_cipher_policy="MEDIUM").strong_cipher_policy == "MEDIUM"
