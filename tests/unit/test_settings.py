"""Unit tests for environment-backed provider settings."""

import logging

import pytest

from pingdirectory_provider.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    ENV_CA_CERTIFICATE_PEM_FILES,
    ENV_HTTPS_HOST,
    ENV_INSECURE_TRUST_ALL_TLS,
    ENV_REQUEST_TIMEOUT,
)
from pingdirectory_provider.settings import ProviderSettings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    for name in (
        ENV_HTTPS_HOST,
        ENV_INSECURE_TRUST_ALL_TLS,
        ENV_CA_CERTIFICATE_PEM_FILES,
        ENV_REQUEST_TIMEOUT,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestProviderSettings:
    """Tests for ProviderSettings."""

    def test_defaults(self):
        """Test that nothing is set without environment variables."""
        settings = ProviderSettings()
        assert settings.https_host == ""
        assert settings.insecure_trust_all_tls is False
        assert settings.ca_certificate_pem_file_list == []
        assert settings.request_timeout == DEFAULT_REQUEST_TIMEOUT

    def test_reads_environment(self, monkeypatch):
        """Test that values come from PINGDIRECTORY_PROVIDER_* variables."""
        monkeypatch.setenv(ENV_HTTPS_HOST, "https://localhost:1443")
        monkeypatch.setenv(ENV_REQUEST_TIMEOUT, "5.5")
        settings = ProviderSettings()
        assert settings.https_host == "https://localhost:1443"
        assert settings.request_timeout == 5.5

    def test_reads_dotenv_file(self, tmp_path):
        """Test that a .env file in the working directory is honored."""
        (tmp_path / ".env").write_text(f"{ENV_HTTPS_HOST}=https://from-dotenv:1443\n")
        assert ProviderSettings().https_host == "https://from-dotenv:1443"

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("TRUE", True), ("1", True), ("false", False), ("0", False)],
    )
    def test_insecure_trust_all_tls(self, monkeypatch, value, expected):
        """Test boolean parsing of the insecure flag."""
        monkeypatch.setenv(ENV_INSECURE_TRUST_ALL_TLS, value)
        assert ProviderSettings().insecure_trust_all_tls is expected

    def test_insecure_trust_all_tls_invalid(self, monkeypatch, caplog):
        """Test that an unparseable flag defaults to false and is logged."""
        monkeypatch.setenv(ENV_INSECURE_TRUST_ALL_TLS, "maybe")

        with caplog.at_level(logging.INFO):
            settings = ProviderSettings()

        assert settings.insecure_trust_all_tls is False
        assert "Defaulting to false" in caplog.text

    def test_ca_certificate_list(self, monkeypatch):
        """Test that CA files are split on commas and stripped."""
        monkeypatch.setenv(ENV_CA_CERTIFICATE_PEM_FILES, "/a.pem, /b.pem,,")
        assert ProviderSettings().ca_certificate_pem_file_list == ["/a.pem", "/b.pem"]
