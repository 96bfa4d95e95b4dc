# tests/test_settings.py
"""
Settings Tests - Unit Tests for Environment-driven Configuration

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- gcurrency.config.settings (Settings)
- gcurrency.adapters.providers.google (client defaults from settings)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import patch  # Swap the global settings instance
from pydantic import ValidationError  # Raised for invalid environment values

from gcurrency.adapters.providers.google import GoogleQuoteClient
from gcurrency.config.settings import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.service_url == "http://www.google.com/ig/calculator"
        assert s.service_language == "en"
        assert s.http_timeout_seconds is None
        assert s.log_stdout is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GCURRENCY_SERVICE_SCHEME", "HTTPS")
        monkeypatch.setenv("GCURRENCY_SERVICE_HOST", "quotes.example.com")
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")

        s = Settings(_env_file=None)

        assert s.service_url == "https://quotes.example.com/ig/calculator"
        assert s.http_timeout_seconds == 2.5

    @pytest.mark.parametrize("name,value", [
        ("GCURRENCY_SERVICE_SCHEME", "ftp"),
        ("GCURRENCY_SERVICE_HOST", "example.com/path"),
        ("GCURRENCY_SERVICE_PATH", "ig/calculator"),
        ("HTTP_TIMEOUT_SECONDS", "0"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_client_reads_settings(self):
        custom = Settings(
            _env_file=None,
            GCURRENCY_SERVICE_HOST="quotes.example.com",
            HTTP_TIMEOUT_SECONDS=4,
        )
        with patch('gcurrency.adapters.providers.google.settings', custom):
            client = GoogleQuoteClient()

        assert client.host == "quotes.example.com"
        assert client.timeout == 4
        assert client.build_url("USD", "EUR").startswith("http://quotes.example.com/ig/calculator?")
