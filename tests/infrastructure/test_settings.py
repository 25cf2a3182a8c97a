"""Tests for environment settings."""

from __future__ import annotations

import pytest

from global_credentials.infrastructure.config import Settings, load_settings


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALYST_CENTER_BASE_URL", "https://dnac.example.com")
    monkeypatch.setenv("CATALYST_CENTER_USERNAME", "admin")
    monkeypatch.setenv("CATALYST_CENTER_PASSWORD", "pw")


class TestSettings:
    """Tests for Settings."""

    @pytest.mark.usefixtures("required_env")
    def test_load_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings build the client config and lookup inputs."""
        monkeypatch.setenv("CATALYST_CENTER_VERIFY_SSL", "false")
        monkeypatch.setenv("CREDENTIAL_SUB_TYPE", "SNMPV3")

        settings = load_settings()

        assert settings.catalyst_center_config.base_url == "https://dnac.example.com"
        assert settings.catalyst_center_config.verify_ssl is False
        assert settings.lookup_inputs["credential_sub_type"] == "SNMPV3"
        assert settings.lookup_inputs["id"] == ""

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing connection settings are reported together."""
        for key in ("CATALYST_CENTER_BASE_URL", "CATALYST_CENTER_USERNAME", "CATALYST_CENTER_PASSWORD"):
            monkeypatch.delenv(key, raising=False)

        with pytest.raises(ValueError, match="CATALYST_CENTER_BASE_URL, CATALYST_CENTER_USERNAME"):
            load_settings()

    @pytest.mark.usefixtures("required_env")
    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Timeout must be positive."""
        monkeypatch.setenv("CATALYST_CENTER_TIMEOUT", "0")
        with pytest.raises(ValueError, match="TIMEOUT"):
            Settings().validate()
