"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ..adapters.catalyst_center import CatalystCenterConfig


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Catalyst Center
    base_url: str = field(default_factory=lambda: _env_str("CATALYST_CENTER_BASE_URL"))
    username: str = field(default_factory=lambda: _env_str("CATALYST_CENTER_USERNAME"))
    password: str = field(default_factory=lambda: _env_str("CATALYST_CENTER_PASSWORD"))
    verify_ssl: bool = field(default_factory=lambda: _env_bool("CATALYST_CENTER_VERIFY_SSL", default=True))
    timeout: float = field(default_factory=lambda: _env_float("CATALYST_CENTER_TIMEOUT", 30.0))

    # Lookup filters for single-execution mode
    credential_sub_type: str = field(default_factory=lambda: _env_str("CREDENTIAL_SUB_TYPE"))
    sort_by: str = field(default_factory=lambda: _env_str("SORT_BY"))
    order: str = field(default_factory=lambda: _env_str("ORDER"))
    credential_id: str = field(default_factory=lambda: _env_str("CREDENTIAL_ID"))

    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_enabled: bool = field(default_factory=lambda: _env_bool("API_ENABLED"))
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.base_url:
            missing.append("CATALYST_CENTER_BASE_URL")
        if not self.username:
            missing.append("CATALYST_CENTER_USERNAME")
        if not self.password:
            missing.append("CATALYST_CENTER_PASSWORD")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        if self.timeout <= 0:
            msg = f"CATALYST_CENTER_TIMEOUT must be positive, got {self.timeout}"
            raise ValueError(msg)

    @cached_property
    def catalyst_center_config(self) -> CatalystCenterConfig:
        """Get Catalyst Center client configuration."""
        return CatalystCenterConfig(
            base_url=self.base_url,
            username=self.username,
            password=self.password,
            verify_ssl=self.verify_ssl,
            timeout=self.timeout,
        )

    @cached_property
    def lookup_inputs(self) -> dict[str, str]:
        """Get the lookup filters for single-execution mode."""
        return {
            "credential_sub_type": self.credential_sub_type,
            "sort_by": self.sort_by,
            "order": self.order,
            "id": self.credential_id,
        }


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
