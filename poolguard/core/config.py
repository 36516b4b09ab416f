"""Validator configuration."""

import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESERVED_POOL_NAMES = ["device_health_metrics", ".mgr", ".nfs"]


class Settings(BaseSettings):
    """Validator settings loaded from environment variables or YAML."""

    model_config = SettingsConfigDict(
        env_prefix="POOLGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pool rules
    reserved_pool_names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_RESERVED_POOL_NAMES),
        description="Ceph built-in pools that may never be erasure coded",
    )
    min_data_chunks: int = Field(default=2, ge=1, description="Minimum erasurecoded.dataChunks when set")
    min_coding_chunks: int = Field(default=1, ge=1, description="Minimum erasurecoded.codingChunks when set")

    # Logging
    log_level: str = "INFO"
    audit_log_enabled: bool = False
    audit_log_file: str = "/var/log/poolguard/audit.log"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @classmethod
    def load_from_yaml(cls, config_path: Union[str, Path]) -> "Settings":
        """Load settings from YAML file.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Settings instance with values from YAML and environment

        Raises:
            yaml.YAMLError: If YAML parsing fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            logging.warning(f"Config file not found: {config_path}, using defaults")
            return cls()

        try:
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logging.error(f"Failed to parse YAML config: {e}")
            raise

        return cls(**config_data)


DEFAULT_CONFIG_FILE = Path("poolguard.yaml")

# Global settings instance
_settings: Union[Settings, None] = None


def _load_default() -> Settings:
    if DEFAULT_CONFIG_FILE.exists():
        return Settings.load_from_yaml(DEFAULT_CONFIG_FILE)
    return Settings()


def get_settings() -> Settings:
    """Get application settings singleton.

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None:
        _settings = _load_default()

    return _settings


def reload_settings(config_path: Union[str, Path, None] = None) -> Settings:
    """Reload settings from configuration file.

    Later get_settings() calls return the reloaded instance.

    Args:
        config_path: Path to configuration file (optional)

    Returns:
        Reloaded Settings instance
    """
    global _settings

    if config_path:
        _settings = Settings.load_from_yaml(config_path)
    else:
        _settings = _load_default()

    return _settings
