# src/usdbrl/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local .env file) with
validation. Nothing here is process-global state for the core: the
orchestrator receives a Settings instance, so tests build their own.

Files that USE this module:
- usdbrl.app (loads settings for the run and for logging)
- usdbrl.application.rate_checker (source URL, app name, timeouts)
- usdbrl.adapters.persistence.file_store (config_dir override, app name)

Files that this module USES:
- usdbrl.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Log level name to number conversion
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from usdbrl.shared.validators import (
    validate_app_name,  # Validate state directory name
    validate_log_level,  # Validate logging level name
    validate_url,  # Validate source page URL
)

DEFAULT_SOURCE_URL = "https://wise.com/gb/currency-converter/usd-to-brl-rate?amount=1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # --- Rate source ---
    source_url: str = Field(default=DEFAULT_SOURCE_URL, alias="USDBRL_SOURCE_URL")
    source_name: str = Field(default="Wise", alias="USDBRL_SOURCE_NAME")
    
    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)
    # Upper bound on waiting for the fetch result, on top of the request timeout
    fetch_deadline_seconds: int = Field(default=30, alias="USDBRL_FETCH_DEADLINE_SECONDS", ge=1, le=600)
    
    # --- Persistence ---
    # Directory name under the user config dir; "gousdbrl" keeps existing state readable
    app_name: str = Field(default="gousdbrl", alias="USDBRL_APP_NAME")
    config_dir: Optional[Path] = Field(default=None, alias="USDBRL_CONFIG_DIR")
    
    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="USDBRL_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=False, alias="USDBRL_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")
    
    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)
    
    @field_validator("source_url")
    @classmethod
    def validate_source_url(cls, v: str) -> str:
        """Validate source URL format."""
        if not validate_url(v):
            raise ValueError("USDBRL_SOURCE_URL must be an absolute http(s) URL")
        return v
    
    @field_validator("app_name")
    @classmethod
    def validate_app_name(cls, v: str) -> str:
        """Validate application directory name."""
        if not validate_app_name(v):
            raise ValueError("USDBRL_APP_NAME must be a single directory name")
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level name."""
        if not validate_log_level(v):
            raise ValueError("USDBRL_LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()

