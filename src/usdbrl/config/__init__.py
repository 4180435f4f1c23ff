# src/usdbrl/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.
"""

from usdbrl.config.settings import DEFAULT_SOURCE_URL, Settings

__all__ = ["DEFAULT_SOURCE_URL", "Settings"]
