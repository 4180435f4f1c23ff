# src/usdbrl/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from usdbrl.shared.validators import (
    parse_decimal,
    validate_app_name,
    validate_log_level,
    validate_url,
)
from usdbrl.shared.logging_conf import setup_logging

__all__ = [
    "validate_url",
    "validate_app_name",
    "validate_log_level",
    "parse_decimal",
    "setup_logging",
]
