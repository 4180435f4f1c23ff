# src/usdbrl/shared/validators.py
"""
Input Validation Utilities - Configuration and Data Validation

This module provides validation functions for configuration values and
scraped data. It validates URLs, application directory names, log levels
and decimal rate text so bad input fails early with a clear message.

Files that USE this module:
- usdbrl.config.settings (uses validation functions in Settings field validators)
- usdbrl.adapters.formatting.formatter (parse_decimal for rate text)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import re
from typing import Optional
from urllib.parse import urlparse


# Plain decimal: optional sign, digits with optional fraction, optional exponent.
# No thousands separators, currency symbols, NaN or infinities.
_DECIMAL_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def validate_url(url: str) -> bool:
    """
    Validate that a URL is an absolute http(s) URL.
    
    Args:
        url: URL to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False
    
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_app_name(name: str) -> bool:
    """
    Validate application directory name.
    
    The name becomes a single directory under the user config dir, so it
    must not contain path separators or be a relative path component.
    
    Args:
        name: Directory name to validate
        
    Returns:
        True if valid, False otherwise
    """
    if not name or name in (".", ".."):
        return False
    
    return bool(re.match(r'^[A-Za-z0-9._-]+$', name))


def validate_log_level(level: str) -> bool:
    """Check that ``level`` is a standard logging level name."""
    if not level:
        return False
    return isinstance(logging.getLevelName(level.upper()), int)


def parse_decimal(text: str) -> Optional[float]:
    """
    Parse a plain decimal string.
    
    Args:
        text: Text such as ``"5.21"``
        
    Returns:
        Float value, or None if the text is not a plain decimal number
    """
    if text is None:
        return None
    
    if not _DECIMAL_RE.match(text):
        return None
    
    return float(text)
