# src/usdbrl/adapters/formatting/__init__.py
"""
Formatting Adapters - Comparison and Console Formatting

This package contains the rate comparison and the console line formatting.
"""

from usdbrl.adapters.formatting.formatter import (
    compare,
    parse_rate,
    render_banner,
    render_comparison,
    render_error,
)

__all__ = [
    "compare",
    "parse_rate",
    "render_banner",
    "render_comparison",
    "render_error",
]
