# src/usdbrl/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Crawlers (rate page)
- Persistence (state file)
- Formatting (comparison and output lines)
- Console (terminal output)
"""

__all__ = []
