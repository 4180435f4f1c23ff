# src/usdbrl/adapters/persistence/__init__.py
"""
Persistence Adapters - Data Storage

This package contains adapters for persisting data:
- File-based storage (JSON document in the user config dir)
"""

from usdbrl.adapters.persistence.file_store import (
    load_state,
    resolve_state_path,
    save_state,
    user_config_dir,
)

__all__ = [
    "user_config_dir",
    "resolve_state_path",
    "load_state",
    "save_state",
]
