# src/usdbrl/adapters/persistence/file_store.py
"""
File Store - State Persistence and Data Storage

This module handles persistent storage of the last observed rate in a JSON
document at ``<user-config-dir>/<app_name>/data.json``. The rate lives at
the dotted path ``config.value``; the rest of the document is treated as an
opaque tree and preserved across writes.

Files that USE this module:
- usdbrl.application.state_manager (StateManager uses load_state and save_state)
- tests.test_file_store (unit tests)

Files that this module USES:
- usdbrl.domain.models (PersistedState)
- usdbrl.domain.errors (StorageUnavailableError, CorruptStateError)
"""
from __future__ import annotations

import json
import logging
import math
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from usdbrl.domain.errors import CorruptStateError, StorageUnavailableError
from usdbrl.domain.models import PersistedState

log = logging.getLogger(__name__)

STATE_FILE_NAME = "data.json"
VALUE_PATH = "config.value"
STATE_FILE_MODE = 0o644


def user_config_dir() -> Path:
    """
    Locate the per-user configuration directory for this platform.
    
    Windows uses %APPDATA%, macOS uses ~/Library/Application Support, and
    everything else uses $XDG_CONFIG_HOME or ~/.config.
    
    Returns:
        Path to the user config directory (not created)
        
    Raises:
        StorageUnavailableError: If the directory cannot be determined
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise StorageUnavailableError("failed to get user config directory: %APPDATA% is not defined")
        return Path(appdata)
    
    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support"
    
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        if not os.path.isabs(xdg):
            raise StorageUnavailableError(
                f"failed to get user config directory: XDG_CONFIG_HOME is relative: {xdg}"
            )
        return Path(xdg)
    return _home() / ".config"


def _home() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageUnavailableError(f"failed to get user config directory: {e}") from e


def resolve_state_path(app_name: str, config_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Get path to state file and ensure its directory exists.
    
    Args:
        app_name: Directory name for this application
        config_dir: Optional base directory overriding the user config dir
        
    Returns:
        Path object pointing to the state file
        
    Raises:
        StorageUnavailableError: If the directory cannot be determined or created
    """
    base = Path(config_dir) if config_dir is not None else user_config_dir()
    app_dir = base / app_name
    try:
        app_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageUnavailableError(f"failed to create app config directory {app_dir}: {e}") from e
    return app_dir / STATE_FILE_NAME


def get_path(doc: Any, dotted: str) -> Any:
    """
    Look up a dotted path (``"config.value"``) in a JSON tree.
    
    Raises:
        KeyError: If any segment is missing or a parent is not an object
    """
    node = doc
    for key in dotted.split("."):
        if not isinstance(node, dict) or key not in node:
            raise KeyError(dotted)
        node = node[key]
    return node


def set_path(doc: dict, dotted: str, value: Any) -> dict:
    """
    Set a dotted path in a JSON tree in place, creating objects as needed.
    
    Intermediate values that are not objects are replaced by objects.
    Sibling keys are left untouched.
    
    Returns:
        The same document, for chaining
    """
    keys = dotted.split(".")
    node = doc
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value
    return doc


def load_state(path: Path) -> PersistedState:
    """
    Load the last observed rate from the state file.
    
    A missing file is the normal first-run case and yields ``value=0.0``.
    
    Args:
        path: State file location
        
    Returns:
        PersistedState with the stored value
        
    Raises:
        CorruptStateError: If the file is unreadable, not JSON, or lacks a
            numeric ``config.value``
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.info("No state file at %s, starting from 0.0", path)
        return PersistedState(value=0.0)
    except (OSError, UnicodeDecodeError) as e:
        raise CorruptStateError(f"failed to read state file {path}: {e}") from e
    
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise CorruptStateError(f"state file {path} is not valid JSON: {e}") from e
    
    try:
        value = get_path(data, VALUE_PATH)
    except KeyError:
        raise CorruptStateError(f"key '{VALUE_PATH}' not found in config file {path}") from None
    
    # bool is an int subclass but never a rate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CorruptStateError(f"key '{VALUE_PATH}' in {path} is not a number: {value!r}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise CorruptStateError(f"key '{VALUE_PATH}' in {path} is not a finite number: {value!r}")
    
    log.debug("Loaded state from %s: %s", path, number)
    return PersistedState(value=number)


def _read_document(path: Path) -> dict:
    """Read the existing document, treating absent or unusable content as ``{}``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable state content in %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("State file %s does not hold a JSON object, replacing it", path)
        return {}
    return data


def save_state(state: PersistedState, path: Path) -> None:
    """
    Save the rate into the state file using an atomic write.
    
    Reads the current document, sets ``config.value`` and writes the result
    through a temporary file + rename, so a crash leaves either the old or
    the new content.
    
    Args:
        state: PersistedState to save
        path: State file location
        
    Raises:
        StorageUnavailableError: If the file cannot be written
    """
    doc = set_path(_read_document(path), VALUE_PATH, state.value)
    
    try:
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=".json.tmp",
            dir=str(path.parent),
            text=True
        )
    except OSError as e:
        raise StorageUnavailableError(f"failed to save state file {path}: {e}") from e
    
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(doc, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())  # Ensure data is written to disk
        # mkstemp creates 0600
        os.chmod(temp_path, STATE_FILE_MODE)
        
        # Atomic rename (replaces target file atomically on Unix/Windows)
        os.replace(temp_path, str(path))
    except OSError as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise StorageUnavailableError(f"failed to save state file {path}: {e}") from e
    
    log.info("State saved to %s: %s", path, state.value)
