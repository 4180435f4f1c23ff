# src/usdbrl/application/state_manager.py
"""
State Manager - Persisted Rate Ownership

Owns the location and lifecycle of the persisted rate for one run: resolve
the path once, load once, overwrite the value and save once on success.

Files that USE this module:
- usdbrl.application.rate_checker (RateChecker loads and saves through StateManager)
- tests.test_state_manager (unit tests)

Files that this module USES:
- usdbrl.adapters.persistence.file_store (resolve_state_path, load_state, save_state)
- usdbrl.domain.models (PersistedState)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from usdbrl.adapters.persistence.file_store import load_state, resolve_state_path, save_state
from usdbrl.domain.models import PersistedState

logger = logging.getLogger(__name__)


class StateManager:
    """Manages the persisted rate for a single application directory."""
    
    def __init__(self, app_name: str, config_dir: Optional[Union[str, Path]] = None):
        """
        Args:
            app_name: Directory name under the config dir
            config_dir: Optional override for the user config dir
        """
        self.app_name = app_name
        self.config_dir = config_dir
        self._path: Optional[Path] = None
    
    def resolve_state_path(self) -> Path:
        """
        Resolve (and cache) the state file path, creating its directory.
        
        Raises:
            StorageUnavailableError: If the location cannot be determined or created
        """
        if self._path is None:
            self._path = resolve_state_path(self.app_name, self.config_dir)
            logger.debug("State file: %s", self._path)
        return self._path
    
    def load(self) -> PersistedState:
        """Load the persisted rate (0.0 when no state exists yet)."""
        return load_state(self.resolve_state_path())
    
    def save(self, state: PersistedState) -> None:
        """Persist ``state``, keeping any other fields in the document."""
        save_state(state, self.resolve_state_path())
    
    def update(self, state: PersistedState, value: float) -> PersistedState:
        """
        Overwrite the state value and persist it.
        
        Args:
            state: State loaded at the start of the run
            value: Freshly fetched rate
            
        Returns:
            The same state object, now holding ``value``
        """
        state.value = value
        self.save(state)
        logger.info("State updated and persisted: %s", value)
        return state
