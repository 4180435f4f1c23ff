"""
State Manager Tests - Unit Tests for Persisted Rate Ownership

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- usdbrl.application.state_manager (StateManager under test)
"""
import json  # Read back the state file

from unittest.mock import patch  # Count path resolutions

from usdbrl.application.state_manager import StateManager
from usdbrl.domain.models import PersistedState


class TestStateManager:
    def test_resolve_state_path(self, tmp_path):
        manager = StateManager("gousdbrl", config_dir=tmp_path)
        assert manager.resolve_state_path() == tmp_path / "gousdbrl" / "data.json"

    def test_path_resolved_once(self, tmp_path):
        manager = StateManager("gousdbrl", config_dir=tmp_path)
        with patch(
            'usdbrl.application.state_manager.resolve_state_path',
            return_value=tmp_path / "data.json",
        ) as mock_resolve:
            manager.load()
            manager.save(PersistedState(value=1.0))
        mock_resolve.assert_called_once_with("gousdbrl", tmp_path)

    def test_load_first_run(self, tmp_path):
        assert StateManager("gousdbrl", config_dir=tmp_path).load().value == 0.0

    def test_update_overwrites_and_persists(self, tmp_path):
        manager = StateManager("gousdbrl", config_dir=tmp_path)
        state = manager.load()

        updated = manager.update(state, 5.21)

        assert updated is state
        assert state.value == 5.21
        data = json.loads(manager.resolve_state_path().read_text(encoding="utf-8"))
        assert data == {"config": {"value": 5.21}}
