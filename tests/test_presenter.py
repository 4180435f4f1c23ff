"""
Presenter Tests - Unit Tests for Console Output

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- usdbrl.adapters.console.presenter (ConsolePresenter under test)
- rich (Console writing to a string buffer)
"""
import io  # In-memory console output

from rich.console import Console  # Console bound to a buffer

from usdbrl.adapters.console.presenter import ConsolePresenter
from usdbrl.adapters.formatting.formatter import compare


def _presenter():
    buf = io.StringIO()
    console = Console(file=buf, force_terminal=False, color_system=None, width=80)
    return ConsolePresenter(console=console), buf


class TestConsolePresenter:
    def test_banner(self):
        presenter, buf = _presenter()
        presenter.banner("Wise")
        assert buf.getvalue() == "Fetching USD to BRL exchange rate from Wise\n"

    def test_show(self):
        presenter, buf = _presenter()
        presenter.show(compare("5.20", 5.50))
        assert buf.getvalue().endswith("▼ 5.20\n")

    def test_error(self):
        presenter, buf = _presenter()
        presenter.error("unexpected status code: 500")
        assert "Error: unexpected status code: 500" in buf.getvalue()

    def test_loading_start_stop(self):
        presenter, _ = _presenter()
        presenter.start_loading()
        assert presenter._status is not None
        presenter.stop_loading()
        assert presenter._status is None
        # Second stop is harmless
        presenter.stop_loading()

    def test_no_loading_after_close(self):
        presenter, _ = _presenter()
        presenter.start_loading()
        presenter.show(compare("5.00", 0.0))
        assert presenter._status is None

        presenter.start_loading()
        assert presenter._status is None
