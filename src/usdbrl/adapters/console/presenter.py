# src/usdbrl/adapters/console/presenter.py
"""
Console Presenter - Terminal Output Sink

Renders the banner, a transient spinner while the page is downloading,
and the final result or error line using rich.

Files that USE this module:
- usdbrl.app (builds the ConsolePresenter for a run)
- usdbrl.application.rate_checker (talks to it through the Presenter protocol)
- usdbrl.adapters.crawlers.base (start_loading / stop_loading)

Files that this module USES:
- usdbrl.adapters.formatting.formatter (render_* helpers)
- usdbrl.domain.models (ComparisonResult)
"""
from __future__ import annotations

import threading
from typing import Optional, Protocol

from rich.console import Console
from rich.status import Status

from usdbrl.adapters.formatting.formatter import render_banner, render_comparison, render_error
from usdbrl.domain.models import ComparisonResult


class Presenter(Protocol):
    """Output sink used by the rate checker."""

    def banner(self, source_name: str) -> None: ...

    def start_loading(self) -> None: ...

    def stop_loading(self) -> None: ...

    def show(self, result: ComparisonResult) -> None: ...

    def error(self, message: str) -> None: ...


class ConsolePresenter:
    """Presenter writing to a rich Console (stdout by default)."""
    
    def __init__(self, console: Optional[Console] = None, spinner: str = "dots"):
        self.console = console or Console(highlight=False)
        self.spinner = spinner
        self._status: Optional[Status] = None
        self._closed = False
        # start/stop are called from the fetch worker thread
        self._lock = threading.Lock()
    
    def banner(self, source_name: str) -> None:
        self.console.print(render_banner(source_name))
    
    def start_loading(self) -> None:
        with self._lock:
            if self._status is None and not self._closed:
                self._status = self.console.status("", spinner=self.spinner)
                self._status.start()
    
    def stop_loading(self) -> None:
        """Stop and clear the spinner. Safe to call when it is not running."""
        with self._lock:
            if self._status is not None:
                self._status.stop()
                self._status = None
    
    def close(self) -> None:
        """Stop the spinner for good; later start_loading calls are ignored."""
        with self._lock:
            self._closed = True
        self.stop_loading()
    
    def show(self, result: ComparisonResult) -> None:
        self.close()
        self.console.print(render_comparison(result))
    
    def error(self, message: str) -> None:
        self.close()
        self.console.print(render_error(message))
