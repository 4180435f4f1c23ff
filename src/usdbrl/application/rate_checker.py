# src/usdbrl/application/rate_checker.py
"""
Rate Checker - One Fetch/Compare/Save Cycle

This module sequences a single run: start the page fetch on a worker
thread, load the persisted rate meanwhile, wait for the fetch outcome,
compare, save the new rate and print the result. Any failure ends the run
without touching the persisted rate.

Run states: Start → FetchInFlight → Success | Failure → Done.

Files that USE this module:
- usdbrl.app (main builds a RateChecker from settings and runs it)
- tests.test_rate_checker (scenario tests)

Files that this module USES:
- usdbrl.adapters.crawlers.wise_crawler (WiseCrawler default rate source)
- usdbrl.adapters.formatting.formatter (compare, parse_rate)
- usdbrl.adapters.console.presenter (Presenter output sink)
- usdbrl.application.state_manager (StateManager persisted rate)
- usdbrl.config (Settings)
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, TimeoutError as FutureTimeoutError
from typing import Optional

from usdbrl.adapters.console.presenter import Presenter
from usdbrl.adapters.crawlers.base import BaseCrawler
from usdbrl.adapters.crawlers.wise_crawler import WiseCrawler
from usdbrl.adapters.formatting.formatter import compare, parse_rate
from usdbrl.application.state_manager import StateManager
from usdbrl.config import Settings
from usdbrl.domain.errors import FetchFailedError, RateCheckError
from usdbrl.domain.models import ComparisonResult, FetchOutcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


class RateChecker:
    """Runs one rate check cycle."""
    
    def __init__(
        self,
        crawler: BaseCrawler,
        state_manager: StateManager,
        presenter: Presenter,
        source_name: str = "Wise",
        fetch_deadline_seconds: float = 30,
    ):
        self.crawler = crawler
        self.state_manager = state_manager
        self.presenter = presenter
        self.source_name = source_name
        self.fetch_deadline_seconds = fetch_deadline_seconds
    
    @classmethod
    def from_settings(cls, settings: Settings, presenter: Presenter) -> RateChecker:
        """
        Wire a RateChecker from settings.
        
        Args:
            settings: Loaded application settings
            presenter: Output sink (also used as the crawler's loading indicator)
        """
        crawler = WiseCrawler(
            url=settings.source_url,
            timeout=settings.http_timeout_seconds,
            indicator=presenter,
        )
        state_manager = StateManager(settings.app_name, settings.config_dir)
        return cls(
            crawler=crawler,
            state_manager=state_manager,
            presenter=presenter,
            source_name=settings.source_name,
            fetch_deadline_seconds=settings.fetch_deadline_seconds,
        )
    
    def _start_fetch(self) -> Future:
        """
        Run the crawler on a daemon thread.
        
        Returns:
            Future resolved with a FetchOutcome (or an unexpected exception)
        """
        future: Future = Future()
        
        def worker() -> None:
            try:
                future.set_result(self.crawler.fetch_outcome())
            except Exception as e:
                future.set_exception(e)
        
        threading.Thread(target=worker, name="usdbrl-fetch", daemon=True).start()
        return future
    
    def _wait_for_rate(self, future: Future) -> str:
        """
        Block until the fetch finishes or the deadline passes.
        
        Raises:
            FetchFailedError: If the deadline expires
            RateCheckError: Whatever error the fetch produced
        """
        try:
            outcome: FetchOutcome = future.result(timeout=self.fetch_deadline_seconds)
        except FutureTimeoutError:
            raise FetchFailedError(
                f"no response from {self.crawler.url} within {self.fetch_deadline_seconds}s"
            ) from None
        return outcome.unwrap()
    
    def check(self) -> ComparisonResult:
        """
        Perform the fetch/compare/save cycle.
        
        Returns:
            ComparisonResult that was shown
            
        Raises:
            RateCheckError: On any failure; the state file is not written
        """
        self.presenter.banner(self.source_name)
        future = self._start_fetch()
        
        # Fatal right away, whatever the fetch is doing
        state = self.state_manager.load()
        logger.info("Previous rate: %s", state.value)
        
        rate_text = self._wait_for_rate(future)
        previous = state.value
        result = compare(rate_text, previous)
        self.state_manager.update(state, parse_rate(rate_text))
        
        logger.info("Rate %s (%s, previous %s)", rate_text, result.direction.value, previous)
        self.presenter.show(result)
        return result
    
    def run(self) -> int:
        """
        Run one check and report failures on the presenter.
        
        Returns:
            Process exit code (0 on success, 1 on any rate check failure)
        """
        try:
            self.check()
        except RateCheckError as e:
            logger.error("Rate check failed (%s): %s", type(e).__name__, e)
            self.presenter.error(str(e))
            return EXIT_FATAL
        return EXIT_OK
