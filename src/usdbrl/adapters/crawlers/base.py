# src/usdbrl/adapters/crawlers/base.py
"""
Base Crawler - Fetch a Page and Extract One Value

This module provides a base class for web crawlers that download a page,
parse it as HTML and pull a single rate string out of it. Every failure is
turned into a descriptive domain error; the page layout is an external
contract that can change at any time.

Files that USE this module:
- usdbrl.adapters.crawlers.wise_crawler (WiseCrawler extends BaseCrawler)
- usdbrl.application.rate_checker (runs crawler.fetch_outcome on a worker)

Files that this module USES:
- usdbrl.domain.errors (FetchFailedError, ParseFailedError)
- usdbrl.domain.models (FetchOutcome)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from abc import ABC, abstractmethod  # Abstract base classes for defining interfaces
from typing import Optional, Protocol  # Type hints for optional values and interfaces

import requests  # HTTP library for making web requests
from bs4 import BeautifulSoup  # HTML parsing library for extracting data from web pages
from bs4.builder import ParserRejectedMarkup  # Raised by bs4 when a parser gives up on markup

from usdbrl.domain.errors import FetchFailedError, ParseFailedError, RateCheckError
from usdbrl.domain.models import FetchOutcome

log = logging.getLogger(__name__)  # Create logger for this module

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class LoadingIndicator(Protocol):
    """Anything that can show and hide a 'loading' state."""

    def start_loading(self) -> None: ...

    def stop_loading(self) -> None: ...


class BaseCrawler(ABC):
    """
    Base class for single-value web crawlers.
    
    Subclasses implement ``_extract`` to find the value in a parsed page.
    """
    
    def __init__(
        self,
        url: str,
        timeout: int = 10,
        indicator: Optional[LoadingIndicator] = None,
    ):
        """
        Initialize base crawler.
        
        Args:
            url: URL to crawl
            timeout: HTTP request timeout in seconds
            indicator: Optional loading indicator shown during the network call
        """
        self.url = url
        self.timeout = timeout
        self.indicator = indicator
    
    def _fetch_html(self) -> str:
        """
        Fetch HTML content from the URL.
        
        The loading indicator runs only while the request is in flight.
        
        Returns:
            HTML content as string
            
        Raises:
            FetchFailedError: On transport errors, timeouts or a non-200 status
        """
        headers = {"User-Agent": USER_AGENT}
        log.info("Fetching HTML from %s", self.url)
        if self.indicator is not None:
            self.indicator.start_loading()
        try:
            resp = requests.get(self.url, timeout=self.timeout, headers=headers)
        except requests.exceptions.Timeout:
            log.error("Crawler timeout after %d seconds for %s", self.timeout, self.url)
            raise FetchFailedError(f"failed to fetch the page: timeout after {self.timeout}s for {self.url}")
        except requests.exceptions.RequestException as e:
            log.error("Crawler request failed for %s: %s", self.url, e)
            raise FetchFailedError(f"failed to fetch the page: {e}") from e
        finally:
            if self.indicator is not None:
                self.indicator.stop_loading()
        
        if resp.status_code != 200:
            log.error("Unexpected status %d from %s", resp.status_code, self.url)
            raise FetchFailedError(f"unexpected status code: {resp.status_code}")
        return resp.text
    
    def _parse_html(self, html: str) -> BeautifulSoup:
        """
        Parse HTML content into a document tree.
        
        Raises:
            ParseFailedError: If the parser rejects the markup
        """
        try:
            return BeautifulSoup(html, "html.parser")
        except (ParserRejectedMarkup, AssertionError, TypeError, ValueError) as e:
            log.error("Failed to parse HTML from %s: %s", self.url, e)
            raise ParseFailedError(f"failed to parse HTML: {e}") from e
    
    @abstractmethod
    def _extract(self, soup: BeautifulSoup) -> str:
        """
        Extract the rate text from a parsed page.
        
        Args:
            soup: Parsed HTML document
            
        Returns:
            Trimmed rate text
            
        Raises:
            ValueNotFoundError: If the page does not contain the value
        """
        raise NotImplementedError
    
    def fetch(self) -> str:
        """
        Fetch the page and extract the rate.
        
        Returns:
            Rate text such as ``"5.21"``
            
        Raises:
            FetchFailedError, ParseFailedError, ValueNotFoundError
        """
        html = self._fetch_html()
        rate = self._extract(self._parse_html(html))
        log.info("Extracted rate %s from %s", rate, self.url)
        return rate
    
    def fetch_outcome(self) -> FetchOutcome:
        """
        Run ``fetch`` and package the result as a FetchOutcome.
        
        Returns:
            FetchOutcome holding either the rate text or the domain error
        """
        try:
            return FetchOutcome.success(self.fetch())
        except RateCheckError as e:
            return FetchOutcome.failure(e)
