# src/usdbrl/adapters/crawlers/wise_crawler.py
"""
Wise.com Crawler

Crawler for the USD→BRL rate on the Wise currency converter page.
The rate is the text of a ``span.text-success`` nested in a
``span[dir='ltr']``, e.g. ``<span dir="ltr">1 USD = <span class="text-success">5.21</span> BRL</span>``.

Files that USE this module:
- usdbrl.application.rate_checker (default crawler for a run)
- tests.test_crawlers (unit tests)

Files that this module USES:
- usdbrl.adapters.crawlers.base (BaseCrawler base class)
- usdbrl.domain.errors (ValueNotFoundError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages

from bs4 import BeautifulSoup  # HTML parsing library for extracting data from web pages

from usdbrl.adapters.crawlers.base import BaseCrawler  # Base crawler class
from usdbrl.domain.errors import ValueNotFoundError

log = logging.getLogger(__name__)  # Create logger for this module

RATE_SELECTOR = "span[dir='ltr'] span.text-success"


class WiseCrawler(BaseCrawler):
    """Crawler for wise.com currency converter pages."""
    
    def _extract(self, soup: BeautifulSoup) -> str:
        """
        Pull the rate text out of the converter page.
        
        Text of all matching elements is joined, as the page normally has
        exactly one match.
        """
        matches = soup.select(RATE_SELECTOR)
        rate = "".join(el.get_text() for el in matches).strip()
        if not rate:
            log.warning("Rate element %r not found on %s", RATE_SELECTOR, self.url)
            raise ValueNotFoundError("exchange rate not found in HTML")
        return rate
