# src/usdbrl/adapters/crawlers/__init__.py
"""
Web Crawlers for Exchange Rate Data

This package contains web crawlers that fetch exchange rates from websites
by parsing HTML content.
"""

from usdbrl.adapters.crawlers.base import BaseCrawler, LoadingIndicator
from usdbrl.adapters.crawlers.wise_crawler import WiseCrawler

__all__ = ["BaseCrawler", "LoadingIndicator", "WiseCrawler"]
