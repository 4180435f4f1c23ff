"""
Crawler Tests - Unit Tests for the Wise Rate Crawler

This module contains unit tests for the crawler classes, covering the HTTP
fetch, HTML parsing, rate extraction, error mapping and the loading
indicator lifecycle.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- usdbrl.adapters.crawlers.wise_crawler (WiseCrawler for testing)
- usdbrl.domain.errors (expected exceptions)
- unittest.mock (Mock for HTTP mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real HTTP calls
import requests  # HTTP library (used for mocking exceptions)
from bs4 import BeautifulSoup  # Real parser used inside a patched method
from bs4.builder import ParserRejectedMarkup  # Parser failure raised by a patched BeautifulSoup

from usdbrl.adapters.crawlers.wise_crawler import WiseCrawler  # Crawler to test
from usdbrl.domain.errors import (
    FetchFailedError,
    ParseFailedError,
    ValueNotFoundError,
)

URL = "https://wise.example/usd-to-brl"

WISE_HTML = """
<html><body>
  <h3 class="cc__source-to-target">
    <span dir="ltr">1 USD = <span class="text-success">5.21</span> BRL</span>
  </h3>
</body></html>
"""


def _response(status_code=200, text=WISE_HTML):
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.text = text
    return mock_response


class TestWiseCrawlerFetch:
    def test_init(self):
        crawler = WiseCrawler(url=URL, timeout=5)
        assert crawler.url == URL
        assert crawler.timeout == 5
        assert crawler.indicator is None

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_success(self, mock_get):
        mock_get.return_value = _response()

        crawler = WiseCrawler(url=URL, timeout=5)

        assert crawler.fetch() == "5.21"
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == URL
        assert kwargs["timeout"] == 5
        assert "User-Agent" in kwargs["headers"]

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_trims_whitespace(self, mock_get):
        html = '<span dir="ltr"><span class="text-success">\n  5.3 \n</span></span>'
        mock_get.return_value = _response(text=html)

        assert WiseCrawler(url=URL).fetch() == "5.3"

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_unexpected_status(self, mock_get):
        mock_get.return_value = _response(status_code=500, text="oops")

        crawler = WiseCrawler(url=URL)
        with pytest.raises(FetchFailedError, match="unexpected status code: 500"):
            crawler.fetch()

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_no_content_status_is_not_ok(self, mock_get):
        mock_get.return_value = _response(status_code=204, text="")

        with pytest.raises(FetchFailedError, match="unexpected status code: 204"):
            WiseCrawler(url=URL).fetch()

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        crawler = WiseCrawler(url=URL, timeout=3)
        with pytest.raises(FetchFailedError, match="timeout after 3s"):
            crawler.fetch()

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_fetch_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("Name or service not known")

        with pytest.raises(FetchFailedError, match="failed to fetch the page"):
            WiseCrawler(url=URL).fetch()


class TestWiseCrawlerExtraction:
    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_missing_element(self, mock_get):
        mock_get.return_value = _response(text="<html><body><p>Maintenance</p></body></html>")

        with pytest.raises(ValueNotFoundError, match="exchange rate not found"):
            WiseCrawler(url=URL).fetch()

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_success_class_outside_ltr_span_is_ignored(self, mock_get):
        html = '<div><span class="text-success">5.21</span></div><span dir="rtl"><span class="text-success">1</span></span>'
        mock_get.return_value = _response(text=html)

        with pytest.raises(ValueNotFoundError):
            WiseCrawler(url=URL).fetch()

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_empty_element(self, mock_get):
        mock_get.return_value = _response(text='<span dir="ltr"><span class="text-success">  </span></span>')

        with pytest.raises(ValueNotFoundError):
            WiseCrawler(url=URL).fetch()

    @patch('usdbrl.adapters.crawlers.base.BeautifulSoup')
    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_parser_rejects_markup(self, mock_get, mock_soup):
        mock_get.return_value = _response(text="\x00\x01garbage")
        mock_soup.side_effect = ParserRejectedMarkup("bad markup")

        with pytest.raises(ParseFailedError, match="failed to parse HTML"):
            WiseCrawler(url=URL).fetch()


class TestLoadingIndicator:
    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_indicator_stopped_before_parsing(self, mock_get):
        events = []
        mock_get.side_effect = lambda *a, **kw: events.append("get") or _response()
        indicator = Mock()
        indicator.start_loading.side_effect = lambda: events.append("start")
        indicator.stop_loading.side_effect = lambda: events.append("stop")

        crawler = WiseCrawler(url=URL, indicator=indicator)
        with patch.object(
            crawler,
            "_parse_html",
            side_effect=lambda html: events.append("parse") or BeautifulSoup(html, "html.parser"),
        ):
            assert crawler.fetch() == "5.21"

        assert events == ["start", "get", "stop", "parse"]

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_indicator_stopped_on_transport_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")
        indicator = Mock()

        with pytest.raises(FetchFailedError):
            WiseCrawler(url=URL, indicator=indicator).fetch()

        indicator.start_loading.assert_called_once()
        indicator.stop_loading.assert_called_once()


class TestFetchOutcome:
    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_outcome_success(self, mock_get):
        mock_get.return_value = _response()

        outcome = WiseCrawler(url=URL).fetch_outcome()

        assert outcome.ok
        assert outcome.rate == "5.21"
        assert outcome.error is None

    @patch('usdbrl.adapters.crawlers.base.requests.get')
    def test_outcome_failure(self, mock_get):
        mock_get.return_value = _response(status_code=503)

        outcome = WiseCrawler(url=URL).fetch_outcome()

        assert not outcome.ok
        assert outcome.rate is None
        assert isinstance(outcome.error, FetchFailedError)
        with pytest.raises(FetchFailedError):
            outcome.unwrap()
