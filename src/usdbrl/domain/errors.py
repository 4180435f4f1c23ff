# src/usdbrl/domain/errors.py
"""
Domain Errors - Rate Check Failures

This module defines the exceptions a single rate check can end with.
None of them are recovered locally: each one aborts the run.
"""


class RateCheckError(Exception):
    """Base exception for every failure of a rate check run."""
    pass


class StorageUnavailableError(RateCheckError):
    """Raised when the state location cannot be resolved, created or written."""
    pass


class CorruptStateError(RateCheckError):
    """Raised when an existing state file is unreadable or lacks ``config.value``."""
    pass


class FetchFailedError(RateCheckError):
    """Raised on transport errors, timeouts or a non-200 response."""
    pass


class ParseFailedError(RateCheckError):
    """Raised when the response body cannot be parsed as HTML."""
    pass


class ValueNotFoundError(RateCheckError):
    """Raised when the rate element is missing from the page."""
    pass


class InvalidRateError(RateCheckError):
    """Raised when the extracted rate text is not a decimal number."""
    pass
