# src/usdbrl/domain/models.py
"""
Domain Models - Rate Check Value Objects

This module contains the value objects passed between the steps of a run:
- Persisted state (last observed rate)
- Fetch outcome (rate text or error)
- Comparison result (direction and display text)

Files that USE this module:
- usdbrl.adapters.persistence.file_store (loads and saves PersistedState)
- usdbrl.adapters.crawlers.base (produces FetchOutcome)
- usdbrl.adapters.formatting.formatter (produces ComparisonResult)
- usdbrl.application.rate_checker (sequences all of the above)

Files that this module USES:
- usdbrl.domain.errors (RateCheckError carried by FetchOutcome)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Enumerations for the comparison direction
from typing import Optional  # Type hints for optional values

from usdbrl.domain.errors import RateCheckError


@dataclass
class PersistedState:
    """
    The last observed exchange rate.

    Mutable on purpose: the orchestrator overwrites ``value`` once per
    successful run before saving it.
    """
    value: float = 0.0


class Direction(str, Enum):
    """How a freshly fetched rate compares to the persisted one."""

    UP = "up"
    DOWN = "down"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing a new rate with the previous one.

    Attributes:
        direction: Up, Down or Unchanged
        rate_text: The rate exactly as scraped (never reformatted)
        glyph: Arrow shown in front of the rate
    """
    direction: Direction
    rate_text: str
    glyph: str

    @property
    def display_rate(self) -> str:
        """Arrow followed by the verbatim rate text, e.g. ``▲ 5.21``."""
        return f"{self.glyph} {self.rate_text}"


@dataclass(frozen=True)
class FetchOutcome:
    """
    Result of one fetch: exactly one of ``rate`` or ``error`` is set.

    Use the ``success`` / ``failure`` constructors rather than building
    instances directly.
    """
    rate: Optional[str] = None
    error: Optional[RateCheckError] = None

    def __post_init__(self) -> None:
        if (self.rate is None) == (self.error is None):
            raise ValueError("FetchOutcome needs exactly one of rate or error")

    @classmethod
    def success(cls, rate: str) -> FetchOutcome:
        return cls(rate=rate)

    @classmethod
    def failure(cls, error: RateCheckError) -> FetchOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the rate text or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.rate  # type: ignore[return-value]
