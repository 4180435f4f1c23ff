# src/usdbrl/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the value objects and exceptions of a rate check.
No dependencies on infrastructure or external systems.
"""

from usdbrl.domain.models import (
    ComparisonResult,
    Direction,
    FetchOutcome,
    PersistedState,
)
from usdbrl.domain.errors import (
    CorruptStateError,
    FetchFailedError,
    InvalidRateError,
    ParseFailedError,
    RateCheckError,
    StorageUnavailableError,
    ValueNotFoundError,
)

__all__ = [
    "PersistedState",
    "Direction",
    "ComparisonResult",
    "FetchOutcome",
    "RateCheckError",
    "StorageUnavailableError",
    "CorruptStateError",
    "FetchFailedError",
    "ParseFailedError",
    "ValueNotFoundError",
    "InvalidRateError",
]
