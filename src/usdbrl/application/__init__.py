# src/usdbrl/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the services that sequence a rate check run.
"""

from usdbrl.application.rate_checker import RateChecker
from usdbrl.application.state_manager import StateManager

__all__ = [
    "RateChecker",
    "StateManager",
]
