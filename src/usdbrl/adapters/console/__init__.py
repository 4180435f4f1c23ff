# src/usdbrl/adapters/console/__init__.py
"""
Console Adapters - Terminal Presentation

This package contains the rich-based console output sink.
"""

from usdbrl.adapters.console.presenter import ConsolePresenter, Presenter

__all__ = ["ConsolePresenter", "Presenter"]
