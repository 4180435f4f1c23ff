# src/usdbrl/app.py
"""
Application Entry Point - Single Rate Check

This module serves as the composition root for usdbrl. It loads settings,
configures logging, wires the rate checker and exits with its status.
Every invocation performs exactly one check; scheduling is left to cron
or similar.

Files that USE this module:
- usdbrl.__main__ (python -m usdbrl)
- console script "usdbrl" (pyproject.toml)

Files that this module USES:
- usdbrl.shared.logging_conf (setup_logging for logging configuration)
- usdbrl.config (Settings for configuration management)
- usdbrl.adapters.console.presenter (ConsolePresenter terminal output)
- usdbrl.application.rate_checker (RateChecker for the run itself)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes

from pydantic import ValidationError  # Raised when environment settings are invalid

from usdbrl.shared.logging_conf import setup_logging  # Configure logging with file rotation
from usdbrl.config import Settings  # Environment-driven configuration
from usdbrl.adapters.console.presenter import ConsolePresenter  # Rich terminal output
from usdbrl.application.rate_checker import EXIT_FATAL, RateChecker  # One fetch/compare/save cycle


def main() -> None:
    """
    Run one USD→BRL rate check and exit.

    This function:
    1. Loads and validates settings
    2. Sets up logging
    3. Builds the rate checker with a console presenter
    4. Runs the check and exits with 0 on success, 1 on failure
    """
    presenter = ConsolePresenter()

    try:
        settings = Settings()
    except ValidationError as e:
        # Logging is not configured yet; report on the console only
        presenter.error(f"invalid configuration: {e}")
        sys.exit(EXIT_FATAL)

    setup_logging(
        level=settings.log_level_number,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)
    logger.info("Checking %s (state dir: %s)", settings.source_url, settings.app_name)

    checker = RateChecker.from_settings(settings, presenter)

    try:
        exit_code = checker.run()
    except KeyboardInterrupt:
        logger.info("Stopped by user (KeyboardInterrupt)")
        presenter.close()
        raise
    except Exception as e:
        logger.exception("Unexpected error during rate check: %s (type: %s)", e, type(e).__name__)
        presenter.error(str(e))
        exit_code = EXIT_FATAL

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
