# src/usdbrl/__main__.py
"""Module entry point: ``python -m usdbrl``."""

from usdbrl.app import main

if __name__ == "__main__":
    main()
