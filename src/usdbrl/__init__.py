# src/usdbrl/__init__.py
"""
USDBRL - USD to BRL Exchange Rate Checker

A small command-line tool that scrapes the current USD→BRL rate from Wise,
compares it with the last rate it saw, prints an up/down/unchanged arrow
and remembers the new rate for the next run.
"""

__version__ = "1.0.0"
