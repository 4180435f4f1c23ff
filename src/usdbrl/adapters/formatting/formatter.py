# src/usdbrl/adapters/formatting/formatter.py
"""
Rate Formatter - Comparison and Presentation

This module compares a freshly scraped rate with the persisted one and
formats the console lines: the banner, the arrow + rate result and error
lines. Comparison is a pure function; styling uses rich Text objects.

Files that USE this module:
- usdbrl.application.rate_checker (compare for the run result)
- usdbrl.adapters.console.presenter (render_* helpers for output)
- tests.test_formatter (unit tests)

Files that this module USES:
- usdbrl.domain.models (ComparisonResult, Direction)
- usdbrl.domain.errors (InvalidRateError)
- usdbrl.shared.validators (parse_decimal)
"""
from __future__ import annotations

from rich.text import Text

from usdbrl.domain.errors import InvalidRateError
from usdbrl.domain.models import ComparisonResult, Direction
from usdbrl.shared.validators import parse_decimal

GLYPHS = {
    Direction.DOWN: "▼",
    Direction.UP: "▲",
    Direction.UNCHANGED: "▶",
}

GLYPH_STYLES = {
    Direction.DOWN: "bold bright_red",
    Direction.UP: "bold bright_green",
    Direction.UNCHANGED: "bold bright_white",
}

RATE_STYLE = "bold yellow"
ERROR_STYLE = "red"


def parse_rate(rate_text: str) -> float:
    """
    Parse scraped rate text into a float.
    
    Raises:
        InvalidRateError: If the text is not a plain decimal number
    """
    value = parse_decimal(rate_text)
    if value is None:
        raise InvalidRateError(f"error parsing rate: {rate_text!r} is not a decimal number")
    return value


def compare(new_rate_text: str, old_value: float) -> ComparisonResult:
    """
    Compare a new rate with the previously stored one.
    
    A stored value of 0.0 (first run) makes any positive rate an ``UP``.
    
    Args:
        new_rate_text: Rate text as scraped, e.g. ``"5.21"``
        old_value: Previously persisted rate
        
    Returns:
        ComparisonResult carrying the verbatim rate text
        
    Raises:
        InvalidRateError: If ``new_rate_text`` is not numeric
    """
    new_value = parse_rate(new_rate_text)
    
    if new_value < old_value:
        direction = Direction.DOWN
    elif new_value > old_value:
        direction = Direction.UP
    else:
        direction = Direction.UNCHANGED
    
    return ComparisonResult(
        direction=direction,
        rate_text=new_rate_text,
        glyph=GLYPHS[direction],
    )


def render_comparison(result: ComparisonResult) -> Text:
    """Styled ``▲ 5.21`` line: coloured arrow, yellow rate."""
    return Text.assemble(
        (f"{result.glyph} ", GLYPH_STYLES[result.direction]),
        (result.rate_text, RATE_STYLE),
    )


def render_banner(source_name: str) -> Text:
    """Styled line announcing where the rate is fetched from."""
    return Text.assemble(
        ("Fetching USD to BRL exchange rate from ", "bold bright_blue"),
        (source_name, "bold green"),
    )


def render_error(message: str) -> Text:
    return Text(f"Error: {message}", style=ERROR_STYLE)
