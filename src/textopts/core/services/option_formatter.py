from __future__ import annotations

from collections.abc import Iterable

from textopts.core.domain.option import Option
from textopts.core.services.option_tokenizer import (
    COLLECTION_OPEN,
    ESCAPE_CHAR,
    QUOTE_CHARS,
    WHITESPACE,
    scan_value,
)

_DOUBLE_QUOTE = '"'


def _is_literal_collection(value: str) -> bool:
    """True when ``value`` reads back unchanged through the collection grammar.

    The probe suffix catches values whose scan would continue into the next
    token (unterminated braces or a trailing comma).
    """
    if not value.startswith(COLLECTION_OPEN) or ESCAPE_CHAR in value:
        return False
    scanned, end = scan_value(value + " x", 0)
    return end == len(value) and scanned == value


def _quote(value: str) -> str:
    escaped = value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace(
        _DOUBLE_QUOTE, ESCAPE_CHAR + _DOUBLE_QUOTE
    )
    return f"{_DOUBLE_QUOTE}{escaped}{_DOUBLE_QUOTE}"


def format_value(value: str) -> str:
    """Render ``value`` so that the tokenizer reads it back unchanged."""
    if not value:
        return _quote(value)
    if _is_literal_collection(value):
        return value
    if value[0] in QUOTE_CHARS or value[0] == COLLECTION_OPEN or any(
        char in WHITESPACE for char in value
    ):
        return _quote(value)
    return value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)


def format_options(options: Iterable[Option]) -> str:
    """Render options as a space-separated ``name=value`` string.

    Names are written verbatim, so only names the tokenizer can read (no
    whitespace and no ``=``) survive a round trip.
    """
    return " ".join(
        f"{option.name}={format_value(option.value)}" for option in options
    )
