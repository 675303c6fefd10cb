"""
Tokenizer for space-delimited option strings.

Accepted grammar (PAPI text options)::

    options    = token *( 1*SP token )
    token      = name [ "=" value ]
    value      = quoted / collection / bare
    quoted     = ( "'" / DQUOTE ) *( escaped / not-quote ) matching-quote
    collection = "{" *( escaped / not-brace / collection ) "}"
    bare       = 1*( escaped / not-space )
    escaped    = "\\" any-char

A name without a value is a boolean option: ``"true"``, or ``"false"`` with
the leading ``no`` removed when the name starts with ``no`` in any case.
Collection values keep their braces; callers interpret the contents by
running the tokenizer again (see ``collection_expander``).

Malformed input never raises. An unterminated quote or brace makes the value
run to the end of the string, and scanning stops at the first position where
no name can be read.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from textopts.constants import FALSE_VALUE, NEGATION_PREFIX, TRUE_VALUE
from textopts.core.domain.option import fold_name
from textopts.core.interfaces.option_tokenizer_interface import IOptionTokenizer
from textopts.core.repositories.option_store import OptionStore

logger = logging.getLogger(__name__)

# ASCII space class, matching isspace() in the C locale
WHITESPACE = frozenset(" \t\n\v\f\r")
QUOTE_CHARS = frozenset("'\"")
ESCAPE_CHAR = "\\"
ASSIGN_CHAR = "="
COLLECTION_OPEN = "{"
COLLECTION_CLOSE = "}"
COLLECTION_SEPARATOR = ","


def skip_whitespace(text: str, pos: int) -> int:
    length = len(text)
    while pos < length and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _boolean_token(name: str) -> tuple[str, str]:
    if fold_name(name[: len(NEGATION_PREFIX)]) == NEGATION_PREFIX:
        return name[len(NEGATION_PREFIX) :], FALSE_VALUE
    return name, TRUE_VALUE


def _scan_name(text: str, pos: int) -> int:
    length = len(text)
    while pos < length and text[pos] not in WHITESPACE and text[pos] != ASSIGN_CHAR:
        pos += 1
    return pos


def _scan_quoted(text: str, pos: int) -> tuple[str, int]:
    """Read a quoted value starting at the opening quote.

    Returns the unescaped value without quotes and the position after the
    closing quote (or the end of ``text`` when the quote is unterminated).
    """
    length = len(text)
    quote = text[pos]
    pos += 1
    chars: list[str] = []
    while pos < length and text[pos] != quote:
        if text[pos] == ESCAPE_CHAR and pos + 1 < length:
            pos += 1
        chars.append(text[pos])
        pos += 1
    if pos < length:
        pos += 1
    else:
        logger.debug("Unterminated %s-quoted value runs to end of input", quote)
    return "".join(chars), pos


def _scan_collection(text: str, pos: int) -> tuple[str, int]:
    """Read a brace-delimited value starting at the opening brace.

    The returned value keeps its braces. A closing brace that brings the depth
    back to zero ends the value unless it is directly followed by a comma, in
    which case the comma and the next collection belong to the same value.
    """
    length = len(text)
    chars = [COLLECTION_OPEN]
    pos += 1
    depth = 1
    while pos < length:
        char = text[pos]
        if char == COLLECTION_OPEN:
            depth += 1
        elif char == COLLECTION_CLOSE:
            depth -= 1
            if depth == 0:
                chars.append(char)
                pos += 1
                if pos < length and text[pos] == COLLECTION_SEPARATOR:
                    chars.append(COLLECTION_SEPARATOR)
                    pos += 1
                    continue
                return "".join(chars), pos
        elif char == ESCAPE_CHAR and pos + 1 < length:
            pos += 1
            char = text[pos]
        chars.append(char)
        pos += 1
    if depth > 0:
        logger.debug("Unterminated collection value runs to end of input")
    return "".join(chars), pos


def _scan_bare(text: str, pos: int) -> tuple[str, int]:
    length = len(text)
    chars: list[str] = []
    while pos < length and text[pos] not in WHITESPACE:
        if text[pos] == ESCAPE_CHAR and pos + 1 < length:
            pos += 1
        chars.append(text[pos])
        pos += 1
    return "".join(chars), pos


def scan_value(text: str, pos: int) -> tuple[str, int]:
    """Read the value starting at ``pos``; its first character picks the grammar."""
    if pos < len(text):
        if text[pos] in QUOTE_CHARS:
            return _scan_quoted(text, pos)
        if text[pos] == COLLECTION_OPEN:
            return _scan_collection(text, pos)
    return _scan_bare(text, pos)


class OptionTokenizer(IOptionTokenizer):
    """Single-pass tokenizer that feeds name/value pairs into an ``OptionStore``."""

    def tokenize(self, raw: str) -> Iterator[tuple[str, str]]:
        text = str(raw)
        length = len(text)
        pos = skip_whitespace(text, 0)

        while pos < length:
            start = pos
            pos = _scan_name(text, pos)
            if pos == start:
                logger.debug(
                    "Discarding trailing content without a name: %r", text[start:]
                )
                break
            name = text[start:pos]

            pos = skip_whitespace(text, pos)
            if pos >= length or text[pos] != ASSIGN_CHAR:
                yield _boolean_token(name)
                continue

            value, pos = scan_value(text, pos + 1)
            pos = skip_whitespace(text, pos)
            yield name, value

    def parse(
        self, raw: str | None, store: OptionStore | None = None
    ) -> OptionStore:
        if store is None:
            store = OptionStore()
        if raw is None:
            return store

        for name, value in self.tokenize(raw):
            logger.debug("Parsed option %s=%r", name, value)
            store.add(name, value)
        return store


_default_tokenizer = OptionTokenizer()


def parse_options(raw: str | None, store: OptionStore | None = None) -> OptionStore:
    """Parse ``raw`` into ``store`` using the shared tokenizer."""
    return _default_tokenizer.parse(raw, store)
