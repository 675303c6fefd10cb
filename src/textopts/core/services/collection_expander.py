"""
Caller-side interpretation of collection values.

The tokenizer returns collection values such as ``{a=1 b={c=2}}`` or
``{a=1},{a=2}`` as opaque text with their braces intact. This module splits
such a value into its members and parses each member with the tokenizer
again, which gives the grammar its recursive structure.
"""

from __future__ import annotations

import logging
from typing import Any

from textopts.core.interfaces.option_tokenizer_interface import IOptionTokenizer
from textopts.core.repositories.option_store import OptionStore
from textopts.core.services.option_tokenizer import (
    COLLECTION_CLOSE,
    COLLECTION_OPEN,
    ESCAPE_CHAR,
    OptionTokenizer,
)

logger = logging.getLogger(__name__)

NestedValue = str | dict[str, Any] | list[dict[str, Any]]


def is_collection(value: str) -> bool:
    return value.startswith(COLLECTION_OPEN)


def split_collection(value: str) -> list[str]:
    """Return the inner text of each top-level ``{...}`` member of ``value``.

    Backslash escapes protect braces from the depth count and are kept in the
    member text so the tokenizer can collapse them when the member is parsed.
    Characters outside top-level braces (the separating commas) are dropped.
    An unterminated member extends to the end of ``value``.
    """
    if not is_collection(value):
        return []

    members: list[str] = []
    current: list[str] = []
    depth = 0
    pos = 0
    length = len(value)
    while pos < length:
        char = value[pos]
        if char == ESCAPE_CHAR and pos + 1 < length:
            if depth > 0:
                current.append(value[pos : pos + 2])
            pos += 2
            continue
        if char == COLLECTION_OPEN:
            depth += 1
            if depth == 1:
                pos += 1
                continue
        elif char == COLLECTION_CLOSE and depth > 0:
            depth -= 1
            if depth == 0:
                members.append("".join(current))
                current = []
                pos += 1
                continue
        if depth > 0:
            current.append(char)
        pos += 1

    if depth > 0:
        logger.debug("Unterminated collection member: %r", "".join(current))
        members.append("".join(current))
    return members


class CollectionExpander:
    """Parses collection values into option stores using a tokenizer."""

    def __init__(self, tokenizer: IOptionTokenizer | None = None) -> None:
        self._tokenizer = tokenizer or OptionTokenizer()

    def expand_collection(self, value: str) -> list[OptionStore]:
        """Parse every member of a collection value into its own store."""
        return [self._tokenizer.parse(member) for member in split_collection(value)]

    def expand_tree(self, store: OptionStore) -> dict[str, NestedValue]:
        """Convert ``store`` to nested dictionaries, expanding collection values.

        A collection with a single member becomes a ``dict``; a comma-separated
        list of collections becomes a ``list`` of ``dict``. Other values stay
        strings.
        """
        tree: dict[str, NestedValue] = {}
        for option in store:
            if not is_collection(option.value):
                tree[option.name] = option.value
                continue
            members = [
                self.expand_tree(member)
                for member in self.expand_collection(option.value)
            ]
            tree[option.name] = members[0] if len(members) == 1 else members
        return tree


def expand_collection(
    value: str, tokenizer: IOptionTokenizer | None = None
) -> list[OptionStore]:
    return CollectionExpander(tokenizer).expand_collection(value)


def expand_tree(
    store: OptionStore, tokenizer: IOptionTokenizer | None = None
) -> dict[str, NestedValue]:
    return CollectionExpander(tokenizer).expand_tree(store)
