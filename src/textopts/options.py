"""
Store-in/store-out functions over ``OptionStore``.

These mirror the operation table of the library for callers that prefer
plain functions to methods. Every function tolerates ``None`` arguments and
returns the store unchanged in that case.
"""

from __future__ import annotations

from textopts.core.repositories.option_store import OptionStore
from textopts.core.services.option_tokenizer import parse_options


def add_option(
    name: str | None, value: str | None, store: OptionStore | None = None
) -> OptionStore:
    """Add or overwrite ``name`` and return the store (a new one when omitted)."""
    if store is None:
        store = OptionStore()
    store.add(name, value)
    return store


def get_option(name: str | None, store: OptionStore | None) -> str | None:
    if store is None:
        return None
    return store.get(name)


def remove_option(name: str | None, store: OptionStore | None) -> OptionStore | None:
    if store is not None:
        store.remove(name)
    return store


def free_options(store: OptionStore | None) -> None:
    """Release every option held by ``store``."""
    if store is not None:
        store.clear()


__all__ = [
    "add_option",
    "free_options",
    "get_option",
    "parse_options",
    "remove_option",
]
