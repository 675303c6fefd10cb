from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from textopts.core.repositories.option_store import OptionStore


class IOptionTokenizer(Protocol):
    """Parses an option string into name/value pairs.

    Implementations keep no state between calls.
    """

    def tokenize(self, raw: str) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in the order they appear in ``raw``."""
        ...

    def parse(
        self, raw: str | None, store: OptionStore | None = None
    ) -> OptionStore:
        """Add every token of ``raw`` to ``store`` and return it.

        Args:
            raw: Option string (``None`` leaves the store untouched)
            store: Store to update; a new empty store is used when omitted

        Returns:
            The updated store.
        """
        ...
