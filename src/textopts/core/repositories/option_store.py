from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from textopts.core.domain.option import Option
from textopts.core.interfaces.option_store_interface import IOptionStore

logger = logging.getLogger(__name__)


class OptionStore(IOptionStore):
    """In-memory option store.

    Options keep their insertion order. Lookups compare names ignoring ASCII
    case and at most one option exists per name. Invalid arguments never raise;
    the affected call simply leaves the store unchanged.
    """

    def __init__(
        self, options: Iterable[Option | tuple[str, str]] | None = None
    ) -> None:
        self._options: list[Option] = []
        for option in options or ():
            if isinstance(option, Option):
                self.add(option.name, option.value)
            else:
                self.add(*option)

    def _index_of(self, name: str) -> int | None:
        for index, option in enumerate(self._options):
            if option.matches(name):
                return index
        return None

    def add(self, name: str | None, value: str | None) -> int:
        """Add an option or replace the value of an existing one.

        Returns:
            The number of options after the call, or 0 when the option
            could not be allocated.
        """
        if not name or value is None:
            return len(self._options)

        index = self._index_of(name)
        try:
            if index is None:
                self._options.append(Option(name=name, value=value))
            else:
                logger.debug(
                    "Replacing value of option '%s'", self._options[index].name
                )
                # The stored name keeps its original spelling
                self._options[index] = self._options[index].with_value(value)
        except MemoryError:
            logger.error("Out of memory while adding option '%s'", name)
            return 0
        return len(self._options)

    def get(self, name: str | None) -> str | None:
        if name is None or not self._options:
            return None
        index = self._index_of(name)
        return None if index is None else self._options[index].value

    def remove(self, name: str | None) -> int:
        """Remove an option by name, keeping the order of the remaining ones.

        Returns:
            The number of options after the call.
        """
        if name is None or not self._options:
            return len(self._options)
        index = self._index_of(name)
        if index is not None:
            removed = self._options.pop(index)
            logger.debug("Removed option '%s'", removed.name)
        return len(self._options)

    def clear(self) -> None:
        self._options.clear()

    def copy(self) -> OptionStore:
        return OptionStore(self._options)

    def names(self) -> list[str]:
        return [option.name for option in self._options]

    def to_dict(self) -> dict[str, str]:
        return {option.name: option.value for option in self._options}

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index_of(name) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionStore):
            return NotImplemented
        return [o.as_tuple() for o in self] == [o.as_tuple() for o in other]

    def __repr__(self) -> str:
        return f"OptionStore({[o.as_tuple() for o in self._options]!r})"
