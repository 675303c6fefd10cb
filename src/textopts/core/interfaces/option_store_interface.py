from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from textopts.core.domain.option import Option


class IOptionStore(ABC):
    """Ordered collection of options keyed by case-insensitive name."""

    @abstractmethod
    def add(self, name: str | None, value: str | None) -> int:
        pass

    @abstractmethod
    def get(self, name: str | None) -> str | None:
        pass

    @abstractmethod
    def remove(self, name: str | None) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Option]:
        pass
