from __future__ import annotations

from pydantic import ConfigDict, Field

from textopts.core.interfaces.model_bases import DomainModel

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def fold_name(name: str) -> str:
    """Lowercase the ASCII letters of an option name, leaving others intact."""
    return name.translate(_ASCII_LOWER)


class Option(DomainModel):
    """A single name/value pair held by an option store."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    value: str

    def matches(self, name: str) -> bool:
        """Return True when ``name`` equals this option's name ignoring ASCII case."""
        return fold_name(self.name) == fold_name(name)

    def with_value(self, value: str) -> Option:
        return self.model_copy(update={"value": value})

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.value)
