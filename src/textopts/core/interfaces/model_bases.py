"""Nominal marker base classes for model standardization.

`DomainModel` is the base for Pydantic-based domain and configuration
models so static type checkers can tell them apart from plain classes.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        # Prefer a unique identifier when the model has one
        repr_attrs = ("id", "name")
        for attr in repr_attrs:
            if hasattr(self, attr):
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"
