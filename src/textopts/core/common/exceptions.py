"""
Common exception classes for textopts.

The option store and the tokenizer never raise for degenerate input; these
exceptions are used by the outer layers (configuration loading and the CLI)
to categorize failures.
"""

from __future__ import annotations


class TextOptionsError(Exception):
    """Base exception class for all textopts errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Extra attributes are exposed as-is and included in to_dict()
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ConfigurationError(TextOptionsError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ParsingError(TextOptionsError):
    """Raised when an option string cannot be obtained for parsing."""

    def __init__(
        self, message: str = "Parsing failed", details: dict | None = None, **kwargs
    ):
        super().__init__(message, details, **kwargs)
