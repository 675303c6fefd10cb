import pytest
from textopts.core.common.exceptions import (
    ConfigurationError,
    ParsingError,
    TextOptionsError,
)


@pytest.mark.parametrize(
    "exc_class, default_message",
    [
        (ConfigurationError, "Configuration error"),
        (ParsingError, "Parsing failed"),
    ],
)
def test_default_messages(
    exc_class: type[TextOptionsError], default_message: str
) -> None:
    exc = exc_class()
    assert isinstance(exc, TextOptionsError)
    assert exc.message == default_message
    assert str(exc) == default_message
    assert exc.details == {}


def test_to_dict_includes_details_and_extra_attributes() -> None:
    exc = ConfigurationError("bad file", details={"path": "x.yaml"}, source="cli")
    assert exc.to_dict() == {
        "error": {
            "message": "bad file",
            "type": "ConfigurationError",
            "details": {"path": "x.yaml"},
            "source": "cli",
        }
    }
