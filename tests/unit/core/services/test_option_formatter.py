from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from textopts.core.repositories.option_store import OptionStore
from textopts.core.services.option_formatter import format_options, format_value
from textopts.core.services.option_tokenizer import parse_options


@pytest.mark.parametrize(
    "value, expected",
    [
        ("A4", "A4"),
        ("", '""'),
        ("My Document", '"My Document"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("C:\\tmp", "C:\\\\tmp"),
        ("'quoted", '"\'quoted"'),
        ("{a=1 b=2}", "{a=1 b=2}"),
        ("{a=1},{a=2}", "{a=1},{a=2}"),
        ("{unbalanced", '"{unbalanced"'),
        ("{a}x", '"{a}x"'),
        ('a"b', 'a"b'),
    ],
)
def test_format_value(value: str, expected: str) -> None:
    assert format_value(value) == expected


def test_format_options_uses_store_order() -> None:
    store = OptionStore(
        [("copies", "2"), ("title", "My Doc"), ("collate", "false")]
    )
    assert format_options(store) == 'copies=2 title="My Doc" collate=false'


def test_format_empty_store() -> None:
    assert format_options(OptionStore()) == ""


names = st.text(
    alphabet=st.characters(
        min_codepoint=33, max_codepoint=126, exclude_characters="="
    ),
    min_size=1,
    max_size=8,
)
values = st.text(
    alphabet=st.characters(min_codepoint=9, max_codepoint=126), max_size=12
)


@given(pairs=st.lists(st.tuples(names, values), max_size=5))
def test_formatted_store_parses_back(pairs: list[tuple[str, str]]) -> None:
    store = OptionStore(pairs)
    assert parse_options(format_options(store)) == store
