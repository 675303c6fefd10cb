from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st
from textopts.core.domain.option import Option
from textopts.core.repositories.option_store import OptionStore

names = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126), min_size=1
)
values = st.text(max_size=20)


class TestAdd:
    def test_add_appends_and_returns_count(self, store: OptionStore) -> None:
        assert store.add("copies", "2") == 1
        assert store.add("media", "A4") == 2
        assert store.names() == ["copies", "media"]

    def test_add_overwrites_value_and_keeps_original_name(
        self, store: OptionStore
    ) -> None:
        store.add("Media", "A4")
        assert store.add("MEDIA", "Letter") == 1
        assert [o.as_tuple() for o in store] == [("Media", "Letter")]

    def test_overwrite_keeps_position(self, store: OptionStore) -> None:
        store.add("a", "1")
        store.add("b", "2")
        store.add("c", "3")
        store.add("B", "20")
        assert store.to_dict() == {"a": "1", "b": "20", "c": "3"}

    def test_empty_value_is_stored(self, store: OptionStore) -> None:
        assert store.add("title", "") == 1
        assert store.get("title") == ""

    @pytest.mark.parametrize(
        "name, value",
        [(None, "x"), ("", "x"), ("name", None)],
    )
    def test_invalid_arguments_are_ignored(
        self, store: OptionStore, name: str | None, value: str | None
    ) -> None:
        store.add("keep", "1")
        assert store.add(name, value) == 1
        assert store.to_dict() == {"keep": "1"}

    def test_memory_error_abandons_add(
        self, store: OptionStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _no_memory(**kwargs: str) -> Option:
            raise MemoryError

        monkeypatch.setattr(
            "textopts.core.repositories.option_store.Option", _no_memory
        )
        assert store.add("copies", "1") == 0
        assert len(store) == 0

    def test_memory_error_leaves_existing_options(
        self, store: OptionStore, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store.add("copies", "1")

        def _no_memory(**kwargs: str) -> Option:
            raise MemoryError

        monkeypatch.setattr(
            "textopts.core.repositories.option_store.Option", _no_memory
        )
        assert store.add("media", "A4") == 0
        assert store.to_dict() == {"copies": "1"}


class TestGet:
    def test_get_is_case_insensitive(self, store: OptionStore) -> None:
        store.add("Foo", "1")
        assert store.get("foo") == "1"
        assert store.get("FOO") == "1"

    def test_get_missing_returns_none(self, store: OptionStore) -> None:
        store.add("a", "1")
        assert store.get("b") is None

    def test_get_on_empty_store(self, store: OptionStore) -> None:
        assert store.get("a") is None

    def test_get_none_name(self, store: OptionStore) -> None:
        store.add("a", "1")
        assert store.get(None) is None

    def test_case_folding_is_ascii_only(self, store: OptionStore) -> None:
        store.add("Été", "1")
        assert store.get("été") is None
        assert store.get("ÉTé") == "1"


class TestRemove:
    def test_remove_only_option_empties_store(self, store: OptionStore) -> None:
        store.add("a", "1")
        assert store.remove("A") == 0
        assert len(store) == 0
        assert store.get("a") is None

    def test_remove_preserves_order(self, store: OptionStore) -> None:
        for name in ("a", "b", "c", "d"):
            store.add(name, name.upper())
        assert store.remove("b") == 3
        assert store.names() == ["a", "c", "d"]

    def test_remove_missing_is_noop(self, store: OptionStore) -> None:
        store.add("a", "1")
        assert store.remove("z") == 1
        assert store.remove(None) == 1

    def test_remove_on_empty_store(self, store: OptionStore) -> None:
        assert store.remove("a") == 0


class TestClear:
    def test_clear_forgets_every_option(self, store: OptionStore) -> None:
        for name in ("a", "b", "c"):
            store.add(name, "1")
        store.clear()
        assert len(store) == 0
        assert all(store.get(name) is None for name in ("a", "b", "c"))

    def test_clear_is_idempotent(self, store: OptionStore) -> None:
        store.clear()
        store.clear()
        assert list(store) == []


class TestContainerBehaviour:
    def test_contains_ignores_case(self, store: OptionStore) -> None:
        store.add("Copies", "1")
        assert "copies" in store
        assert "media" not in store
        assert 3 not in store

    def test_init_from_pairs_deduplicates(self) -> None:
        store = OptionStore([("a", "1"), Option(name="A", value="2"), ("b", "3")])
        assert [o.as_tuple() for o in store] == [("a", "2"), ("b", "3")]

    def test_copy_is_independent(self, store: OptionStore) -> None:
        store.add("a", "1")
        duplicate = store.copy()
        duplicate.add("a", "2")
        assert store.get("a") == "1"
        assert duplicate == OptionStore([("a", "2")])

    def test_iteration_survives_mutation(self, store: OptionStore) -> None:
        store.add("a", "1")
        store.add("b", "2")
        for option in store:
            store.remove(option.name)
        assert len(store) == 0


@given(name=names, value=values)
def test_get_returns_added_value(name: str, value: str) -> None:
    store = OptionStore()
    store.add(name, value)
    assert store.get(name) == value
    assert store.get(name.upper()) == value
    assert store.get(name.lower()) == value


@given(name=names, first=values, second=values)
def test_repeated_add_keeps_single_entry(name: str, first: str, second: str) -> None:
    store = OptionStore()
    store.add(name, first)
    store.add(name, second)
    assert len(store) == 1
    assert store.get(name) == second
