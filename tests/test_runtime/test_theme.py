"""Tests for stock themes and the Classes base."""

import pytest

from stylekit.runtime import Classes, Counter, EmptyTheme, MappingTheme


class TestEmptyTheme:
    def test_always_equal(self) -> None:
        assert EmptyTheme().fast_cmp(EmptyTheme())
        assert EmptyTheme().fast_cmp(object())


class TestMappingTheme:
    def test_attribute_access(self) -> None:
        theme = MappingTheme({"spacing": 8, "palette": {"primary": "#123"}})
        assert theme.spacing == 8
        assert theme.palette.primary == "#123"

    def test_item_access(self) -> None:
        theme = MappingTheme({"font-size": "12px", "palette": {"primary": "#123"}})
        assert theme["font-size"] == "12px"
        assert theme["palette"]["primary"] == "#123"

    def test_missing_value(self) -> None:
        theme = MappingTheme({})
        with pytest.raises(AttributeError, match="no value 'color'"):
            theme.color
        with pytest.raises(KeyError):
            theme["color"]

    def test_private_names_not_looked_up(self) -> None:
        with pytest.raises(AttributeError):
            MappingTheme({"_x": 1})._x

    def test_fast_cmp_compares_data(self) -> None:
        assert MappingTheme({"a": 1}).fast_cmp(MappingTheme({"a": 1}))
        assert not MappingTheme({"a": 1}).fast_cmp(MappingTheme({"a": 2}))
        assert not MappingTheme({}).fast_cmp(EmptyTheme())

    def test_copies_input(self) -> None:
        data = {"a": 1}
        theme = MappingTheme(data)
        data["a"] = 2
        assert theme.a == 1


class TestClassesBase:
    def test_generate_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Classes.generate(EmptyTheme(), [], Counter())

    def test_new_not_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Classes.new(0)

    def test_counter_repr(self) -> None:
        assert repr(Counter(3)) == "Counter(3)"
