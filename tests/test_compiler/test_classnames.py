"""Tests for classname collection and slot assignment."""

import itertools

import pytest

from stylekit.compiler import resolve_classnames
from stylekit.model.style import SourceLocation
from stylekit.parser import parse_style


def _table(source: str) -> dict[str, int]:
    return dict(resolve_classnames(parse_style(source).rules))


class TestSortedSlots:
    def test_sorted_not_declared_order(self) -> None:
        table = _table('{ red_text { color: "red" }, "div.blue_text" { color: "blue" } }')
        assert table == {"blue_text": 0, "red_text": 1}

    @pytest.mark.parametrize("order", list(itertools.permutations(["zeta", "alpha", "mid"])))
    def test_independent_of_source_order(self, order: tuple[str, ...]) -> None:
        source = "{ " + ", ".join(f"{name} {{ a: 1 }}" for name in order) + " }"
        assert _table(source) == {"alpha": 0, "mid": 1, "zeta": 2}

    def test_uppercase_sorts_before_lowercase(self) -> None:
        assert _table("{ b { a: 1 }, B { a: 1 }, a { a: 1 } }") == {"B": 0, "a": 1, "b": 2}

    def test_no_classnames(self) -> None:
        assert _table('{ "*" { margin: 0 }, "div > span" { margin: 0 } }') == {}


class TestCollection:
    def test_duplicates_collapse(self) -> None:
        table = _table('{ text { a: 1 }, "div.text" { a: 2 }, "span.text.text" { a: 3 } }')
        assert table == {"text": 0}

    def test_first_location_retained(self) -> None:
        source = '{\n  "div.text" { a: 1 },\n  text { a: 2 },\n}'
        table = resolve_classnames(parse_style(source).rules)
        assert table.locations["text"] == SourceLocation(2, 3)

    def test_nested_at_rules_are_searched(self) -> None:
        source = """{
            outer { a: 1 },
            "@media print" {
                "@supports (display: grid)" {
                    ".deep .deeper" { a: 1 },
                },
                ".inner" { a: 1 },
            },
        }"""
        assert _table(source) == {"deep": 0, "deeper": 1, "inner": 2, "outer": 3}

    def test_dense_indices(self) -> None:
        table = resolve_classnames(parse_style("{ c { a: 1 }, a { a: 1 }, b { a: 1 } }").rules)
        assert sorted(table.values()) == list(range(len(table)))
        assert table.names() == ["a", "b", "c"]


class TestDeterminism:
    def test_same_source_same_table(self) -> None:
        source = '{ x { a: 1 }, "div.y" { a: 2 }, "@media print" { ".z" { a: 3 } } }'
        first = resolve_classnames(parse_style(source).rules)
        second = resolve_classnames(parse_style(source).rules)
        assert first == second
