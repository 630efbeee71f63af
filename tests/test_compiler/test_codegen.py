"""Tests for Python module generation."""

import ast
from pathlib import Path

from stylekit.compiler import compile_ast, compile_source, render_class, render_module
from stylekit.config import CompilerConfig
from stylekit.parser import parse_style

FIXTURES = Path(__file__).parent.parent / "fixtures"

EXPECTED_SIMPLE = '''\
@dataclass(frozen=True)
class MyClasses(Classes):
    blue_color: str
    red_color: str

    @staticmethod
    def generate(theme: MyTheme, _css: TextSink, _counter: Counter) -> None:
        _start = _counter.value
        _css.write(
            (
                'div.css-{} {{ color: {}; }}\\n'
                'div.css-{} {{ color: {}; }}\\n'
            ).format(
                _start + 1,
                ("red"),
                _start + 0,
                ("blue"),
            )
        )
        _counter.value = _start + 2

    @classmethod
    def new(cls, start: int) -> MyClasses:
        return cls(
            blue_color='css-' + str(start + 0),
            red_color='css-' + str(start + 1),
        )
'''


class TestRenderClass:
    def test_simple_block(self) -> None:
        style = parse_style(
            """(theme: MyTheme) -> MyClasses {
                "div.red_color" { color: "red", },
                "div.blue_color" { color: "blue", },
            }"""
        )
        assert render_class(compile_ast(style)) == EXPECTED_SIMPLE

    def test_block_without_classnames(self) -> None:
        source = render_class(compile_ast(parse_style('(t: T) -> Base { "*" { margin: 0 } }')))
        assert "return cls()" in source
        assert "_counter.value = _start + 0" in source

    def test_custom_prefix_in_constructor(self) -> None:
        compiled = compile_ast(parse_style("{ a { b: 1 } }"), CompilerConfig(class_prefix="x-"))
        assert "a='x-' + str(start + 0)," in render_class(compiled)

    def test_multiline_value_stays_valid(self) -> None:
        compiled = compile_ast(parse_style("{ a { b: fmt(\n  1,  # one\n  2,\n) } }"))
        ast.parse(render_module([compiled]))


class TestRenderModule:
    def test_module_is_valid_python(self) -> None:
        compiled = compile_source((FIXTURES / "keyframes.style").read_text())
        ast.parse(render_module(compiled))

    def test_header_and_imports(self) -> None:
        compiled = compile_source((FIXTURES / "simple.style").read_text())
        module = render_module(
            compiled, imports=["from app.theme import AppTheme", "  "], source_name="simple.style"
        )
        lines = module.splitlines()
        assert lines[0] == "# Generated by stylekit from simple.style. Do not edit."
        assert lines[1] == "from __future__ import annotations"
        assert "from stylekit.runtime import Classes, Counter, EmptyTheme, TextSink" in lines
        assert "from app.theme import AppTheme" in lines

    def test_one_class_per_block(self) -> None:
        compiled = compile_source((FIXTURES / "multi.style").read_text())
        tree = ast.parse(render_module(compiled))
        classes = [node.name for node in tree.body if isinstance(node, ast.ClassDef)]
        assert classes == ["SharedClasses", "RedClass", "BlueClass"]

    def test_byte_stable(self) -> None:
        source = (FIXTURES / "keyframes.style").read_text()
        assert render_module(compile_source(source)) == render_module(compile_source(source))
