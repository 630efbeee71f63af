"""Python code generation for compiled style blocks.

Each block becomes a frozen dataclass deriving from ``stylekit.runtime.Classes``
with one ``str`` field per classname, a ``generate`` staticmethod and a ``new``
classmethod. The emitted text depends only on the compiled input.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from stylekit.compiler.compile import CompiledStyle
from stylekit.compiler.output import SlotParam

_INDENT = "    "

_PREAMBLE = """\
from __future__ import annotations

from dataclasses import dataclass

from stylekit.runtime import Classes, Counter, EmptyTheme, TextSink
"""


def _template_literal(template: str, depth: int) -> list[str]:
    """Emit the template as implicitly concatenated literals, one per CSS line."""
    chunks = template.splitlines(keepends=True) or [""]
    pad = _INDENT * depth
    return [pad + repr(chunk) for chunk in chunks]


def _param_source(param: object) -> str:
    if isinstance(param, SlotParam):
        return f"_start + {param.index}"
    expression = param.expression  # type: ignore[attr-defined]
    if "\n" in expression:
        return f"({expression}\n{_INDENT * 4})"
    return f"({expression})"


def render_generate(compiled: CompiledStyle) -> list[str]:
    sig = compiled.signature
    body = [
        "@staticmethod",
        f"def generate({sig.theme_var}: {sig.theme_type}, _css: TextSink, _counter: Counter) -> None:",
        f"{_INDENT}_start = _counter.value",
        f"{_INDENT}_css.write(",
        f"{_INDENT * 2}(",
        *_template_literal(compiled.output.template, 3),
        f"{_INDENT * 2}).format(",
        *(f"{_INDENT * 3}{_param_source(p)}," for p in compiled.output.params),
        f"{_INDENT * 2})",
        f"{_INDENT})",
        f"{_INDENT}_counter.value = _start + {compiled.slot_count}",
    ]
    return body


def render_new(compiled: CompiledStyle) -> list[str]:
    prefix = repr(compiled.config.class_prefix)
    names = compiled.table.names()
    body = [
        "@classmethod",
        f"def new(cls, start: int) -> {compiled.signature.result_type}:",
    ]
    if not names:
        body.append(f"{_INDENT}return cls()")
        return body
    body.append(f"{_INDENT}return cls(")
    for name in names:
        body.append(f"{_INDENT * 2}{name}={prefix} + str(start + {compiled.table[name]}),")
    body.append(f"{_INDENT})")
    return body


def render_class(compiled: CompiledStyle) -> str:
    """Source of the Classes subclass for one compiled block."""
    names = compiled.table.names()
    lines = [
        "@dataclass(frozen=True)",
        f"class {compiled.signature.result_type}(Classes):",
    ]
    lines.extend(f"{_INDENT}{name}: str" for name in names)
    if names:
        lines.append("")
    lines.extend(_INDENT + line if line else line for line in render_generate(compiled))
    lines.append("")
    lines.extend(_INDENT + line for line in render_new(compiled))
    return "\n".join(lines) + "\n"


def render_module(
    compiled_styles: Sequence[CompiledStyle],
    imports: Iterable[str] = (),
    source_name: str | None = None,
) -> str:
    """Source of a Python module defining every compiled block."""
    header = "# Generated by stylekit"
    if source_name:
        header += f" from {source_name}"
    header += ". Do not edit.\n"

    parts = [header + _PREAMBLE]
    extra = [line.strip() for line in imports if line.strip()]
    if extra:
        parts[0] += "\n".join(extra) + "\n"
    parts.extend(render_class(c) for c in compiled_styles)
    return "\n\n".join(parts)
