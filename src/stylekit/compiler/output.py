"""Output assembler: turn a rule tree into one format template plus params.

The whole style block becomes a single ``str.format`` template. Literal text
has its braces doubled; every classname and every declaration value becomes a
``{}`` placeholder with a matching entry in ``Output.params``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Union

from stylekit.compiler.classnames import ClassnameTable
from stylekit.config import DEFAULT_CONFIG, CompilerConfig
from stylekit.model.style import ClassName, Header, NestedBody, Rule, RuleList


@dataclass(frozen=True)
class SlotParam:
    """Renders as ``start + index``."""

    index: int


@dataclass(frozen=True)
class ValueParam:
    """Renders as the value of a Python expression, evaluated at render time."""

    expression: str


Param = Union[SlotParam, ValueParam]


def escape_braces(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


@dataclass
class Output:
    """An escaped format template and the params that fill its placeholders."""

    template: str = ""
    params: list[Param] = field(default_factory=list)

    def push_str(self, text: str) -> None:
        self.template += escape_braces(text)

    def push_classname(self, slot: int, prefix: str) -> None:
        self.template += "." + escape_braces(prefix) + "{}"
        self.params.append(SlotParam(slot))

    def push_value(self, expression: str) -> None:
        self.template += "{}"
        self.params.append(ValueParam(expression))

    @property
    def value_expressions(self) -> list[str]:
        return [p.expression for p in self.params if isinstance(p, ValueParam)]

    def render(self, start: int, values: Sequence[Any] = ()) -> str:
        """Fill the template.

        ``values`` are the already evaluated results of the value expressions,
        in the order of ``value_expressions``.
        """
        values_iter = iter(values)
        args: list[Any] = []
        for param in self.params:
            if isinstance(param, SlotParam):
                args.append(start + param.index)
            else:
                try:
                    args.append(next(values_iter))
                except StopIteration:
                    raise ValueError(
                        f"Missing value for expression {param.expression!r}"
                    ) from None
        return self.template.format(*args)


class _Assembler:
    def __init__(self, table: ClassnameTable, config: CompilerConfig):
        self.table = table
        self.config = config
        self.out = Output()

    def header(self, header: Header) -> None:
        for part in header.parts:
            if isinstance(part, ClassName):
                self.out.push_classname(self.table[part.name], self.config.class_prefix)
            else:
                self.out.push_str(part.text)

    def rule(self, rule: Rule, depth: int) -> None:
        pretty = self.config.pretty
        pad = self.config.indent * depth if pretty else ""

        self.out.push_str(pad)
        self.header(rule.header)

        if isinstance(rule.body, NestedBody):
            self.out.push_str(" {\n")
            for child in rule.body.rules:
                self.rule(child, depth + 1)
            self.out.push_str(pad + "}\n")
            return

        if pretty:
            self.out.push_str(" {\n")
            for entry in rule.body.entries:
                self.out.push_str(f"{pad}{self.config.indent}{entry.property}: ")
                self.out.push_value(entry.value)
                self.out.push_str(";\n")
            self.out.push_str(pad + "}\n")
        else:
            self.out.push_str(" {")
            for entry in rule.body.entries:
                self.out.push_str(f" {entry.property}: ")
                self.out.push_value(entry.value)
                self.out.push_str(";")
            self.out.push_str(" }\n")


def assemble(
    rules: RuleList, table: ClassnameTable, config: CompilerConfig | None = None
) -> Output:
    """Assemble the generator template for *rules*.

    Rules render in declaration order; classname slots come from *table*.
    """
    assembler = _Assembler(table, config or DEFAULT_CONFIG)
    for rule in rules:
        assembler.rule(rule, 0)
    return assembler.out
