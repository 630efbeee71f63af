"""Style model: the AST produced by the parser for one style block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


@dataclass(frozen=True)
class SourceLocation:
    """Line/column of a token in the DSL source (1-based)."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Signature:
    """The ``(theme_var: ThemeType) -> ResultType`` prefix of a style block."""

    theme_var: str = "theme"
    theme_type: str = "EmptyTheme"
    result_type: str = "Styles"
    location: SourceLocation | None = None


@dataclass(frozen=True)
class Raw:
    """Selector text emitted verbatim."""

    text: str


@dataclass(frozen=True)
class ClassName:
    """A symbolic classname, replaced by a generated name at runtime."""

    name: str


Part = Union[Raw, ClassName]


@dataclass(frozen=True)
class Header:
    """The selector (or at-rule prelude) in front of a rule body."""

    parts: tuple[Part, ...]
    location: SourceLocation | None = None
    is_at_rule: bool = False

    def classnames(self) -> list[str]:
        return [p.name for p in self.parts if isinstance(p, ClassName)]

    def __str__(self) -> str:
        out: list[str] = []
        for part in self.parts:
            if isinstance(part, ClassName):
                out.append("." + part.name)
            else:
                out.append(part.text)
        return "".join(out)


@dataclass(frozen=True)
class Entry:
    """A ``property: value`` declaration.

    ``value`` is the source text of a Python expression. It is evaluated by
    the generated code at render time and never interpreted here.
    """

    property: str
    value: str
    location: SourceLocation | None = None


@dataclass(frozen=True)
class NormalBody:
    """Body of an ordinary rule: a list of declarations."""

    entries: tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class NestedBody:
    """Body of an at-rule: a list of child rules."""

    rules: tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)


RuleBody = Union[NormalBody, NestedBody]


@dataclass(frozen=True)
class Rule:
    """A header paired with its body."""

    header: Header
    body: RuleBody


@dataclass(frozen=True)
class RuleList:
    """An ordered sequence of rules."""

    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def classname_parts(self) -> Iterator[tuple[str, SourceLocation | None]]:
        """Yield every classname occurrence in source order, nested rules included."""
        for rule in self.walk():
            for name in rule.header.classnames():
                yield name, rule.header.location

    def walk(self) -> Iterator[Rule]:
        """Yield every rule depth-first, nested at-rule children included."""
        for rule in self.rules:
            yield rule
            if isinstance(rule.body, NestedBody):
                yield from RuleList(rule.body.rules).walk()


@dataclass(frozen=True)
class Style:
    """One compiled unit: a signature and its top-level rules."""

    signature: Signature
    rules: RuleList
