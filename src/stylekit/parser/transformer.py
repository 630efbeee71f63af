"""Lark Transformer that converts a style DSL parse tree into Style models."""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from stylekit.model.style import (
    Entry,
    Header,
    NestedBody,
    NormalBody,
    Rule,
    RuleList,
    Signature,
    SourceLocation,
    Style,
)
from stylekit.parser.errors import ParseError
from stylekit.parser.header import header_from_identifier, parse_header_literal

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t"}


def _location(token: Token) -> SourceLocation:
    return SourceLocation(line=token.line or 0, column=token.column or 0)


def _unquote(token: Token) -> str:
    """Strip surrounding quotes from a string token and process escapes."""
    body = str(token)[1:-1]
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), body)


def _item_location(item: Rule | Entry) -> SourceLocation | None:
    if isinstance(item, Rule):
        return item.header.location
    return item.location


class _Property:
    """Intermediate property name with the location of its token."""

    def __init__(self, name: str, location: SourceLocation):
        self.name = name
        self.location = location


class StyleTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Style objects.

    The transformer needs the original source text: entry values are kept as
    the exact source span of their expression.
    """

    def __init__(self, source: str):
        super().__init__()
        self._source = source

    # ---- headers / properties ----

    def ident_header(self, items: list[Token]) -> Header:
        return header_from_identifier(str(items[0]), _location(items[0]))

    def literal_header(self, items: list[Token]) -> Header:
        return parse_header_literal(_unquote(items[0]), _location(items[0]))

    def ident_property(self, items: list[Token]) -> _Property:
        return _Property(str(items[0]).replace("_", "-"), _location(items[0]))

    def literal_property(self, items: list[Token]) -> _Property:
        return _Property(_unquote(items[0]), _location(items[0]))

    # ---- values ----

    @v_args(meta=True)
    def expr(self, meta, children) -> str:
        return self._source[meta.start_pos : meta.end_pos]

    # ---- structural ----

    def entry(self, items: list[object]) -> Entry:
        prop, value = items
        assert isinstance(prop, _Property)
        return Entry(property=prop.name, value=str(value), location=prop.location)

    def items(self, items: list[Rule | Entry]) -> list[Rule | Entry]:
        return list(items)

    def rule(self, items: list[object]) -> Rule:
        header, children = items
        assert isinstance(header, Header)
        if header.is_at_rule:
            return Rule(header=header, body=NestedBody(tuple(_only_rules(children, str(header)))))
        entries: list[Entry] = []
        for child in children:
            if not isinstance(child, Entry):
                raise ParseError.at(
                    _item_location(child),
                    f"Nested rule inside {str(header)!r}; only at-rules may contain rules",
                )
            entries.append(child)
        return Rule(header=header, body=NormalBody(tuple(entries)))

    def dotted_name(self, items: list[Token]) -> str:
        return ".".join(str(t) for t in items)

    def signature(self, items: list[object]) -> Signature:
        theme_var, theme_type, result_type = items
        assert isinstance(theme_var, Token)
        return Signature(
            theme_var=str(theme_var),
            theme_type=str(theme_type),
            result_type=str(result_type),
            location=_location(theme_var),
        )

    def style(self, items: list[object]) -> Style:
        signature = Signature()
        if isinstance(items[0], Signature):
            signature = items[0]
        children = items[-1]
        assert isinstance(children, list)
        return Style(signature=signature, rules=RuleList(tuple(_only_rules(children, "style"))))

    def start(self, items: list[Style]) -> list[Style]:
        return list(items)


def _only_rules(children: list[Rule | Entry], owner: str) -> list[Rule]:
    rules: list[Rule] = []
    for child in children:
        if not isinstance(child, Rule):
            raise ParseError.at(
                _item_location(child),
                f"Declaration {child.property!r} is not allowed directly inside "
                f"{owner!r}; wrap it in a rule",
            )
        rules.append(child)
    return rules


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "Unexpected end of input (unterminated block?)"
        return f"Unexpected token {str(exc.token)!r}"
    if isinstance(exc, UnexpectedCharacters):
        return f"Unexpected character {exc.char!r}"
    return "Unexpected end of input"


def parse_styles(source: str) -> list[Style]:
    """Parse DSL source containing one or more style blocks."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise ParseError(
            _describe(e), line=getattr(e, "line", None), column=getattr(e, "column", None)
        ) from e
    try:
        return StyleTransformer(source).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise


def parse_style(source: str) -> Style:
    """Parse DSL source containing exactly one style block."""
    styles = parse_styles(source)
    if len(styles) != 1:
        second = styles[1].signature.location if len(styles) > 1 else None
        raise ParseError.at(second, f"Expected exactly one style block, found {len(styles)}")
    return styles[0]
