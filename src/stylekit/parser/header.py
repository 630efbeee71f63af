"""Hand-written parser for selector literals.

A selector literal is split into raw text and classname references:

    "div.red_text > span"  ->  Raw("div"), ClassName("red_text"), Raw(" > span")

A literal starting with ``@`` is an at-rule prelude and is kept verbatim.
"""

from __future__ import annotations

import re

from stylekit.model.style import ClassName, Header, Part, Raw, SourceLocation
from stylekit.parser.errors import ParseError

__all__ = ["header_from_identifier", "parse_header_literal"]

# A classname reference: a dot followed by ASCII word characters.
_CLASSNAME_RE = re.compile(r"\.(?P<name>[A-Za-z0-9_]+)")

# Anything up to the next dot.
_RAW_RE = re.compile(r"[^.]+")


def header_from_identifier(name: str, location: SourceLocation | None = None) -> Header:
    """A bare identifier header is shorthand for ``.name``."""
    return Header(parts=(ClassName(name),), location=location)


def parse_header_literal(text: str, location: SourceLocation | None = None) -> Header:
    """Parse the contents of a quoted selector literal into a Header."""
    src = text.strip()
    if not src:
        raise ParseError.at(location, "Empty selector")

    if src.startswith("@"):
        return Header(parts=(Raw(src),), location=location, is_at_rule=True)

    parts: list[Part] = []
    pos = 0
    while pos < len(src):
        if src[pos] == ".":
            match = _CLASSNAME_RE.match(src, pos)
            if match is None:
                raise ParseError.at(
                    location,
                    f"Not a valid selector: expected a classname after '.' in {text!r}",
                )
            pos = match.end()
            if src.startswith("-", pos):
                raise ParseError.at(
                    location,
                    f"Not a valid selector: '-' directly after classname "
                    f"{match.group('name')!r} in {text!r}",
                )
            parts.append(ClassName(match.group("name")))
        else:
            match = _RAW_RE.match(src, pos)
            assert match is not None
            pos = match.end()
            parts.append(Raw(match.group(0)))

    return Header(parts=tuple(parts), location=location)
