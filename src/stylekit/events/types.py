"""Event types emitted by a StyleProvider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleMounted:
    generator: str
    start: int
    stop: int


@dataclass(frozen=True)
class StyleReused:
    generator: str
    start: int


@dataclass(frozen=True)
class ThemeUnchanged:
    theme: object


@dataclass(frozen=True)
class StylesheetReplaced:
    styles: int
    length: int
