"""Runtime support imported by generated style modules."""

from stylekit.runtime.backend import Backend, FileBackend, StringBackend
from stylekit.runtime.classes import Classes, Counter, CssGenerator, TextSink
from stylekit.runtime.provider import Registration, StyleInvariantError, StyleProvider
from stylekit.runtime.theme import EmptyTheme, MappingTheme, Theme

__all__ = [
    "Backend",
    "Classes",
    "Counter",
    "CssGenerator",
    "EmptyTheme",
    "FileBackend",
    "MappingTheme",
    "Registration",
    "StringBackend",
    "StyleInvariantError",
    "StyleProvider",
    "TextSink",
    "Theme",
]
