"""Theme protocol and the stock themes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class Theme(Protocol):
    """A value that parameterizes generated property values.

    ``fast_cmp`` is a cheap equality hook: returning True means the stylesheet
    does not need to be recomputed for *other*.
    """

    def fast_cmp(self, other: Theme) -> bool: ...


@dataclass(frozen=True)
class EmptyTheme:
    """Theme for styles that do not depend on any theme value."""

    def fast_cmp(self, other: object) -> bool:
        return True


class MappingTheme:
    """Theme backed by a nested mapping, e.g. one loaded from JSON.

    Keys are readable as attributes (``theme.palette.primary``) or items.
    Two mapping themes are equal when their data is equal.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = dict(data)

    def _wrap(self, value: Any) -> Any:
        return MappingTheme(value) if isinstance(value, Mapping) else value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._wrap(self._data[name])
        except KeyError:
            raise AttributeError(f"theme has no value {name!r}") from None

    def __getitem__(self, key: str) -> Any:
        return self._wrap(self._data[key])

    def __repr__(self) -> str:
        return f"MappingTheme({self._data!r})"

    def fast_cmp(self, other: object) -> bool:
        return isinstance(other, MappingTheme) and self._data == other._data
