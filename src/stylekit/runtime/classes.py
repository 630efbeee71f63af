"""Runtime contract between generated code and the style provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from stylekit.runtime.provider import StyleProvider


class TextSink(Protocol):
    """Anything generated text can be written to (``io.StringIO``, files)."""

    def write(self, text: str) -> Any: ...


class Counter:
    """Mutable integer shared by every generator mounted on one provider."""

    __slots__ = ("value",)

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Counter({self.value})"


# (theme, css, counter) -> None. Appends text to css and advances counter by
# exactly the number of distinct classnames of its style block.
CssGenerator = Callable[[Any, TextSink, Counter], None]


class Classes:
    """Base class of every generated classname container.

    Subclasses are produced by the compiler. ``generate`` renders the style
    block, ``new`` builds an instance holding the concrete class names for a
    given counter start.
    """

    @staticmethod
    def generate(theme: Any, css: TextSink, counter: Counter) -> None:
        raise NotImplementedError

    @classmethod
    def new(cls, start: int) -> Classes:
        raise NotImplementedError

    @classmethod
    def use_style(cls, provider: StyleProvider) -> Any:
        """Mount this style on *provider* and return the class names."""
        return provider.add_classes(cls)
