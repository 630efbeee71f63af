"""StyleProvider: mounts generated styles once and re-renders on theme change."""

from __future__ import annotations

import contextlib
import io
import logging
from dataclasses import dataclass
from typing import Any, Iterator, TypeVar

from stylekit.events.bus import EventBus
from stylekit.events.types import StyleMounted, StyleReused, StylesheetReplaced, ThemeUnchanged
from stylekit.runtime.backend import Backend, StringBackend
from stylekit.runtime.classes import Classes, Counter, CssGenerator, TextSink
from stylekit.runtime.theme import EmptyTheme

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Classes)


class StyleInvariantError(AssertionError):
    """A generator advanced the counter by a different amount than before.

    Class names already handed out would no longer match the stylesheet, so
    this is a programming error and is never recovered from.
    """


def _generator_name(generator: CssGenerator) -> str:
    return getattr(generator, "__qualname__", None) or repr(generator)


@dataclass(frozen=True)
class Registration:
    """A mounted generator and the slot window it owns."""

    generator: CssGenerator
    start: int
    stop: int

    def replay(self, theme: Any, css: TextSink) -> None:
        counter = Counter(self.start)
        self.generator(theme, css, counter)
        if counter.value != self.stop:
            raise StyleInvariantError(
                f"{_generator_name(self.generator)} used {counter.value - self.start} "
                f"class slot(s) on replay, expected {self.stop - self.start}"
            )


class StyleProvider:
    """Manages dynamically generated styles. You should usually have exactly one.

    Generated class names are only unique within one provider. Share the same
    instance everywhere styles are mounted.

    Example::

        provider = StyleProvider(StringBackend(), EmptyTheme())
        classes = provider.add_classes(MyClasses)
        # mounting again returns the same names and renders nothing
        assert provider.add_classes(MyClasses) == classes
    """

    def __init__(
        self,
        backend: Backend | None = None,
        theme: Any = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        if theme is None:
            theme = EmptyTheme()
        self._backend: Backend = backend if backend is not None else StringBackend()
        self._theme = theme
        self._event_bus = event_bus
        self._counter = Counter(0)
        self._registrations: list[Registration] = []
        self._by_generator: dict[CssGenerator, int] = {}
        self._busy = False

    # --- introspection ---------------------------------------------------------

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def theme(self) -> Any:
        return self._theme

    @property
    def counter(self) -> int:
        return self._counter.value

    @property
    def registrations(self) -> tuple[Registration, ...]:
        return tuple(self._registrations)

    # --- mounting --------------------------------------------------------------

    def add_css_generator(self, generator: CssGenerator) -> int:
        """Mount *generator* unless already mounted; return its counter start."""
        idx = self._by_generator.get(generator)
        if idx is not None:
            start = self._registrations[idx].start
            logger.debug("Style %s already mounted at %d", _generator_name(generator), start)
            self._emit(StyleReused(_generator_name(generator), start))
            return start

        with self._exclusive():
            start = self._counter.value
            self._backend.append_incremental(self._theme, generator, self._counter)
            stop = self._counter.value

        self._by_generator[generator] = len(self._registrations)
        self._registrations.append(Registration(generator, start, stop))
        logger.debug(
            "Mounted style %s with slots [%d, %d)", _generator_name(generator), start, stop
        )
        self._emit(StyleMounted(_generator_name(generator), start, stop))
        return start

    def add_classes(self, cls: type[C]) -> C:
        """Mount a generated Classes subclass and return its class names.

        Mounting the same class again renders nothing and returns equal names.
        """
        start = self.add_css_generator(cls.generate)
        return cls.new(start)  # type: ignore[return-value]

    # --- theming ---------------------------------------------------------------

    def update_theme(self, theme: Any) -> None:
        """Switch theme. All styles are re-rendered; class names stay the same.

        The new theme must be an instance of the current theme's type. If a
        replay fails, the previous theme and stylesheet stay in place.
        """
        if not isinstance(theme, type(self._theme)):
            raise TypeError(
                f"Theme must be a {type(self._theme).__name__}, got {type(theme).__name__}"
            )
        if self._theme.fast_cmp(theme):
            logger.debug("Theme unchanged; stylesheet kept")
            self._emit(ThemeUnchanged(theme))
            return

        css = io.StringIO()
        with self._exclusive():
            for registration in self._registrations:
                registration.replay(theme, css)
        text = css.getvalue()
        self._backend.replace_all(text)
        self._theme = theme
        logger.debug(
            "Replaced stylesheet: %d style(s), %d chars", len(self._registrations), len(text)
        )
        self._emit(StylesheetReplaced(len(self._registrations), len(text)))

    def render(self) -> str:
        """Render every mounted style against the current theme."""
        css = io.StringIO()
        with self._exclusive():
            for registration in self._registrations:
                registration.replay(self._theme, css)
        return css.getvalue()

    # --- internals -------------------------------------------------------------

    @contextlib.contextmanager
    def _exclusive(self) -> Iterator[None]:
        if self._busy:
            raise RuntimeError("StyleProvider used re-entrantly from inside a generator")
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _emit(self, event: Any) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(event)
