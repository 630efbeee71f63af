"""Stylesheet backends: where the generated CSS text ends up.

A backend must always expose the concatenation, in registration order, of
every mounted generator's output against the current theme.
"""

from __future__ import annotations

import html
import io
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from stylekit.runtime.classes import Counter, CssGenerator


class Backend(Protocol):
    """Capability set a StyleProvider needs from its sink."""

    def replace_all(self, css: str) -> None:
        """Swap the exposed stylesheet for *css* in one step."""
        ...

    def append_incremental(self, theme: Any, generator: CssGenerator, counter: Counter) -> None:
        """Run *generator* against the live sink, keeping what is already there."""
        ...


class StringBackend:
    """Keeps the stylesheet in memory, e.g. for server-side rendering."""

    def __init__(self) -> None:
        self._buffer = io.StringIO()
        self.replace_count = 0

    @property
    def css(self) -> str:
        return self._buffer.getvalue()

    def replace_all(self, css: str) -> None:
        buffer = io.StringIO()
        buffer.write(css)
        self._buffer = buffer
        self.replace_count += 1

    def append_incremental(self, theme: Any, generator: CssGenerator, counter: Counter) -> None:
        generator(theme, self._buffer, counter)

    def to_html(self, **attrs: str) -> str:
        """Render a ``<style>`` element holding the stylesheet."""
        rendered = "".join(
            f' {k.replace("_", "-")}="{html.escape(v, quote=True)}"' for k, v in sorted(attrs.items())
        )
        body = self.css.replace("</", "<\\/")
        return f"<style{rendered}>\n{body}</style>"


class FileBackend:
    """Mirrors the stylesheet into a file on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.replace_all("")

    @property
    def css(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def replace_all(self, css: str) -> None:
        # Write next to the target so os.replace stays on one filesystem.
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(css)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def append_incremental(self, theme: Any, generator: CssGenerator, counter: Counter) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            generator(theme, fh, counter)
