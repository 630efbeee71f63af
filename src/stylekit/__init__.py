"""stylekit - CSS-like style blocks compiled to Python, mounted at runtime."""

__version__ = "0.1.0"

from stylekit.compiler import compile_style, compile_styles, make_styles  # noqa: E402
from stylekit.config import CompilerConfig  # noqa: E402
from stylekit.errors import CompileError  # noqa: E402
from stylekit.parser import ParseError, parse_style, parse_styles  # noqa: E402
from stylekit.runtime import (  # noqa: E402
    Classes,
    EmptyTheme,
    FileBackend,
    StringBackend,
    StyleInvariantError,
    StyleProvider,
    Theme,
)
from stylekit.validation import ValidationError  # noqa: E402

__all__ = [
    "__version__",
    "Classes",
    "CompileError",
    "CompilerConfig",
    "EmptyTheme",
    "FileBackend",
    "ParseError",
    "StringBackend",
    "StyleInvariantError",
    "StyleProvider",
    "Theme",
    "ValidationError",
    "compile_style",
    "compile_styles",
    "make_styles",
    "parse_style",
    "parse_styles",
]
