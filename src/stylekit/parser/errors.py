"""Parser error types."""

from __future__ import annotations

from stylekit.errors import CompileError
from stylekit.model.style import SourceLocation


class ParseError(CompileError):
    """Raised when style DSL source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        self.reason = message
        if line is not None:
            message = f"line {line}, column {column}: {message}"
        super().__init__(message)

    @classmethod
    def at(cls, location: SourceLocation | None, message: str) -> ParseError:
        if location is None:
            return cls(message)
        return cls(message, line=location.line, column=location.column)
