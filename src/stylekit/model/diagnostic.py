"""Findings reported by the style validation rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from stylekit.model.style import SourceLocation


class Severity(Enum):
    ERROR = "ERROR"  # compilation stops
    WARNING = "WARNING"  # logged, output still generated
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """One finding about a style block.

    ``rule`` names the check that produced it. ``location`` points into the DSL
    source when the check knows where, and ``classname`` is set by the checks
    that concern a single classname. ``fix`` is an optional hint for the user.
    """

    rule: str
    severity: Severity
    message: str
    location: SourceLocation | None = None
    classname: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{where}: {self.message}"
