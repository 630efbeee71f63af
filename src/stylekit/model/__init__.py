"""stylekit model layer -- public type re-exports."""

from stylekit.model.diagnostic import Diagnostic, Severity
from stylekit.model.style import (
    ClassName,
    Entry,
    Header,
    NestedBody,
    NormalBody,
    Part,
    Raw,
    Rule,
    RuleBody,
    RuleList,
    Signature,
    SourceLocation,
    Style,
)

__all__ = [
    # style
    "SourceLocation",
    "Signature",
    "Raw",
    "ClassName",
    "Part",
    "Header",
    "Entry",
    "NormalBody",
    "NestedBody",
    "RuleBody",
    "Rule",
    "RuleList",
    "Style",
    # diagnostic
    "Severity",
    "Diagnostic",
]
