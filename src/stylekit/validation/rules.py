"""Validation rules for style blocks.

Each rule is a function taking a Style and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

import keyword
from collections import Counter

from stylekit.model.diagnostic import Diagnostic, Severity
from stylekit.model.style import NormalBody, Style

# Members of every generated Classes subclass.
RESERVED_MEMBERS = frozenset({"generate", "new", "use_style"})

# Local names used inside generated ``generate`` bodies.
RESERVED_LOCALS = frozenset({"_css", "_counter", "_start"})

# Module-level names every generated module imports.
RESERVED_GLOBALS = frozenset({"Classes", "Counter", "EmptyTheme", "TextSink", "dataclass"})


def _is_python_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_classname_identifiers(style: Style) -> list[Diagnostic]:
    """Every classname becomes a field name and must be a Python identifier."""
    diagnostics: list[Diagnostic] = []
    reported: set[str] = set()
    for name, location in style.rules.classname_parts():
        if name in reported or _is_python_name(name):
            continue
        reported.add(name)
        diagnostics.append(
            Diagnostic(
                rule="check_classname_identifiers",
                severity=Severity.ERROR,
                message=f"Classname {name!r} is not a valid Python identifier.",
                location=location,
                classname=name,
                fix="Rename the class so it starts with a letter and is not a keyword.",
            )
        )
    return diagnostics


def check_reserved_classnames(style: Style) -> list[Diagnostic]:
    """Classnames must not shadow members of the generated class."""
    diagnostics: list[Diagnostic] = []
    reported: set[str] = set()
    for name, location in style.rules.classname_parts():
        if name in reported:
            continue
        if name in RESERVED_MEMBERS or name.startswith("__"):
            reported.add(name)
            diagnostics.append(
                Diagnostic(
                    rule="check_reserved_classnames",
                    severity=Severity.ERROR,
                    message=f"Classname {name!r} is reserved by the generated class.",
                    location=location,
                    classname=name,
                )
            )
    return diagnostics


def check_signature(style: Style) -> list[Diagnostic]:
    """Theme variable and result type must be usable in generated code."""
    sig = style.signature
    diagnostics: list[Diagnostic] = []
    if not _is_python_name(sig.theme_var) or sig.theme_var in RESERVED_LOCALS:
        diagnostics.append(
            Diagnostic(
                rule="check_signature",
                severity=Severity.ERROR,
                message=f"Theme variable {sig.theme_var!r} cannot be used as a parameter name.",
                location=sig.location,
            )
        )
    if not _is_python_name(sig.result_type):
        diagnostics.append(
            Diagnostic(
                rule="check_signature",
                severity=Severity.ERROR,
                message=f"Result type {sig.result_type!r} cannot be used as a class name.",
                location=sig.location,
            )
        )
    elif sig.result_type in RESERVED_GLOBALS:
        diagnostics.append(
            Diagnostic(
                rule="check_signature",
                severity=Severity.ERROR,
                message=f"Result type {sig.result_type!r} shadows a name the generated module imports.",
                location=sig.location,
                fix="Pick a different result type name.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_duplicate_classnames(style: Style) -> list[Diagnostic]:
    """A classname used by several headers shares one generated name."""
    counts = Counter(name for name, _ in style.rules.classname_parts())
    first_seen = dict(reversed(list(style.rules.classname_parts())))
    return [
        Diagnostic(
            rule="check_duplicate_classnames",
            severity=Severity.INFO,
            message=f"Classname {name!r} is referenced {count} times; all references share one slot.",
            location=first_seen[name],
            classname=name,
        )
        for name, count in sorted(counts.items())
        if count > 1
    ]


def check_duplicate_properties(style: Style) -> list[Diagnostic]:
    """The same property declared twice in one rule; the last one wins in CSS."""
    diagnostics: list[Diagnostic] = []
    for rule in style.rules.walk():
        if not isinstance(rule.body, NormalBody):
            continue
        seen: set[str] = set()
        for entry in rule.body.entries:
            if entry.property in seen:
                diagnostics.append(
                    Diagnostic(
                        rule="check_duplicate_properties",
                        severity=Severity.WARNING,
                        message=(
                            f"Property {entry.property!r} is declared more than once "
                            f"in {str(rule.header)!r}."
                        ),
                        location=entry.location,
                    )
                )
            seen.add(entry.property)
    return diagnostics


def check_empty_rules(style: Style) -> list[Diagnostic]:
    """Rules without declarations or children render as empty blocks."""
    return [
        Diagnostic(
            rule="check_empty_rules",
            severity=Severity.WARNING,
            message=f"Rule {str(rule.header)!r} has an empty body.",
            location=rule.header.location,
            fix="Remove the rule or add declarations.",
        )
        for rule in style.rules.walk()
        if len(rule.body) == 0
    ]


ALL_RULES = [
    check_classname_identifiers,
    check_reserved_classnames,
    check_signature,
    check_duplicate_classnames,
    check_duplicate_properties,
    check_empty_rules,
]


def check_unique_result_types(styles: list[Style]) -> list[Diagnostic]:
    """Blocks compiled into one module need distinct result type names."""
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()
    for style in styles:
        name = style.signature.result_type
        if name in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_unique_result_types",
                    severity=Severity.ERROR,
                    message=f"Result type {name!r} is defined by more than one style block.",
                    location=style.signature.location,
                )
            )
        seen.add(name)
    return diagnostics
