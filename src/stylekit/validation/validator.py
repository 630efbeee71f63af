"""Run the style rules over parsed blocks and collect their findings."""

from __future__ import annotations

from typing import Callable, Iterable

from stylekit.errors import CompileError
from stylekit.model.diagnostic import Diagnostic
from stylekit.model.style import Style
from stylekit.validation.rules import ALL_RULES, check_unique_result_types

RuleFunc = Callable[[Style], list[Diagnostic]]


class ValidationError(CompileError):
    """A style block has findings of ERROR severity; nothing was generated."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [str(d) for d in diagnostics if d.is_error]
        super().__init__(f"{len(errors)} error(s) in style source: " + "; ".join(errors))


def _run(style: Style, rules: Iterable[RuleFunc]) -> list[Diagnostic]:
    return [diagnostic for rule in rules for diagnostic in rule(style)]


def validate(style: Style, extra_rules: list[RuleFunc] | None = None) -> list[Diagnostic]:
    """Every finding for *style*, built-in rules first, then *extra_rules*."""
    return _run(style, [*ALL_RULES, *(extra_rules or ())])


def validate_module(
    styles: list[Style], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Findings for blocks that will share one generated module.

    Adds the cross-block result type check to the per-block rules.
    """
    diagnostics = [d for style in styles for d in validate(style, extra_rules=extra_rules)]
    return diagnostics + check_unique_result_types(styles)


def _raise_on_errors(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    if any(d.is_error for d in diagnostics):
        raise ValidationError([d for d in diagnostics if d.is_error])
    return diagnostics


def validate_or_raise(
    style: Style, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but ERROR findings raise :class:`ValidationError`.

    What comes back is advisory only (warnings and info).
    """
    return _raise_on_errors(validate(style, extra_rules=extra_rules))


def validate_module_or_raise(
    styles: list[Style], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    return _raise_on_errors(validate_module(styles, extra_rules=extra_rules))
