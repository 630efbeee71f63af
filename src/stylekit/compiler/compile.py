"""Compiler driver: Style AST -> CompiledStyle."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stylekit.compiler.classnames import ClassnameTable, resolve_classnames
from stylekit.compiler.output import Output, assemble
from stylekit.config import DEFAULT_CONFIG, CompilerConfig
from stylekit.model.diagnostic import Severity
from stylekit.model.style import Signature, Style
from stylekit.parser import parse_styles
from stylekit.validation import ValidationError, validate_or_raise
from stylekit.validation.rules import check_unique_result_types

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledStyle:
    """Everything generated code needs for one style block."""

    signature: Signature
    table: ClassnameTable
    output: Output
    config: CompilerConfig = DEFAULT_CONFIG

    @property
    def slot_count(self) -> int:
        return len(self.table)

    def class_names(self, start: int) -> dict[str, str]:
        """What the generated ``new(start)`` hands out, keyed by classname."""
        prefix = self.config.class_prefix
        return {name: f"{prefix}{start + self.table[name]}" for name in self.table.names()}


def compile_ast(style: Style, config: CompilerConfig | None = None) -> CompiledStyle:
    """Validate, resolve and assemble one parsed style block."""
    config = config or DEFAULT_CONFIG
    for diagnostic in validate_or_raise(style):
        if diagnostic.severity is Severity.WARNING:
            logger.warning("%s: %s", style.signature.result_type, diagnostic)
        else:
            logger.debug("%s: %s", style.signature.result_type, diagnostic)

    table = resolve_classnames(style.rules)
    output = assemble(style.rules, table, config)
    logger.debug(
        "Compiled %s: %d classname(s), %d param(s)",
        style.signature.result_type,
        len(table),
        len(output.params),
    )
    return CompiledStyle(signature=style.signature, table=table, output=output, config=config)


def compile_source(source: str, config: CompilerConfig | None = None) -> list[CompiledStyle]:
    """Parse and compile every style block in *source*."""
    styles = parse_styles(source)
    errors = check_unique_result_types(styles)
    if errors:
        raise ValidationError(errors)
    return [compile_ast(style, config) for style in styles]
