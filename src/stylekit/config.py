from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    class_prefix: str = "css-"
    pretty: bool = False  # one declaration per line instead of one rule per line
    indent: str = "  "

    def __post_init__(self) -> None:
        if not self.class_prefix:
            raise ValueError("class_prefix must be a non-empty string")


DEFAULT_CONFIG = CompilerConfig()
