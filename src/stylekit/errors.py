"""Base error types shared across the compiler."""


class CompileError(Exception):
    """Raised when a style block cannot be compiled. Nothing is emitted."""
