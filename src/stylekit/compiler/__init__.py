from stylekit.compiler.classnames import ClassnameTable, resolve_classnames
from stylekit.compiler.output import Output, SlotParam, ValueParam, assemble
from stylekit.compiler.compile import CompiledStyle, compile_ast, compile_source
from stylekit.compiler.codegen import render_class, render_module
from stylekit.compiler.loader import compile_style, compile_styles, make_styles

__all__ = [
    "ClassnameTable",
    "CompiledStyle",
    "Output",
    "SlotParam",
    "ValueParam",
    "assemble",
    "compile_ast",
    "compile_source",
    "compile_style",
    "compile_styles",
    "make_styles",
    "render_class",
    "render_module",
    "resolve_classnames",
]
