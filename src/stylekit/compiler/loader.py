"""In-process compilation: DSL text straight to live Classes subclasses."""

from __future__ import annotations

import itertools
import linecache
import sys
import types
from typing import Any, Mapping

from stylekit.compiler.codegen import render_module
from stylekit.compiler.compile import compile_ast, compile_source
from stylekit.config import CompilerConfig
from stylekit.parser import parse_style
from stylekit.runtime.classes import Classes

_serial = itertools.count()


def _execute(source: str, namespace: Mapping[str, Any] | None) -> dict[str, Any]:
    serial = next(_serial)
    filename = f"<stylekit-{serial}>"
    # Keep the generated source around so tracebacks can show it.
    linecache.cache[filename] = (len(source), None, source.splitlines(True), filename)
    # dataclass resolves string annotations through sys.modules[cls.__module__].
    module = types.ModuleType(f"stylekit.generated_{serial}")
    module.__dict__.update(namespace or {})
    module.__name__ = f"stylekit.generated_{serial}"
    module.__file__ = filename
    sys.modules[module.__name__] = module
    exec(compile(source, filename, "exec"), module.__dict__)
    return module.__dict__


def compile_styles(
    source: str,
    namespace: Mapping[str, Any] | None = None,
    config: CompilerConfig | None = None,
) -> dict[str, type[Classes]]:
    """Compile every block in *source*; returns the classes by result type name.

    Value expressions are evaluated in a module whose globals start as a copy
    of *namespace*, so they may refer to anything the caller passes in.
    """
    compiled = compile_source(source, config)
    module_globals = _execute(render_module(compiled), namespace)
    return {c.signature.result_type: module_globals[c.signature.result_type] for c in compiled}


def compile_style(
    source: str,
    namespace: Mapping[str, Any] | None = None,
    config: CompilerConfig | None = None,
) -> type[Classes]:
    """Compile a single style block into a Classes subclass.

    Example::

        MyClasses = make_styles('''
            (theme: MyTheme) -> MyClasses {
                text { margin: "10px", color: theme.primary_color },
            }
        ''')
        classes = provider.add_classes(MyClasses)
        classes.text  # "css-0"
    """
    compiled = compile_ast(parse_style(source), config)
    module_globals = _execute(render_module([compiled]), namespace)
    return module_globals[compiled.signature.result_type]


make_styles = compile_style
