"""Integration tests: DSL source to a live stylesheet, end to end.

These tests exercise the complete flow: build a module with the CLI, import
it like application code would, mount the classes on a provider and switch
themes.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType

from click.testing import CliRunner

from stylekit import StringBackend, StyleProvider, compile_styles
from stylekit.cli.main import cli
from stylekit.runtime import FileBackend, MappingTheme

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Test helpers
# ---------------------------------------------------------------------------


def _build_module(tmp_path: Path, fixture: str, *options: str) -> ModuleType:
    target = tmp_path / f"{Path(fixture).stem}_styles.py"
    result = CliRunner().invoke(cli, ["build", str(FIXTURES / fixture), "-o", str(target), *options])
    assert result.exit_code == 0, result.output
    spec = importlib.util.spec_from_file_location(target.stem, target)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    sys.modules[target.stem] = module
    try:
        spec.loader.exec_module(module)
    finally:
        del sys.modules[target.stem]
    return module


SPACED = MappingTheme({"spacing": 8, "palette": {"background": "#e2deff"}})
ROOMY = MappingTheme({"spacing": 16, "palette": {"background": "#000"}})


# ---------------------------------------------------------------------------
# Generated modules
# ---------------------------------------------------------------------------


class TestGeneratedModule:
    def test_mount_built_classes(self, tmp_path: Path) -> None:
        module = _build_module(tmp_path, "simple.style")
        provider = StyleProvider()
        classes = provider.add_classes(module.SimpleClasses)
        assert (classes.red_text, classes.blue_text) == ("css-1", "css-0")
        assert provider.backend.css == ".css-1 { color: red; }\ndiv.css-0 { color: blue; }\n"

    def test_built_and_in_process_agree(self, tmp_path: Path) -> None:
        module = _build_module(
            tmp_path, "keyframes.style", "--import", "from stylekit.runtime import MappingTheme"
        )
        live = compile_styles((FIXTURES / "keyframes.style").read_text())

        built_provider = StyleProvider(theme=SPACED)
        live_provider = StyleProvider(theme=SPACED)
        built_provider.add_classes(module.ShakeClasses)
        live_provider.add_classes(live["ShakeClasses"])

        assert built_provider.backend.css == live_provider.backend.css


# ---------------------------------------------------------------------------
# Theme switching
# ---------------------------------------------------------------------------


class TestThemeSwitch:
    def test_names_survive_theme_change(self) -> None:
        classes_by_name = compile_styles(
            (FIXTURES / "multi.style").read_text() + (FIXTURES / "keyframes.style").read_text()
        )
        backend = StringBackend()
        provider = StyleProvider(backend, SPACED)
        mounted = [provider.add_classes(cls) for cls in classes_by_name.values()]

        provider.update_theme(ROOMY)

        assert [provider.add_classes(cls) for cls in classes_by_name.values()] == mounted
        assert "padding: 16px;" in backend.css
        assert "padding: 8px;" not in backend.css
        assert backend.css == provider.render()

        fresh = StyleProvider(theme=ROOMY)
        for cls in classes_by_name.values():
            fresh.add_classes(cls)
        assert fresh.backend.css == backend.css

    def test_file_backend_follows_theme(self, tmp_path: Path) -> None:
        Shake = compile_styles((FIXTURES / "keyframes.style").read_text())["ShakeClasses"]
        backend = FileBackend(tmp_path / "app.css")
        provider = StyleProvider(backend, SPACED)
        provider.add_classes(Shake)
        assert "background-color: #e2deff;" in (tmp_path / "app.css").read_text()

        provider.update_theme(ROOMY)
        text = (tmp_path / "app.css").read_text()
        assert "background-color: #000;" in text
        assert text.count("@keyframes shake") == 1
