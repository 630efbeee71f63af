"""Tests for the stylesheet backends."""

from pathlib import Path
from typing import Any

from stylekit.runtime import Counter, EmptyTheme, FileBackend, StringBackend, StyleProvider


def rule(theme: Any, css: Any, counter: Counter) -> None:
    css.write(f".css-{counter.value} {{ margin: 0; }}\n")
    counter.value += 1


class TestStringBackend:
    def test_starts_empty(self) -> None:
        backend = StringBackend()
        assert backend.css == ""
        assert backend.replace_count == 0

    def test_append_keeps_existing_text(self) -> None:
        backend = StringBackend()
        counter = Counter()
        backend.append_incremental(EmptyTheme(), rule, counter)
        backend.append_incremental(EmptyTheme(), rule, counter)
        assert backend.css == ".css-0 { margin: 0; }\n.css-1 { margin: 0; }\n"
        assert counter.value == 2

    def test_replace_all(self) -> None:
        backend = StringBackend()
        backend.append_incremental(EmptyTheme(), rule, Counter())
        backend.replace_all("a { }\n")
        assert backend.css == "a { }\n"
        assert backend.replace_count == 1

    def test_append_after_replace(self) -> None:
        backend = StringBackend()
        backend.replace_all("a { }\n")
        backend.append_incremental(EmptyTheme(), rule, Counter(4))
        assert backend.css == "a { }\n.css-4 { margin: 0; }\n"


class TestToHtml:
    def test_style_element(self) -> None:
        backend = StringBackend()
        backend.replace_all(".a { b: c; }\n")
        assert backend.to_html() == "<style>\n.a { b: c; }\n</style>"

    def test_attributes(self) -> None:
        html = StringBackend().to_html(media="print", data_kind="app")
        assert html.startswith('<style data-kind="app" media="print">')

    def test_attribute_values_are_escaped(self) -> None:
        html = StringBackend().to_html(nonce='a"><script>')
        assert html.startswith('<style nonce="a&quot;&gt;&lt;script&gt;">')

    def test_closing_tag_is_escaped(self) -> None:
        backend = StringBackend()
        backend.replace_all('.a::after { content: "</style>"; }\n')
        assert "</style>" not in backend.to_html()[:-len("</style>")]


class TestFileBackend:
    def test_created_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "app.css"
        backend = FileBackend(path)
        assert path.exists()
        assert backend.css == ""

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "app.css"
        path.write_text("stale")
        assert FileBackend(path).css == ""

    def test_append_and_replace(self, tmp_path: Path) -> None:
        backend = FileBackend(tmp_path / "app.css")
        backend.append_incremental(EmptyTheme(), rule, Counter())
        assert backend.css == ".css-0 { margin: 0; }\n"
        backend.replace_all("x { }\n")
        assert (tmp_path / "app.css").read_text() == "x { }\n"

    def test_no_temporary_files_left(self, tmp_path: Path) -> None:
        backend = FileBackend(tmp_path / "app.css")
        backend.replace_all("a")
        backend.replace_all("b")
        assert [p.name for p in tmp_path.iterdir()] == ["app.css"]

    def test_behind_provider(self, tmp_path: Path) -> None:
        backend = FileBackend(tmp_path / "app.css")
        provider = StyleProvider(backend)
        assert provider.add_css_generator(rule) == 0
        assert provider.add_css_generator(rule) == 0
        assert backend.css == provider.render()
