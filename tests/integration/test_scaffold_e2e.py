"""Integration tests for the crcf command end to end.

These tests drive ``crcf.cli.run`` against a temporary working directory and
check the files that land on disk, including their rendered content.

No external services are required; the update check is disabled.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from crcf.cli import run
from crcf.scaffolder.formatter import format_source


@pytest.fixture
def project(monkeypatch: pytest.MonkeyPatch, workdir: Path) -> Path:
    monkeypatch.setenv("CRCF_WORKING_DIR", str(workdir))
    monkeypatch.setenv("CRCF_UPDATE_CHECK", "false")
    return workdir


def _listing(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir())


@pytest.mark.integration
class TestComponentScaffold:
    def test_default_button(self, project: Path) -> None:
        assert run(["Button"]) == 0

        button = project / "Button"
        assert _listing(button) == ["Button.css", "Button.js", "Button.test.js", "index.js"]
        assert (button / "index.js").read_text(encoding="utf-8") == (
            "export { default } from './Button';\n"
        )
        source = (button / "Button.js").read_text(encoding="utf-8")
        assert "export default Button;" in source
        assert format_source(source) == source
        assert "import Button from './Button';" in (button / "Button.test.js").read_text(
            encoding="utf-8"
        )

    def test_typescript_without_test(self, project: Path) -> None:
        assert run(["Button", "--typescript", "--notest", "--nocss"]) == 0
        assert _listing(project / "Button") == ["Button.tsx", "index.tsx"]

    def test_typescript_keeps_style(self, project: Path) -> None:
        assert run(["Button", "--typescript", "--notest"]) == 0
        assert _listing(project / "Button") == ["Button.css", "Button.tsx", "index.tsx"]
        source = (project / "Button" / "Button.tsx").read_text(encoding="utf-8")
        assert "React.FC<ButtonProps>" in source

    def test_react_native_sass_has_no_style(self, project: Path) -> None:
        assert run(["Card", "--reactnative", "--sass"]) == 0
        assert _listing(project / "Card") == ["Card.js", "Card.test.js", "index.js"]
        assert "react-native" in (project / "Card" / "Card.js").read_text(encoding="utf-8")

    def test_less_and_prop_types(self, project: Path) -> None:
        assert run(["Card", "-l", "-p"]) == 0
        assert "Card.less" in _listing(project / "Card")
        assert "PropTypes" in (project / "Card" / "Card.js").read_text(encoding="utf-8")

    def test_uppercase_files(self, project: Path) -> None:
        assert run(["card", "-u"]) == 0
        card = project / "card"
        assert _listing(card) == ["Card.css", "Card.js", "Card.test.js", "index.js"]
        assert "from './Card';" in (card / "index.js").read_text(encoding="utf-8")

    def test_nested_paths(self, project: Path) -> None:
        assert run(["forms/Input", "layout/grid/Row"]) == 0
        assert (project / "forms" / "Input" / "Input.js").is_file()
        assert (project / "layout" / "grid" / "Row" / "Row.js").is_file()

    def test_second_run_refuses(self, project: Path) -> None:
        assert run(["Button"]) == 0
        before = {p.name: p.read_bytes() for p in (project / "Button").iterdir()}
        assert run(["Button", "--typescript"]) == 3
        after = {p.name: p.read_bytes() for p in (project / "Button").iterdir()}
        assert before == after


@pytest.mark.integration
class TestIndexScaffold:
    def test_build_then_index(self, project: Path) -> None:
        components = project / "components"
        assert run(["components/Button", "components/card", "components/date-picker"]) == 0
        (components / ".cache").mkdir()
        (components / "2draft").mkdir()

        assert run(["--createindex", "components"]) == 0

        content = (components / "index.js").read_text(encoding="utf-8")
        assert content == (
            "export { default as Button } from './Button';\n"
            "export { default as Card } from './card';\n"
            "export { default as DatePicker } from './date-picker';\n"
        )

    def test_index_twice(self, project: Path) -> None:
        (project / "components" / "Alpha").mkdir(parents=True)
        assert run(["--createindex", "components"]) == 0
        assert run(["--createindex", "components"]) == 3
