from pathlib import Path

import pytest
from jsx2htm.compiler.build import build_project
from jsx2htm.compiler.config import CompileConfig
from jsx2htm.compiler.exceptions import UnsupportedConstruct


@pytest.fixture
def project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    (src / "lib").mkdir(parents=True)
    (src / "node_modules" / "dep").mkdir(parents=True)

    (src / "app.jsx").write_text("export const App = () => <div>{items}</div>;\n")
    (src / "lib" / "util.js").write_text("export const add = (a, b) => a + b;\n")
    (src / "lib" / "view.tsx").write_text("export const V = (p: Props) => <p />;\n")
    (src / "node_modules" / "dep" / "index.js").write_text("module.exports = {};\n")
    (src / "README.md").write_text("# not a source file\n")
    return src


def test_build_project(project: Path, tmp_path: Path) -> None:
    summary = build_project(project, tmp_path / "out", import_module="htm/preact")
    out = tmp_path / "out"

    assert summary.files == 3
    assert summary.templates == 2
    assert summary.out_dir == out.resolve()

    assert (out / "app.js").read_text() == (
        'import { html } from "htm/preact";\n\n'
        "export const App = () => html`<div>${items}</div>`;\n"
    )
    # No templates, no import
    assert (out / "lib" / "util.js").read_text() == "export const add = (a, b) => a + b;\n"
    assert (out / "lib" / "view.ts").read_text() == (
        'import { html } from "htm/preact";\n\n'
        "export const V = (p: Props) => html`<p/>`;\n"
    )
    assert not (out / "node_modules").exists()
    assert not (out / "README.md").exists()


def test_build_project_with_config(project: Path, tmp_path: Path) -> None:
    build_project(project, tmp_path / "out", CompileConfig(tag="h", force_explicit_close=True))
    assert (tmp_path / "out" / "lib" / "view.ts").read_text() == (
        "export const V = (p: Props) => h`<p></p>`;\n"
    )


def test_build_replaces_previous_output(project: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    out.mkdir()
    (out / "stale.js").write_text("old")

    build_project(project, out)

    assert not (out / "stale.js").exists()


def test_build_rejects_nested_output(project: Path) -> None:
    with pytest.raises(ValueError, match="must not be inside"):
        build_project(project, project / "dist")


def test_build_missing_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="not found"):
        build_project(tmp_path / "nope", tmp_path / "out")


def test_build_error_names_file(project: Path, tmp_path: Path) -> None:
    (project / "bad.jsx").write_text("(<div>{...items}</div>);")
    with pytest.raises(UnsupportedConstruct) as exc:
        build_project(project, tmp_path / "out")
    assert exc.value.file_path == "bad.jsx"
