"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from hdrdoc.cli import _build_parser, main
from tests._fixtures.project_builder import ProjectBuilder


def test_cli_requires_output_dir() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])
    assert excinfo.value.code == 2


def test_cli_rejects_extra_positionals() -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["out", "extra"])
    assert excinfo.value.code == 2


def test_cli_accepts_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "--root", "proj", "--resolve-markers", "out"])
    assert args.output_dir == "out"
    assert args.verbose is True
    assert args.root == "proj"
    assert args.resolve_markers is True


def test_cli_leaves_resolve_markers_to_config_by_default() -> None:
    args = _build_parser().parse_args(["out"])
    assert args.resolve_markers is None
    assert args.config is None


def test_main_generates_pages(
    project_builder: ProjectBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_builder.write({"README.md": "# Demo\n"})
    project_builder.write_headers(
        {"widget.hh": "// A widget.\nclass Widget;\n", "widget.txt": "text\n"}
    )
    out = tmp_path / "site"

    main(["--root", str(project_builder.path()), str(out)])

    captured = capsys.readouterr()
    assert "Generated 1 page(s) and index" in captured.out
    assert "skipped 1" in captured.out
    assert (out / "widget.hh.html").is_file()
    assert (out / "index.html").is_file()


def test_main_exits_when_overview_missing(project_builder: ProjectBuilder, tmp_path: Path) -> None:
    project_builder.write_headers({"widget.hh": "// A widget.\nclass Widget;\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(project_builder.path()), str(tmp_path / "site")])
    assert excinfo.value.code == 1


def test_main_exits_on_invalid_config(project_builder: ProjectBuilder, tmp_path: Path) -> None:
    project_builder.write({".hdrdoc.yml": "- not\n- a mapping\n"})

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(project_builder.path()), str(tmp_path / "site")])
    assert excinfo.value.code == 1


def test_main_exits_when_config_path_is_a_directory(
    project_builder: ProjectBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_dir = tmp_path / "conf.d"
    config_dir.mkdir()

    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(project_builder.path()), "--config", str(config_dir), str(tmp_path / "site")])
    assert excinfo.value.code == 1
    assert "Cannot read configuration" in capsys.readouterr().err
