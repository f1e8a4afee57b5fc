"""Tests for the Global Styles CLI commands."""
from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from global_styles.cli.main import cli

CSS = """/* @hint callout | Boxed paragraph */
/* @hint muted */
/* @class lead | Intro */
.callout { padding: 1em; }
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def css_file(tmp_path):
    path = tmp_path / "styles.css"
    path.write_text(CSS, encoding="utf-8")
    return path


def _store_args(tmp_path) -> list[str]:
    return ["--db", str(tmp_path / "gs.db"), "--output-dir", str(tmp_path / "out")]


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self, runner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("hints", "classes", "minify", "save", "show", "serve", "uninstall"):
            assert name in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "global-styles" in result.output

    def test_serve_help_shows_options(self, runner) -> None:
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        for option in ("--host", "--port", "--db", "--output-dir", "--base-url", "--debug"):
            assert option in result.output


# ---------------------------------------------------------------------------
# File utilities
# ---------------------------------------------------------------------------


class TestParseCommands:
    def test_hints_text(self, runner, css_file) -> None:
        result = runner.invoke(cli, ["hints", str(css_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["callout\tBoxed paragraph", "muted"]

    def test_hints_json(self, runner, css_file) -> None:
        result = runner.invoke(cli, ["hints", "--json", str(css_file)])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"callout": "Boxed paragraph", "muted": ""}

    def test_classes(self, runner, css_file) -> None:
        result = runner.invoke(cli, ["classes", str(css_file)])
        assert result.exit_code == 0
        assert json.loads(result.output) == [{"name": "lead", "description": "Intro"}]

    def test_minify_stdout(self, runner, css_file) -> None:
        result = runner.invoke(cli, ["minify", str(css_file)])
        assert result.exit_code == 0
        assert result.output == ".callout{padding:1em}\n"

    def test_minify_to_file(self, runner, css_file, tmp_path) -> None:
        out = tmp_path / "styles.min.css"
        result = runner.invoke(cli, ["minify", str(css_file), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == ".callout{padding:1em}\n"

    def test_missing_file(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["hints", str(tmp_path / "nope.css")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# Stored stylesheet
# ---------------------------------------------------------------------------


class TestStoreCommands:
    def test_save_then_show(self, runner, css_file, tmp_path) -> None:
        result = runner.invoke(cli, ["save", str(css_file), *_store_args(tmp_path)])
        assert result.exit_code == 0, result.output
        assert "2 hint(s), 1 annotated class(es)" in result.output
        generated = tmp_path / "out" / "global-styles" / "global-styles.css"
        assert generated.read_text(encoding="utf-8") == ".callout{padding:1em}"

        result = runner.invoke(cli, ["show", *_store_args(tmp_path)])
        assert result.exit_code == 0
        assert result.output == CSS.strip() + "\n"

    def test_save_failure_exits_1(self, runner, css_file, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        result = runner.invoke(
            cli, ["save", str(css_file), "--db", str(tmp_path / "gs.db"), "--output-dir", str(blocker)]
        )
        assert result.exit_code == 1
        assert "Failed to save CSS." in result.output

    def test_uninstall(self, runner, css_file, tmp_path) -> None:
        runner.invoke(cli, ["save", str(css_file), *_store_args(tmp_path)])
        result = runner.invoke(cli, ["uninstall", "--yes", *_store_args(tmp_path)])
        assert result.exit_code == 0
        assert not (tmp_path / "out" / "global-styles").exists()

        result = runner.invoke(cli, ["show", *_store_args(tmp_path)])
        assert result.output == "\n"
