"""Tests for the jss CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from jss import __version__
from jss.cli.main import cli


def _write(tmp_path, data, name="styles.json"):
    path = tmp_path / name
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "render" in result.output
        assert "classes" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# render command
# ---------------------------------------------------------------------------


class TestRenderCommand:
    def test_render_named(self, tmp_path) -> None:
        path = _write(tmp_path, {"button": {"float": "left"}})
        result = CliRunner().invoke(cli, ["render", path])
        assert result.exit_code == 0
        assert result.output == ".jss-0-0 {\n  float: left;\n}\n"

    def test_render_unnamed(self, tmp_path) -> None:
        path = _write(tmp_path, {"@charset": '"utf-8"', "a": {"display": ["inline", "run-in"]}})
        result = CliRunner().invoke(cli, ["render", "--no-named", path])
        assert result.exit_code == 0
        assert result.output == '@charset "utf-8";\na {\n  display: inline;\n  display: run-in;\n}\n'

    def test_render_nested(self, tmp_path) -> None:
        path = _write(tmp_path, {"a": {"color": "red", "&:hover": {"color": "blue"}}})
        result = CliRunner().invoke(cli, ["render", "--no-named", path])
        assert result.exit_code == 0
        assert "a:hover {\n  color: blue;\n}" in result.output

    def test_render_no_nested(self, tmp_path) -> None:
        path = _write(tmp_path, {"a": {"color": "red", "&:hover": {"color": "blue"}}})
        result = CliRunner().invoke(cli, ["render", "--no-named", "--no-nested", path])
        assert result.exit_code == 0
        assert result.output == "a {\n  color: red;\n}\n"

    def test_invalid_json(self, tmp_path) -> None:
        path = _write(tmp_path, "{not json")
        result = CliRunner().invoke(cli, ["render", path])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_not_utf8(self, tmp_path) -> None:
        path = tmp_path / "styles.json"
        path.write_bytes(b'{"a": {"content": "\xff\xfe"}}')
        result = CliRunner().invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "not UTF-8" in result.output

    def test_not_an_object(self, tmp_path) -> None:
        path = _write(tmp_path, [1, 2])
        result = CliRunner().invoke(cli, ["render", path])
        assert result.exit_code == 1
        assert "JSON object" in result.output

    def test_invalid_rule(self, tmp_path) -> None:
        path = _write(tmp_path, {"@charset": {"a": "b"}})
        result = CliRunner().invoke(cli, ["render", path])
        assert result.exit_code == 1
        assert "Invalid rule" in result.output

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["render", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# classes command
# ---------------------------------------------------------------------------


class TestClassesCommand:
    def test_prints_class_map(self, tmp_path) -> None:
        path = _write(tmp_path, {"button": {"color": "red"}, "link": {"color": "blue"}})
        result = CliRunner().invoke(cli, ["classes", path])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"button": "jss-0-0", "link": "jss-0-1"}
