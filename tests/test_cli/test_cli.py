"""Tests for CLI commands."""

import pytest
from click.testing import CliRunner

from fixmdtables.cli import cli
from fixmdtables.tables.cells import FILLER

TABLE = "| Status | Meaning |\n| ------ | ------- |\n| ✅     | Done    |\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "table.md"
    path.write_text(TABLE, encoding="utf-8")
    return path


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "fix-md-tables" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestFixCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["fix", "--help"])
        assert result.exit_code == 0
        assert "--check" in result.output
        assert "--keep-separators" in result.output

    def test_fixes_file(self, runner, table_file):
        result = runner.invoke(cli, ["fix", str(table_file)])
        assert result.exit_code == 0
        assert "Fixed" in result.output
        assert FILLER in table_file.read_text(encoding="utf-8")

    def test_check_reports_and_fails(self, runner, table_file):
        result = runner.invoke(cli, ["fix", "--check", str(table_file)])
        assert result.exit_code == 1
        assert "Would fix" in result.output
        assert table_file.read_text(encoding="utf-8") == TABLE

    def test_check_passes_when_clean(self, runner, table_file):
        runner.invoke(cli, ["fix", str(table_file)])
        result = runner.invoke(cli, ["fix", "--check", str(table_file)])
        assert result.exit_code == 0

    def test_keep_separators(self, runner, table_file):
        runner.invoke(cli, ["fix", "--keep-separators", str(table_file)])
        lines = table_file.read_text(encoding="utf-8").split("\n")
        assert lines[1] == "| ------ | ------- |"
        assert FILLER in lines[0]

    def test_default_files(self, runner, markdown_tree, monkeypatch):
        monkeypatch.chdir(markdown_tree)
        result = runner.invoke(cli, ["fix"])
        assert result.exit_code == 0
        assert "Processed 3 markdown file(s)" in result.output

    def test_missing_path_skipped(self, runner, tmp_path):
        result = runner.invoke(cli, ["fix", str(tmp_path / "missing.md")])
        assert result.exit_code == 0
        assert "Processed 0 markdown file(s)" in result.output

    def test_invalid_config(self, runner, tmp_path, monkeypatch):
        (tmp_path / "fix-md-tables.yaml").write_text("extra_ranges: [[5, 1]]\n")
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["fix"])
        assert result.exit_code == 1


class TestCleanCommand:
    def test_cleans_file(self, runner, table_file):
        runner.invoke(cli, ["fix", str(table_file)])
        result = runner.invoke(cli, ["clean", str(table_file)])
        assert result.exit_code == 0
        assert FILLER not in table_file.read_text(encoding="utf-8")


class TestConfigCommand:
    def test_shows_table(self, runner):
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 0
        assert "Resolved Configuration" in result.output
        assert "rewrite_separators" in result.output
