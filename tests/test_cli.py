"""Tests for CLI commands."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner
from markbrowse.cli import cli
from markbrowse.config import Config


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from a directory with no markbrowse.toml above it."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Config, "_discover_config", classmethod(lambda cls: None))
    return tmp_path


@pytest.fixture
def markbrowse_logger() -> Iterator[logging.Logger]:
    """Restore the package logger level after the test."""
    logger = logging.getLogger("markbrowse")
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestTreeCommand:
    """Tests for the tree command."""

    def test__prints_navigation_tree(self, docs_dir: Path, isolated_cwd: Path) -> None:
        """Print directories first, then documents, indented by depth."""
        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(docs_dir)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == ["subfolder/", "  sub.md", "README.md", "index.md", "test.md"]

    def test__applies_gitignore(self, docs_dir: Path, isolated_cwd: Path) -> None:
        """Leave out documents matched by the root .gitignore."""
        (docs_dir / ".gitignore").write_text("subfolder/\ntest.md\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(docs_dir)])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["README.md", "index.md"]

    def test__empty_dir__reports_no_documents(self, tmp_path: Path, isolated_cwd: Path) -> None:
        """Report when there is nothing to list."""
        empty = tmp_path / "empty"
        empty.mkdir()

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(empty)])

        assert result.exit_code == 0
        assert "No markdown documents found" in result.output

    def test__missing_dir__fails(self, tmp_path: Path, isolated_cwd: Path) -> None:
        """Exit with an error when the directory doesn't exist."""
        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Error accessing directory" in result.output


class TestServeCommand:
    """Tests for the serve command."""

    def test__starts_server_with_overrides(
        self,
        docs_dir: Path,
        isolated_cwd: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Pass the directory and port to the server."""
        calls: list[Config] = []
        monkeypatch.setattr("markbrowse.server.run_server", calls.append)

        runner = CliRunner()
        result = runner.invoke(cli, ["serve", str(docs_dir), "--port", "9123"])

        assert result.exit_code == 0
        assert "Starting markbrowse server on 0.0.0.0:9123" in result.output
        assert f"Source directory: {docs_dir}" in result.output
        assert len(calls) == 1
        assert calls[0].docs.source_dir == docs_dir
        assert calls[0].server.port == 9123

    def test__config_file__supplies_settings(
        self,
        tmp_path: Path,
        docs_dir: Path,
        isolated_cwd: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Read host, port and directory from an explicit config file."""
        config_file = tmp_path / "markbrowse.toml"
        config_file.write_text('[server]\nhost = "127.0.0.1"\nport = 4000\n\n[docs]\nsource_dir = "docs"\n')
        calls: list[Config] = []
        monkeypatch.setattr("markbrowse.server.run_server", calls.append)

        runner = CliRunner()
        result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 0
        assert calls[0].server.host == "127.0.0.1"
        assert calls[0].server.port == 4000
        assert calls[0].docs.source_dir == docs_dir

    def test__file_instead_of_dir__fails_before_serving(
        self,
        docs_dir: Path,
        isolated_cwd: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Refuse to start when the root is not a directory."""
        calls: list[Config] = []
        monkeypatch.setattr("markbrowse.server.run_server", calls.append)

        runner = CliRunner()
        result = runner.invoke(cli, ["serve", str(docs_dir / "test.md")])

        assert result.exit_code == 1
        assert "is not a directory" in result.output
        assert calls == []

    def test__invalid_port__fails(self, docs_dir: Path, isolated_cwd: Path) -> None:
        """Reject ports outside the valid range."""
        runner = CliRunner()
        result = runner.invoke(cli, ["serve", str(docs_dir), "--port", "0"])

        assert result.exit_code == 2


class TestLoggingOptions:
    """Tests for the --verbose option."""

    def test__verbose__enables_debug_for_package_only(
        self,
        docs_dir: Path,
        isolated_cwd: Path,
        markbrowse_logger: logging.Logger,
    ) -> None:
        """Raise only the markbrowse logger to DEBUG."""
        root_level = logging.getLogger().level

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(docs_dir), "--verbose"])

        assert result.exit_code == 0
        assert markbrowse_logger.level == logging.DEBUG
        assert logging.getLogger().level == root_level
        assert logging.getLogger("aiohttp").getEffectiveLevel() > logging.DEBUG

    def test__default__leaves_package_level_unchanged(
        self,
        docs_dir: Path,
        isolated_cwd: Path,
        markbrowse_logger: logging.Logger,
    ) -> None:
        """Leave the markbrowse logger alone without --verbose."""
        markbrowse_logger.setLevel(logging.NOTSET)

        runner = CliRunner()
        result = runner.invoke(cli, ["tree", str(docs_dir)])

        assert result.exit_code == 0
        assert markbrowse_logger.level == logging.NOTSET
