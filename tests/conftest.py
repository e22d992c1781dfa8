"""Shared test fixtures."""

from pathlib import Path

import pytest
from markbrowse.config import Config, DocsConfig, ServerConfig


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create files (and parent directories) under root."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory with the sample layout.

    index.md, README.md, test.md and subfolder/sub.md.
    """
    docs = tmp_path / "docs"
    docs.mkdir()
    write_files(
        docs,
        {
            "index.md": "# Test Index\n\nThis is a test index file.",
            "README.md": "# Test README\n\nThis is a test README file.",
            "test.md": "# Test File\n\nThis is a test file.",
            "subfolder/sub.md": "# Subfolder Test\n\nThis is in a subfolder.",
        },
    )
    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration serving docs_dir."""
    return Config(
        server=ServerConfig(host="127.0.0.1"),
        docs=DocsConfig(source_dir=docs_dir),
    )
