"""Request path to document resolution.

Maps a root-relative request path to a markdown file on disk. Directory
requests fall back to an entry document (index.md, then README.md).
"""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from markbrowse.core.types import DOCUMENT_SUFFIX, ENTRY_DOCUMENTS

NO_INDEX_MESSAGE = "No index.md or README.md found in this directory"


class ResolveError(Exception):
    """Base class for resolution failures."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class NotFoundError(ResolveError):
    """Path does not exist, or is not a markdown document."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Not found: {path or '/'}")


class NoIndexError(ResolveError):
    """Path is an existing directory without an entry document."""

    def __init__(self, path: str) -> None:
        super().__init__(path, NO_INDEX_MESSAGE)


@dataclass(frozen=True)
class ResolvedDocument:
    """A document selected for a request."""

    source_path: Path
    content: bytes

    @property
    def title(self) -> str:
        """File name of the resolved document."""
        return self.source_path.name


class EntryResolver:
    """Resolves request paths to markdown documents under a root directory.

    Stateless apart from the root; every call reads from disk.
    """

    def __init__(self, source_dir: Path) -> None:
        self._source_dir = source_dir

    @property
    def source_dir(self) -> Path:
        """Root directory documents are served from."""
        return self._source_dir

    def resolve_path(self, path: str) -> Path:
        """Select the document file for a request path.

        Args:
            path: Root-relative path with no leading slash ("" for the root)

        Returns:
            Path to the markdown file to serve

        Raises:
            NotFoundError: If the path doesn't exist, escapes the root,
                           or names a non-markdown file
            NoIndexError: If the path is a directory with no entry document
        """
        path = path.lstrip("/")
        if any(part == ".." for part in PurePosixPath(path).parts):
            raise NotFoundError(path)

        target = self._source_dir / path
        if not target.exists():
            raise NotFoundError(path)

        if target.is_dir():
            for name in ENTRY_DOCUMENTS:
                candidate = target / name
                if candidate.is_file():
                    return candidate
            raise NoIndexError(path)

        if not target.name.endswith(DOCUMENT_SUFFIX):
            raise NotFoundError(path)
        return target

    def resolve(self, path: str) -> ResolvedDocument:
        """Resolve a request path and read the document.

        Content is returned exactly as stored on disk.

        Args:
            path: Root-relative path with no leading slash ("" for the root)

        Returns:
            ResolvedDocument with the file path and raw bytes

        Raises:
            NotFoundError: See resolve_path()
            NoIndexError: See resolve_path()
            OSError: If the selected file exists but cannot be read
        """
        source_path = self.resolve_path(path)
        return ResolvedDocument(source_path=source_path, content=source_path.read_bytes())
