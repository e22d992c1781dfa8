"""Navigation tree builder.

Walks the served directory and builds the sidebar tree. The tree is
rebuilt from the filesystem on every call; nothing is cached.

Rules applied at every level:
- entries starting with "." are skipped
- entries matched by the ignore rules are skipped, with their subtree
- directories with no eligible documents underneath are omitted
- only files ending in ".md" are listed
- directories sort before documents, each group by name (case-sensitive)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypedDict

from markbrowse.core.ignore import IgnoreMatcher
from markbrowse.core.types import DOCUMENT_SUFFIX, HIDDEN_PREFIX, URLPath

logger = logging.getLogger(__name__)


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    name: str
    path: str
    is_dir: bool
    children: list[NavItemDict]


@dataclass
class NavItem:
    """Navigation item with children for the sidebar tree."""

    name: str
    path: URLPath
    is_dir: bool = False
    children: list[NavItem] = field(default_factory=list)

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"name": self.name, "path": self.path, "is_dir": self.is_dir}
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


class NavigationBuilder:
    """Builds navigation trees from the served directory.

    The ignore matcher is built once by the caller and shared read-only
    across builds, so one builder can serve concurrent requests.
    """

    def __init__(self, source_dir: Path, matcher: IgnoreMatcher | None = None) -> None:
        """Initialize builder.

        Args:
            source_dir: Root directory to walk
            matcher: Ignore rules applied to root-relative paths
        """
        self._source_dir = source_dir
        self._matcher = matcher or IgnoreMatcher()

    @property
    def source_dir(self) -> Path:
        """Root directory being walked."""
        return self._source_dir

    @property
    def matcher(self) -> IgnoreMatcher:
        """Ignore rules applied during walks."""
        return self._matcher

    def build(self) -> list[NavItem]:
        """Build the full navigation tree for the root directory.

        Returns:
            Root-level navigation items, empty if the root has no documents
        """
        return self.walk(self._source_dir)

    def walk(self, directory: Path, prefix: str = "") -> list[NavItem]:
        """Walk a directory and return its sorted navigation items.

        Args:
            directory: Directory to list
            prefix: Root-relative path of ``directory`` ("" for the root)

        Returns:
            Sorted items; empty if the directory is unreadable or holds
            no eligible documents
        """
        return self._walk(directory, prefix, frozenset({os.path.realpath(directory)}))

    def _walk(self, directory: Path, prefix: str, ancestors: frozenset[str]) -> list[NavItem]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return []

        dirs: list[NavItem] = []
        docs: list[NavItem] = []
        for entry in entries:
            name = entry.name
            if name.startswith(HIDDEN_PREFIX):
                continue

            rel_path = URLPath(f"{prefix}/{name}" if prefix else name)
            is_dir = _is_dir(entry)
            if self._matcher.matches(rel_path, is_dir=is_dir):
                continue

            if is_dir:
                real = os.path.realpath(entry.path)
                if real in ancestors:
                    logger.debug("Skipping symlink cycle at %s -> %s", rel_path, real)
                    continue
                children = self._walk(Path(entry.path), rel_path, ancestors | {real})
                if children:
                    dirs.append(NavItem(name=name, path=rel_path, is_dir=True, children=children))
            elif name.endswith(DOCUMENT_SUFFIX) and _is_file(entry):
                docs.append(NavItem(name=name, path=rel_path))

        dirs.sort(key=_sort_key)
        docs.sort(key=_sort_key)
        return dirs + docs


def _sort_key(item: NavItem) -> str:
    return item.name


def _is_dir(entry: os.DirEntry[str]) -> bool:
    # Follows symlinks; broken links are neither dir nor file.
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def find_item(items: list[NavItem], path: str) -> NavItem | None:
    """Find the item with the given root-relative path.

    Args:
        items: Navigation tree to search
        path: Root-relative path (e.g., "guide/setup.md")

    Returns:
        Matching item, or None if the path is not in the tree
    """
    for item in items:
        if item.path == path:
            return item
        if item.is_dir and path.startswith(f"{item.path}/"):
            return find_item(item.children, path)
    return None
