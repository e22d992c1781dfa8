"""Ignore-rule matching for the navigation tree.

Compiles the root directory's ignore file (gitignore syntax) once at
startup. A missing, unreadable or malformed file yields a matcher that
matches nothing; loading never raises.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_FILE = ".gitignore"


class IgnoreMatcher:
    """Immutable matcher for root-relative, slash-separated paths.

    Uses git's precedence rules: later patterns win, so a ``!pattern``
    re-includes paths excluded by an earlier line.
    """

    __slots__ = ("_spec",)

    def __init__(self, spec: pathspec.PathSpec | None = None) -> None:
        self._spec = spec

    @classmethod
    def from_lines(cls, lines: list[str]) -> IgnoreMatcher:
        """Compile gitignore-style lines into a matcher.

        Raises:
            ValueError: If a pattern is malformed
        """
        return cls(pathspec.GitIgnoreSpec.from_lines(lines))

    @classmethod
    def load(cls, root: Path, filename: str = DEFAULT_IGNORE_FILE) -> IgnoreMatcher:
        """Build a matcher from the ignore file directly under ``root``.

        Args:
            root: Served root directory
            filename: Ignore file name, relative to root

        Returns:
            Compiled matcher, or an empty matcher if the file is absent
            or cannot be parsed
        """
        ignore_path = root / filename
        if not ignore_path.is_file():
            return cls()

        try:
            lines = ignore_path.read_text(encoding="utf-8").splitlines()
            matcher = cls.from_lines(lines)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unusable ignore file %s: %s", ignore_path, e)
            return cls()

        logger.debug("Loaded ignore rules from %s", ignore_path)
        return matcher

    @property
    def empty(self) -> bool:
        """True when no patterns are loaded."""
        return self._spec is None

    def matches(self, path: str, *, is_dir: bool = False) -> bool:
        """Check whether a relative path is excluded.

        Args:
            path: Slash-separated path relative to the root
            is_dir: Whether the path names a directory, so that
                    directory-only patterns such as ``build/`` apply

        Returns:
            True if the path is ignored
        """
        if self._spec is None:
            return False
        if is_dir and not path.endswith("/"):
            path = f"{path}/"
        return self._spec.match_file(path)
