"""Core type definitions."""

from typing import NewType

# Slash-separated path relative to the served root (e.g., "guide/setup.md").
# Doubles as the routing key and the ignore-matcher input.
URLPath = NewType("URLPath", str)

DOCUMENT_SUFFIX = ".md"
HIDDEN_PREFIX = "."

# Tried in order when a directory is requested.
ENTRY_DOCUMENTS = ("index.md", "README.md")
