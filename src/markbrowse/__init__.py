"""Markbrowse - browse a folder of markdown documents over HTTP."""

__version__ = "0.1.0"
