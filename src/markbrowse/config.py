"""Configuration management for Markbrowse.

Supports TOML configuration format with auto-discovery. Every setting
has a default, so a config file is optional.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from markbrowse.core.ignore import DEFAULT_IGNORE_FILE

CONFIG_FILENAME = "markbrowse.toml"


class ConfigError(ValueError):
    """Invalid configuration or unusable startup settings."""


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation configuration."""

    source_dir: Path = field(default_factory=lambda: Path("."))
    ignore_file: str = DEFAULT_IGNORE_FILE


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for markbrowse.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ConfigError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(server=ServerConfig(), docs=DocsConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ConfigError: If the file is not valid TOML or has invalid values
        """
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        server = cls._parse_server(data.get("server"))
        docs = cls._parse_docs(data.get("docs"), config_dir)

        return cls(server=server, docs=docs, config_path=path)

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ConfigError("server section must be a dictionary")

        host = data.get("host", ServerConfig.host)
        if not isinstance(host, str):
            raise ConfigError("server.host must be a string")

        port = data.get("port", ServerConfig.port)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ConfigError("server.port must be an integer")
        if not 0 < port < 65536:
            raise ConfigError("server.port must be between 1 and 65535")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir)

        if not isinstance(data, dict):
            raise ConfigError("docs section must be a dictionary")

        source_dir = data.get("source_dir", ".")
        if not isinstance(source_dir, str):
            raise ConfigError("docs.source_dir must be a string")

        ignore_file = data.get("ignore_file", DEFAULT_IGNORE_FILE)
        if not isinstance(ignore_file, str) or not ignore_file:
            raise ConfigError("docs.ignore_file must be a non-empty string")

        return DocsConfig(source_dir=config_dir / source_dir, ignore_file=ignore_file)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config; the original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        return replace(self, server=server, docs=docs)

    def validate_source_dir(self) -> Path:
        """Check that the source directory can be served.

        Returns:
            The source directory

        Raises:
            ConfigError: If the directory is missing or not a directory
        """
        source_dir = self.docs.source_dir
        if not source_dir.exists():
            raise ConfigError(f"Error accessing directory {source_dir}: no such directory")
        if not source_dir.is_dir():
            raise ConfigError(f"{source_dir} is not a directory")
        return source_dir
