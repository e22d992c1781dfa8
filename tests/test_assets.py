"""Tests for assets module."""

import pytest
from markbrowse.assets import get_static_dir, get_templates_dir


class TestGetStaticDir:
    """Tests for get_static_dir()."""

    def test__bundled_assets_exist__returns_path(self) -> None:
        """Bundled static directory should be accessible."""
        static_dir = get_static_dir()

        assert (static_dir / "app.js").is_file()
        assert (static_dir / "style.css").is_file()

    def test__static_not_directory__raises_file_not_found_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should raise FileNotFoundError when static directory doesn't exist."""

        class FakeTraversable:
            def is_dir(self) -> bool:
                return False

            def joinpath(self, name: str) -> "FakeTraversable":
                return self

        monkeypatch.setattr("markbrowse.assets.files", lambda _: FakeTraversable())

        with pytest.raises(FileNotFoundError, match="Bundled static not found"):
            get_static_dir()


class TestGetTemplatesDir:
    """Tests for get_templates_dir()."""

    def test__bundled_templates_exist__returns_path(self) -> None:
        """Bundled layout template should be accessible."""
        assert (get_templates_dir() / "layout.html").is_file()
