"""HTML page rendering.

Wraps the Jinja2 layout template. Markdown is not converted here: the
raw document text is embedded in the page and rendered in the browser
by the bundled script.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from markbrowse.core.navigation import NavItem

LAYOUT_TEMPLATE = "layout.html"
ERROR_TITLE = "Error"


class PageRenderer:
    """Renders documents and error messages into the site layout."""

    def __init__(self, templates_dir: Path) -> None:
        """Initialize renderer.

        Args:
            templates_dir: Directory containing layout.html
        """
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
        self._template = self._env.get_template(LAYOUT_TEMPLATE)

    def render(
        self,
        title: str,
        content: bytes,
        items: list[NavItem],
        current_path: str = "",
    ) -> str:
        """Render a document page.

        Args:
            title: Page title
            content: Raw document bytes, decoded as UTF-8 for embedding
            items: Navigation tree for the sidebar
            current_path: Requested root-relative path, highlighted in the sidebar

        Returns:
            Complete HTML page
        """
        return self._template.render(
            title=title,
            content=content.decode("utf-8", errors="replace"),
            files=items,
            current_path=current_path,
        )

    def render_error(self, message: str, items: list[NavItem]) -> str:
        """Render an error message as a page with the normal sidebar."""
        content = f"# {ERROR_TITLE}\n\n{message}"
        return self.render(ERROR_TITLE, content.encode("utf-8"), items)
