"""Asset discovery for bundled templates and static files.

Locates the page template and the static files bundled into the
markbrowse package.
"""

from importlib.resources import files
from pathlib import Path


def _package_dir(name: str) -> Path:
    resource = files("markbrowse").joinpath(name)
    if not resource.is_dir():
        msg = f"Bundled {name} not found. Reinstall markbrowse with 'pip install -e .'."
        raise FileNotFoundError(msg)
    return Path(str(resource))


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the directory containing app.js and style.css.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    return _package_dir("static")


def get_templates_dir() -> Path:
    """Return path to bundled page templates.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    return _package_dir("templates")
