"""Static asset endpoint.

Serves the bundled stylesheet and script byte-for-byte.
"""

from pathlib import Path, PurePosixPath

from aiohttp import web

from markbrowse.app_keys import static_dir_key

CONTENT_TYPES = {
    ".css": "text/css",
    ".js": "application/javascript",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def create_static_routes() -> list[web.RouteDef]:
    return [web.get("/static/{name:.+}", get_static)]


async def get_static(request: web.Request) -> web.Response:
    name = request.match_info["name"]
    static_dir = request.app[static_dir_key]

    asset_path = _asset_path(static_dir, name)
    if asset_path is None:
        raise web.HTTPNotFound()

    return web.Response(
        body=asset_path.read_bytes(),
        content_type=content_type_for(asset_path.name),
    )


def content_type_for(name: str) -> str:
    """Look up the content type for an asset file name."""
    return CONTENT_TYPES.get(PurePosixPath(name).suffix, DEFAULT_CONTENT_TYPE)


def _asset_path(static_dir: Path, name: str) -> Path | None:
    """Return the asset file for a name, or None if it is not servable."""
    if any(part == ".." for part in PurePosixPath(name).parts):
        return None
    candidate = static_dir / name.lstrip("/")
    if not candidate.is_file():
        return None
    return candidate
