"""Pages endpoint.

Resolves the request path to a markdown document and returns it as an
HTML page with the navigation sidebar.
"""

import asyncio
import logging

from aiohttp import web

from markbrowse.app_keys import navigation_key, renderer_key, resolver_key
from markbrowse.core.resolver import NoIndexError, NotFoundError

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    return await render_page(request, request.match_info["path"].lstrip("/"))


async def render_page(request: web.Request, path: str) -> web.Response:
    """Render the document for a root-relative path as an HTML page."""
    resolver = request.app[resolver_key]
    navigation = request.app[navigation_key]
    renderer = request.app[renderer_key]

    try:
        document = await asyncio.to_thread(resolver.resolve, path)
    except NotFoundError:
        raise web.HTTPNotFound()
    except NoIndexError as e:
        return await _error_page(request, e.message, status=404)
    except OSError as e:
        logger.warning("Error reading %s: %s", path, e)
        return await _error_page(request, f"Error reading file: {e}", status=500)

    items = await asyncio.to_thread(navigation.build)
    html = renderer.render(
        title=document.title,
        content=document.content,
        items=items,
        current_path=path,
    )
    return web.Response(text=html, content_type="text/html", charset="utf-8")


async def _error_page(request: web.Request, message: str, *, status: int) -> web.Response:
    items = await asyncio.to_thread(request.app[navigation_key].build)
    html = request.app[renderer_key].render_error(message, items)
    return web.Response(text=html, status=status, content_type="text/html", charset="utf-8")
