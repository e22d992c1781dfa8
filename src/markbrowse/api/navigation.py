"""Navigation API endpoints.

Provides the full navigation tree and subtree endpoints as JSON. Paths
under /api/navigation/ that are not sections are served as pages.
"""

import asyncio

from aiohttp import web

from markbrowse.api.pages import render_page
from markbrowse.app_keys import navigation_key
from markbrowse.core.navigation import find_item


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{path:.*}", get_navigation_subtree),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    navigation = request.app[navigation_key]
    items = await asyncio.to_thread(navigation.build)
    return web.json_response({"items": [item.to_dict() for item in items]})


async def get_navigation_subtree(request: web.Request) -> web.Response:
    path = request.match_info["path"].strip("/")
    navigation = request.app[navigation_key]
    items = await asyncio.to_thread(navigation.build)

    item = find_item(items, path)
    if item is None or not item.is_dir:
        # Not a section: the URL may name a document under api/navigation/
        return await render_page(request, request.path.lstrip("/"))

    return web.json_response({"items": [child.to_dict() for child in item.children]})
