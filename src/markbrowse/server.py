"""aiohttp server for Markbrowse.

Application factory and route registration.
"""

import logging

from aiohttp import web

from markbrowse.api.navigation import create_navigation_routes
from markbrowse.api.pages import create_pages_routes
from markbrowse.api.static import create_static_routes
from markbrowse.app_keys import navigation_key, renderer_key, resolver_key, static_dir_key
from markbrowse.assets import get_static_dir, get_templates_dir
from markbrowse.config import Config
from markbrowse.core.ignore import IgnoreMatcher
from markbrowse.core.navigation import NavigationBuilder
from markbrowse.core.page import PageRenderer
from markbrowse.core.resolver import EntryResolver

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    The ignore rules are compiled here, once, and shared by every request.

    Args:
        config: Application configuration; the source directory must
                already have been validated

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    source_dir = config.docs.source_dir
    matcher = IgnoreMatcher.load(source_dir, config.docs.ignore_file)
    if matcher.empty:
        logger.debug("No ignore rules loaded for %s", source_dir)

    app[resolver_key] = EntryResolver(source_dir)
    app[navigation_key] = NavigationBuilder(source_dir, matcher)
    app[renderer_key] = PageRenderer(get_templates_dir())
    app[static_dir_key] = get_static_dir()

    # Fixed prefixes must be registered before the catch-all page route
    app.router.add_routes(create_static_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
