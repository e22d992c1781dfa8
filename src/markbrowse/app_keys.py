"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from markbrowse.core.navigation import NavigationBuilder
from markbrowse.core.page import PageRenderer
from markbrowse.core.resolver import EntryResolver

resolver_key = web.AppKey("resolver", EntryResolver)
navigation_key = web.AppKey("navigation", NavigationBuilder)
renderer_key = web.AppKey("renderer", PageRenderer)
static_dir_key = web.AppKey("static_dir", Path)
