"""Application keys for type-safe app configuration access."""

from aiohttp import web

from flatsite.core.site import Site

site_key = web.AppKey("site", Site)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
