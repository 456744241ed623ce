"""aiohttp server for Flatsite.

Application factory and route registration. Every GET request is handed to
the site pipeline, which picks the page file and the status code.
"""

import logging

from aiohttp import web

from flatsite.app_keys import live_reload_enabled_key, site_key
from flatsite.config import Config
from flatsite.core.site import Site
from flatsite.live.reload import inject_live_reload_script

logger = logging.getLogger(__name__)


async def render_page(request: web.Request) -> web.Response:
    """Render the page file matching the request path."""
    site = request.app[site_key]

    result = site.launch(request.path, request.query_string)

    body = result.body
    if request.app[live_reload_enabled_key]:
        body = inject_live_reload_script(body)

    logger.debug(f"{request.method} {request.path_qs} -> {result.status_code}")
    return web.Response(text=body, status=result.status_code, content_type="text/html")


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    site = Site(config.site.app_root, autoescape=config.site.autoescape)
    app[site_key] = site
    app[live_reload_enabled_key] = config.live_reload.enabled

    # Live reload WebSocket endpoint (must be registered before the catch-all)
    if config.live_reload.enabled:
        from flatsite.live import LiveReloadManager
        from flatsite.live.reload import create_live_reload_routes

        manager = LiveReloadManager(
            site.app_root or config.site.app_root,
            watch_patterns=config.live_reload.watch_patterns,
        )
        app["live_reload_manager"] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    app.router.add_get("/{path:.*}", render_page)

    return app


async def _start_live_reload(app: web.Application) -> None:
    """Start live reload on application startup."""
    from flatsite.live import LiveReloadManager

    manager: LiveReloadManager = app["live_reload_manager"]
    await manager.start()


async def _stop_live_reload(app: web.Application) -> None:
    """Stop live reload on application cleanup."""
    from flatsite.live import LiveReloadManager

    manager: LiveReloadManager = app["live_reload_manager"]
    await manager.stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
