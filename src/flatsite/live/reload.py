"""WebSocket-based live reload for development mode.

Monitors the app root for changes and notifies connected clients via
WebSocket so that browsers reload the page.
"""

import asyncio
import json
import weakref
from pathlib import Path

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

from flatsite.core.types import FileKind

LIVE_RELOAD_PATH = "/_flatsite/live-reload"

LIVE_RELOAD_SCRIPT = f"""<script>
(function () {{
  var scheme = location.protocol === "https:" ? "wss://" : "ws://";
  var ws = new WebSocket(scheme + location.host + "{LIVE_RELOAD_PATH}");
  ws.onmessage = function () {{ location.reload(); }};
}})();
</script>
"""


def inject_live_reload_script(html: str) -> str:
    """Insert the live reload client before the closing body tag.

    Output without a ``</body>`` tag is returned unchanged.
    """
    index = html.rfind("</body>")
    if index == -1:
        return html
    return html[:index] + LIVE_RELOAD_SCRIPT + html[index:]


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between file system watcher and connected WebSocket clients
    to provide automatic page refresh on source file changes.
    """

    def __init__(self, app_root: Path, watch_patterns: list[str]) -> None:
        """Initialize the live reload manager.

        Args:
            app_root: Directory to watch for changes
            watch_patterns: Glob patterns relative to the app root
        """
        self._app_root = app_root
        self._watch_patterns = watch_patterns
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_files())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch for file changes and broadcast reload events."""
        async for changes in awatch(self._app_root):
            for change_type, path_str in changes:
                if change_type == Change.deleted:
                    continue

                path = Path(path_str)
                if not self.matches_patterns(path):
                    continue

                await self._broadcast_reload(self.to_request_path(path))

    def matches_patterns(self, path: Path) -> bool:
        """Check if a path under the app root matches any watch pattern."""
        try:
            relative = path.relative_to(self._app_root)
        except ValueError:
            return False

        return any(relative.match(pattern) for pattern in self._watch_patterns)

    def to_request_path(self, file_path: Path) -> str | None:
        """Convert a changed page file to the request path serving it.

        Returns:
            Request path (e.g. "/blog/first-post"), or None when the file
            is not a page and may affect every page
        """
        relative = file_path.relative_to(self._app_root)
        if len(relative.parts) < 2 or relative.parts[0] != FileKind.PAGE.directory:
            return None

        page_name = Path(*relative.parts[1:]).with_suffix("").as_posix()
        if page_name == "index":
            return "/"
        return f"/{page_name}"

    async def _broadcast_reload(self, path: str | None) -> None:
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": path})

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                pass


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    return [web.get(LIVE_RELOAD_PATH, manager.handle_websocket)]
