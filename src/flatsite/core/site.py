"""Request pipeline with not-found and server-error fallback.

A ``Site`` holds the app root and the compiled-template environment and is
safe to share between requests. Every ``launch()`` builds a fresh
``PageRequest`` owning the render context, config cache, URL parts and
output buffers of that request alone.

Fallback order:
    requested page -> "404" page on PageNotFoundError
    requested or 404 page -> "500" page on any other failure
"""

import logging
from dataclasses import dataclass
from http import HTTPStatus
from pathlib import Path
from typing import Any

from jinja2.sandbox import SandboxedEnvironment

from flatsite.core.api import PageAPI
from flatsite.core.buffer import OutputBuffers
from flatsite.core.composer import TemplateComposer
from flatsite.core.config_cache import ConfigCache
from flatsite.core.context import RenderContext
from flatsite.core.loader import ScopeLoader, create_environment
from flatsite.core.paths import PathResolver
from flatsite.core.uri import RequestURI
from flatsite.errors import AppRootNotSetError, FlatsiteError, PageNotFoundError

logger = logging.getLogger(__name__)

NOT_FOUND_PAGE = "404"
SERVER_ERROR_PAGE = "500"


@dataclass(frozen=True)
class PageResponse:
    """Output of one request.

    ``status`` is None when the pipeline emitted no status signal.
    """

    body: str
    status: HTTPStatus | None = None

    @property
    def status_code(self) -> int:
        return int(self.status or HTTPStatus.OK)


class PageRequest:
    """Request-local state and collaborators."""

    def __init__(self, resolver: PathResolver, env: SandboxedEnvironment, uri: RequestURI) -> None:
        self.uri = uri
        self.context = RenderContext()
        self.buffers = OutputBuffers()
        self.loader = ScopeLoader(env, resolver.app_root, self.buffers)
        self.config = ConfigCache(resolver, self.loader)
        self.composer = TemplateComposer(resolver, self.loader, self.context, self.buffers)
        self.api = PageAPI(self.composer, self.config, uri, self.context)
        self.loader.provide(self.api.scope())

    def render_page(self, name: str, variables: dict[str, Any] | None = None) -> str:
        return self.composer.render_page(name, variables)

    def reset(self) -> None:
        """Drop buffered output and template selection before a fallback."""
        self.buffers.discard()
        self.context.reset_template()


class Site:
    """A flat-file site rooted at an app directory."""

    def __init__(self, app_root: Path | str | None = None, *, autoescape: bool = True) -> None:
        self._autoescape = autoescape
        self._app_root: Path | None = None
        self._resolver: PathResolver | None = None
        self._env: SandboxedEnvironment | None = None
        if app_root is not None:
            self.set_app_root(app_root)

    @property
    def app_root(self) -> Path | None:
        return self._app_root

    def set_app_root(self, app_root: Path | str) -> None:
        """Set the directory holding pages/, templates/, fragments/ and config/.

        Raises:
            FlatsiteError: If the app root was already set
        """
        if self._app_root is not None:
            raise FlatsiteError(f"The application root is already set to {self._app_root}")

        root = Path(app_root).resolve()
        self._app_root = root
        self._resolver = PathResolver(root)
        self._env = create_environment(root, autoescape=self._autoescape)

    def launch(self, request_path: str, query_string: str = "") -> PageResponse:
        """Render the page for a request path.

        Args:
            request_path: Raw request path (e.g. "/blog/first-post?page=2")
            query_string: Raw query string supplied by the host

        Returns:
            PageResponse with the composed body and any status signal

        Raises:
            AppRootNotSetError: If set_app_root() was never called
            Exception: Whatever the 500 page raises, other than a missing file
        """
        if self._resolver is None or self._env is None:
            raise AppRootNotSetError()

        uri = RequestURI.parse(request_path, query_string)
        request = PageRequest(self._resolver, self._env, uri)

        try:
            return PageResponse(request.render_page(uri.page_name))
        except PageNotFoundError as exc:
            logger.info(f"Page '{uri.page_name}' not found: {exc}")
            request.reset()
            return PageResponse(self._render_not_found(request), HTTPStatus.NOT_FOUND)
        except Exception as exc:
            logger.error(f"Failed to render '{uri.page_name}'", exc_info=exc)
            request.reset()
            return PageResponse(
                self._render_server_error(request, exc),
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )

    def _render_not_found(self, request: PageRequest) -> str:
        try:
            return request.render_page(NOT_FOUND_PAGE)
        except Exception as exc:
            # A broken 404 page keeps the 404 status with an empty body
            logger.warning(f"Failed to render the {NOT_FOUND_PAGE} page: {exc}")
            request.reset()
            return ""

    def _render_server_error(self, request: PageRequest, error: Exception) -> str:
        try:
            return request.render_page(SERVER_ERROR_PAGE, {"e": error})
        except PageNotFoundError:
            logger.warning(f"No {SERVER_ERROR_PAGE} page, responding with an empty body")
            request.reset()
            return ""
