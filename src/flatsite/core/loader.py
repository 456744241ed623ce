"""Execution of resolved files with an injected variable scope.

Pages, templates and fragments are Jinja2 templates rendered in a
sandboxed environment. Their output is streamed into the active output
buffer. Config files are TOML documents parsed into a mapping.
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import FileSystemLoader, TemplateNotFound
from jinja2.sandbox import SandboxedEnvironment

from flatsite.core.buffer import OutputBuffers
from flatsite.core.types import FileKind, ResolvedPath
from flatsite.errors import ConfigParseError, not_found_error

logger = logging.getLogger(__name__)


def create_environment(app_root: Path, *, autoescape: bool = True) -> SandboxedEnvironment:
    """Create the sandboxed Jinja environment for an app root.

    Template names are paths relative to the app root
    (e.g. "pages/index.html"). Compiled templates are cached and reloaded
    when their source file changes.

    Args:
        app_root: Directory holding pages/, templates/, fragments/, config/
        autoescape: Escape variables rendered into output

    Returns:
        Configured SandboxedEnvironment
    """
    return SandboxedEnvironment(
        loader=FileSystemLoader(str(app_root)),
        autoescape=autoescape,
        keep_trailing_newline=True,
        auto_reload=True,
    )


class ScopeLoader:
    """Loads resolved files for a single request.

    Every render gets a fresh context built from the request API and the
    caller's variables, so assignments inside a file never reach the caller.
    """

    def __init__(
        self,
        env: SandboxedEnvironment,
        app_root: Path,
        buffers: OutputBuffers,
        api: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            env: Environment created by create_environment()
            app_root: Root the environment loads from
            buffers: Output buffer stack of the request
            api: Names injected into every rendered file
        """
        self._env = env
        self._app_root = app_root
        self._buffers = buffers
        self._api = dict(api or {})

    def provide(self, api: Mapping[str, Any]) -> None:
        """Add names injected into every file rendered from now on."""
        self._api.update(api)

    def load(self, file: ResolvedPath, variables: Mapping[str, Any] | None = None) -> Any:
        """Execute a resolved file.

        Args:
            file: Path built by PathResolver
            variables: Names bound into the file's scope

        Returns:
            The parsed mapping for config files, None otherwise

        Raises:
            NotFoundError: Kind-specific variant if the file doesn't exist
            ConfigParseError: If a config file is not valid TOML
        """
        if not file.exists():
            raise not_found_error(file.kind, file.path)

        logger.debug(f"Loading {file.kind.value} '{file.name}' from {file.path}")

        if file.kind is FileKind.CONFIG:
            return self._load_config(file)

        self._render(file, variables)
        return None

    def _load_config(self, file: ResolvedPath) -> dict[str, Any]:
        try:
            with file.path.open("rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(file.name) from exc

    def _render(self, file: ResolvedPath, variables: Mapping[str, Any] | None) -> None:
        template_name = file.path.relative_to(self._app_root).as_posix()
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as exc:
            raise not_found_error(file.kind, file.path) from exc

        scope = {**self._api, **(variables or {})}
        for chunk in template.generate(scope):
            self._buffers.write(chunk)
