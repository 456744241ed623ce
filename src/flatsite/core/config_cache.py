"""Per-request cache of config files.

Each config type maps to config/<type>.toml and is read at most once per
cache instance.
"""

import logging
from typing import Any

from flatsite.core.paths import PathResolver
from flatsite.core.types import FileKind, FileLoader
from flatsite.errors import ConfigKeyNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)


class ConfigCache:
    """Lazily loads and memoizes config mappings keyed by type."""

    def __init__(self, resolver: PathResolver, loader: FileLoader) -> None:
        self._resolver = resolver
        self._loader = loader
        self._configs: dict[str, dict[str, Any]] = {}

    def __contains__(self, config_type: str) -> bool:
        return config_type in self._configs

    def get(self, config_type: str, key: str) -> Any:
        """Return a config value.

        Args:
            config_type: Config file name without extension (e.g. "site")
            key: Top-level key in that file

        Returns:
            The value stored under key

        Raises:
            ConfigNotFoundError: If the config file doesn't exist
            ConfigParseError: If the file doesn't produce a mapping
            ConfigKeyNotFoundError: If key is missing
        """
        config = self._configs.get(config_type)
        if config is None:
            config = self._load(config_type)
        else:
            logger.debug(f"Config '{config_type}' served from cache")

        if key in config:
            return config[key]

        path = self._resolver.resolve(config_type, FileKind.CONFIG).path
        raise ConfigKeyNotFoundError(key, config_type, path)

    def _load(self, config_type: str) -> dict[str, Any]:
        resolved = self._resolver.resolve(config_type, FileKind.CONFIG)
        config = self._loader.load(resolved)
        if not isinstance(config, dict):
            raise ConfigParseError(config_type)

        self._configs[config_type] = config
        return config
