"""Type definitions for file resolution."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Protocol


class FileKind(Enum):
    """Role a file plays in a request, fixing its directory and extension."""

    PAGE = "page"
    TEMPLATE = "template"
    FRAGMENT = "fragment"
    CONFIG = "config"

    @property
    def directory(self) -> str:
        """Directory segment under the app root (config is not pluralised)."""
        if self is FileKind.CONFIG:
            return self.value
        return f"{self.value}s"

    @property
    def extension(self) -> str:
        return "toml" if self is FileKind.CONFIG else "html"


@dataclass(frozen=True)
class ResolvedPath:
    """A logical name mapped to a concrete file under the app root.

    Only built by ``PathResolver.resolve()``, which guarantees that
    ``path`` contains no parent-directory segment.
    """

    kind: FileKind
    name: str
    path: Path

    def exists(self) -> bool:
        try:
            return self.path.is_file()
        except OSError:
            # e.g. ENAMETOOLONG for over-long names
            return False


class FileLoader(Protocol):
    """Executes a resolved file (see ScopeLoader)."""

    def load(self, file: ResolvedPath, variables: Mapping[str, Any] | None = None) -> Any: ...
