"""Logical name to file path resolution.

Layout under the app root:
    pages/<name>.html
    templates/<name>.html
    fragments/<name>.html
    config/<name>.toml
"""

from pathlib import Path

from flatsite.core.types import FileKind, ResolvedPath
from flatsite.errors import UnsupportedKindError

PARENT_MARKER = ".."


def sanitize_name(name: str) -> str:
    """Strip every parent-directory marker from a logical name.

    ``str.replace`` removes non-overlapping occurrences left to right, so
    any run of dots collapses to at most one and no marker survives.
    """
    return name.replace(PARENT_MARKER, "")


class PathResolver:
    """Maps (name, kind) pairs to paths under an app root.

    Never touches the file system.
    """

    def __init__(self, app_root: Path) -> None:
        self._app_root = app_root

    @property
    def app_root(self) -> Path:
        return self._app_root

    def resolve(self, name: str, kind: FileKind) -> ResolvedPath:
        """Resolve a logical name of the given kind.

        Args:
            name: Extension-less logical name (e.g. "blog/first-post")
            kind: File kind selecting directory and extension

        Returns:
            ResolvedPath under the app root

        Raises:
            UnsupportedKindError: If kind is not a FileKind
        """
        if not isinstance(kind, FileKind):
            raise UnsupportedKindError(kind)

        clean = sanitize_name(name)
        path = Path(f"{self._app_root}/{kind.directory}/{clean}.{kind.extension}")
        return ResolvedPath(kind=kind, name=name, path=path)
