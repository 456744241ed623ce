"""Flatsite exception hierarchy.

Shared by the resolver, loader, composer and site so every module raises
and catches the same types.
"""

from pathlib import Path

from flatsite.core.types import FileKind


class FlatsiteError(Exception):
    """Base for all flatsite-specific errors."""


class AppRootNotSetError(FlatsiteError):
    """Raised when a request is launched before the app root is set."""

    def __init__(self) -> None:
        super().__init__(
            "The application root must be set before launching, call site.set_app_root(path)",
        )


class UnsupportedKindError(FlatsiteError):
    """Raised when a file kind outside ``FileKind`` is requested."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"The type of file '{kind}' is not supported")


class NotFoundError(FlatsiteError):
    """A resolved file does not exist on disk.

    Carries the kind and the attempted path. Use ``not_found_error()`` to
    get the subclass matching a kind.
    """

    def __init__(self, kind: FileKind, path: Path) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Unable to locate the requested {kind.value} at path '{path}'")


class PageNotFoundError(NotFoundError):
    """404: the requested page file is missing."""


class TemplateNotFoundError(NotFoundError):
    pass


class FragmentNotFoundError(NotFoundError):
    pass


class ConfigNotFoundError(NotFoundError):
    pass


_NOT_FOUND_BY_KIND: dict[FileKind, type[NotFoundError]] = {
    FileKind.PAGE: PageNotFoundError,
    FileKind.TEMPLATE: TemplateNotFoundError,
    FileKind.FRAGMENT: FragmentNotFoundError,
    FileKind.CONFIG: ConfigNotFoundError,
}


def not_found_error(kind: FileKind, path: Path) -> NotFoundError:
    """Build the not-found error variant for a file kind."""
    return _NOT_FOUND_BY_KIND[kind](kind, path)


class NoTemplateSetError(FlatsiteError):
    """Raised when ``template_content()`` is used without a selected template."""

    def __init__(self) -> None:
        super().__init__("No template has been set so there is no content for it")


class ConfigParseError(FlatsiteError):
    """Raised when a config file does not parse into a mapping."""

    def __init__(self, config_type: str) -> None:
        self.config_type = config_type
        super().__init__(f"Unable to parse config of type '{config_type}'")


class ConfigKeyNotFoundError(FlatsiteError):
    """Raised when a key is missing from a loaded config file."""

    def __init__(self, key: str, config_type: str, path: Path) -> None:
        self.key = key
        self.config_type = config_type
        self.path = path
        super().__init__(
            f"Unable to locate config variable '{key}' of type '{config_type}' in file {path}",
        )
