"""Page and template composition.

A page renders into a fresh buffer. If it selected a template through
``use_template()``, the page buffer is captured and the template renders
into a new buffer, pulling the page output in with ``template_content()``.
Fragments render in place wherever ``use_fragment()`` is called.
"""

from typing import Any

from markupsafe import Markup

from flatsite.core.buffer import OutputBuffers
from flatsite.core.context import RenderContext
from flatsite.core.paths import PathResolver
from flatsite.core.types import FileKind, FileLoader
from flatsite.errors import NoTemplateSetError


class TemplateComposer:
    """Runs the page phase and the optional template phase of a request."""

    def __init__(
        self,
        resolver: PathResolver,
        loader: FileLoader,
        context: RenderContext,
        buffers: OutputBuffers,
    ) -> None:
        self._resolver = resolver
        self._loader = loader
        self._context = context
        self._buffers = buffers

    def render_page(self, name: str, variables: dict[str, Any] | None = None) -> str:
        """Render a page, wrapped in its template if one was selected.

        Args:
            name: Logical page name (e.g. "index", "blog/first-post")
            variables: Names injected into the page scope

        Returns:
            The complete output of the request

        Raises:
            PageNotFoundError: If the page file doesn't exist
            TemplateNotFoundError: If the selected template doesn't exist
        """
        self._buffers.push()
        self._context.page = name
        self._loader.load(self._resolver.resolve(name, FileKind.PAGE), variables)

        if self._context.template is not None:
            self._context.page_output = self._buffers.pop()
            self._buffers.push()
            self._loader.load(
                self._resolver.resolve(self._context.template, FileKind.TEMPLATE),
                self._context.template_vars,
            )

        return self._buffers.pop()

    def use_template(self, name: str, variables: dict[str, Any] | None = None) -> str:
        """Select the template wrapping the current page.

        Nothing is rendered until the page finishes. Returns an empty string
        so the call can sit in an output expression.
        """
        self._context.select_template(name, variables)
        return ""

    def use_fragment(self, name: str, variables: dict[str, Any] | None = None) -> Markup:
        """Render a fragment and return its output for inline substitution.

        Raises:
            FragmentNotFoundError: If the fragment file doesn't exist
        """
        self._buffers.push()
        self._loader.load(self._resolver.resolve(name, FileKind.FRAGMENT), variables)
        return Markup(self._buffers.pop())

    def template_content(self) -> Markup:
        """Return the captured page output inside a template.

        Raises:
            NoTemplateSetError: If no template was selected
        """
        if self._context.template is None:
            raise NoTemplateSetError()
        return Markup(self._context.page_output or "")
