"""Names available inside page, template and fragment files.

Every rendered file sees ``site`` plus its methods as top-level names::

    {{ use_template("main", {"title": "Home"}) }}
    <h1>{{ get_config("site", "title") }}</h1>
    {{ use_fragment("nav", {"active": site.page}) }}

and a template pulls the page output in with ``{{ template_content() }}``.
"""

from typing import Any

from markupsafe import Markup

from flatsite.core.composer import TemplateComposer
from flatsite.core.config_cache import ConfigCache
from flatsite.core.context import RenderContext
from flatsite.core.uri import RequestURI


class PageAPI:
    """Read-only view of the request plus the composition calls.

    Exposed to the sandbox, which blocks the underscored attributes.
    """

    def __init__(
        self,
        composer: TemplateComposer,
        config: ConfigCache,
        uri: RequestURI,
        context: RenderContext,
    ) -> None:
        self._composer = composer
        self._config = config
        self._uri = uri
        self._context = context

    @property
    def page(self) -> str | None:
        return self._context.page

    @property
    def template(self) -> str | None:
        return self._context.template

    @property
    def path(self) -> str:
        return self._uri.path

    def use_template(self, name: str, variables: dict[str, Any] | None = None) -> str:
        return self._composer.use_template(name, variables)

    def use_fragment(self, name: str, variables: dict[str, Any] | None = None) -> Markup:
        return self._composer.use_fragment(name, variables)

    def template_content(self) -> Markup:
        return self._composer.template_content()

    def get_config(self, config_type: str, key: str) -> Any:
        return self._config.get(config_type, key)

    def get_url_part(self, number: int | str) -> str | None:
        return self._uri.get_url_part(number)

    def scope(self) -> dict[str, Any]:
        """Return the names injected into rendered files."""
        return {
            "site": self,
            "use_template": self.use_template,
            "use_fragment": self.use_fragment,
            "template_content": self.template_content,
            "get_config": self.get_config,
            "get_url_part": self.get_url_part,
        }
