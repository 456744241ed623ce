"""Per-request render state."""

from dataclasses import dataclass
from typing import Any


@dataclass
class RenderContext:
    """Mutable state of the page being rendered.

    Pages select a template through ``use_template()``; the composer reads
    the selection after the page phase and stores the captured page output
    for ``template_content()``.
    """

    page: str | None = None
    template: str | None = None
    template_vars: dict[str, Any] | None = None
    page_output: str | None = None

    def select_template(self, name: str, variables: dict[str, Any] | None) -> None:
        self.template = name
        self.template_vars = dict(variables) if variables else {}

    def reset_template(self) -> None:
        """Forget the template and captured page output of a previous attempt."""
        self.template = None
        self.template_vars = None
        self.page_output = None
