"""
Summary of all validation errors of a form, usually shown above the fields.
"""

from typing import Any, Mapping, Optional

from .. import config
from ..html import encode, tag
from ..model import FormModel
from .base import Widget


class ErrorSummary(Widget):
    """Header, a ``<ul>`` of error lines, footer.

    Without errors the list is still rendered (hidden) so client-side code
    has a place to put messages.

    Special options:
        header: Markup before the list (not escaped).
        footer: Markup after the list (not escaped).
        encode: Escape the messages (default True).
        show_all_errors: Every message instead of the first per attribute.
    """

    DEFAULT_HEADER = "<p>Please fix the following errors:</p>"

    def __init__(self, form: FormModel, options: Optional[Mapping[str, Any]] = None) -> None:
        self.form = form
        self.options = dict(options or {})

    def render(self) -> str:
        options = dict(self.options)
        header = options.pop("header", self.DEFAULT_HEADER)
        footer = options.pop("footer", "")
        encode_lines = options.pop("encode", True)
        show_all = options.pop("show_all_errors", False)
        options.setdefault("class", config.get_error_summary_css())

        lines = self.form.error_summary(show_all)
        if encode_lines:
            lines = [encode(line) for line in lines]

        if lines:
            content = "<ul><li>" + "</li>\n<li>".join(lines) + "</li></ul>"
        else:
            content = "<ul></ul>"
            style = options.get("style")
            options["style"] = f"{str(style).rstrip(';')}; display:none" if style else "display:none"
        return tag("div", f"{header}{content}{footer}", options)
