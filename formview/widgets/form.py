"""
Form tag component.

Renders the opening and closing ``<form>`` tags together with the hidden
inputs a server-rendered form needs: the CSRF token, and a method override
for verbs browsers cannot submit (PUT, PATCH, DELETE).
"""

from typing import Any, Mapping, Optional
from urllib.parse import parse_qsl

from ..html import begin_tag, end_tag, input_tag
from .base import Widget


class Form(Widget):
    """Form wrapper with CSRF protection.

    Parameters:
        action: Target URL. For GET forms the query string is moved into
            hidden inputs because browsers drop it on submit.
        method: HTTP verb; anything other than GET/POST is sent as POST with
            a hidden ``method_param`` input carrying the verb.
        options: Extra attributes of the ``<form>`` tag.
        csrf_token: Rendered as hidden input ``csrf_name`` on POST forms.
    """

    def __init__(
        self,
        action: str = "",
        method: str = "post",
        options: Optional[Mapping[str, Any]] = None,
        *,
        csrf_token: Optional[str] = None,
        csrf_name: str = "csrf_token",
        method_param: str = "_method",
    ) -> None:
        self.action = action
        self.method = method
        self.options = dict(options or {})
        self.csrf_token = csrf_token
        self.csrf_name = csrf_name
        self.method_param = method_param

    def begin(self) -> str:
        options = dict(self.options)
        action = self.action
        method = self.method.lower()
        hidden: list[str] = []

        if method not in ("get", "post"):
            hidden.append(input_tag("hidden", self.method_param, self.method.upper()))
            method = "post"

        if method == "post" and self.csrf_token is not None:
            hidden.append(input_tag("hidden", self.csrf_name, self.csrf_token))

        if method == "get" and "?" in action:
            action, _, query = action.partition("?")
            for name, value in parse_qsl(query, keep_blank_values=True):
                hidden.append(input_tag("hidden", name, value))

        options["action"] = action
        options["method"] = method
        html = begin_tag("form", options)
        if hidden:
            html += "\n" + "\n".join(hidden)
        return html

    def end(self) -> str:
        return end_tag("form")

    def render(self, content: str = "") -> str:
        """Renders the whole form around ``content``."""
        return f"{self.begin()}\n{content}\n{self.end()}"
