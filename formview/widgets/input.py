"""
Single-value input widgets: ``<input>`` of any type and ``<textarea>``.
"""

from typing import Any, Mapping, Optional

from ..html import input_tag, tag
from ..model import FormModel
from .base import InputWidget


class Input(InputWidget):
    """Generic ``<input>`` for an attribute.

    Example:
        >>> Input(form, "age", {"min": 0}, type_="number").render()
        '<input type="number" id="profileform-age" name="ProfileForm[age]" value="42" min="0">'
    """

    type_ = "text"

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        type_: Optional[str] = None,
        rule_options: bool = True,
    ) -> None:
        super().__init__(form, attribute, options, rule_options=rule_options)
        if type_ is not None:
            self.type_ = type_

    def render(self) -> str:
        return input_tag(self.type_, self.input_name(), self.input_value(), self.build_options())


class TextInput(Input):
    type_ = "text"


class PasswordInput(Input):
    type_ = "password"


class HiddenInput(Input):
    """Hidden input; rule options are off by default (browsers ignore them)."""

    type_ = "hidden"

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        rule_options: bool = False,
    ) -> None:
        super().__init__(form, attribute, options, rule_options=rule_options)


class FileInput(Input):
    """File input preceded by a hidden input carrying an empty value.

    Browsers do not submit an untouched file input, so the hidden input makes
    sure the attribute is present in the posted data.

    Special options:
        unselect: Value of the hidden input (default ""); None skips it.
    """

    type_ = "file"

    def render(self) -> str:
        options = self.build_options()
        unselect = options.pop("unselect", "")
        name = self.input_name()
        if options.get("multiple") and not name.endswith("[]"):
            name += "[]"

        hidden = ""
        if unselect is not None:
            hidden_name = name[:-2] if name.endswith("[]") else name
            hidden = input_tag("hidden", hidden_name, unselect)
        return hidden + input_tag(self.type_, name, None, options)


class TextArea(InputWidget):
    """``<textarea>`` holding the (escaped) attribute value."""

    def render(self) -> str:
        options = self.build_options()
        options["name"] = self.input_name()
        value = self.input_value()
        return tag("textarea", "" if value is None else value, options, encode_content=True)
