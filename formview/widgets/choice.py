"""
Checkbox and radio button for a single attribute.

Markup (enclosed by label, the default):
    <input type="hidden" name="LoginForm[remember_me]" value="0"><label><input
    type="checkbox" id="loginform-remember_me" name="LoginForm[remember_me]"
    value="1" checked> Remember Me</label>

The hidden input submits the "uncheck" value when the box is left unchecked.
"""

from typing import Any, Mapping, Optional

from ..html import encode, input_tag, label_tag
from ..model import FormModel, get_attribute_value
from .base import FormWidget


def is_checked(current: Any, value: Any) -> bool:
    """Whether a model value selects the input carrying ``value``."""
    if current is None:
        return False
    if isinstance(current, bool):
        return current
    if isinstance(current, (list, tuple, set)):
        return str(value) in {str(item) for item in current}
    return str(current) == str(value)


class CheckBox(FormWidget):
    """Checkbox bound to an attribute.

    Special options:
        value: Submitted when checked (default ``"1"``).
        uncheck: Submitted when unchecked via a hidden input (default
            ``"0"``); None renders no hidden input.
        label: Text next to the input; defaults to the attribute label when
            enclosed by a label. Without the enclosing label it renders as a
            separate ``<label for=...>`` after the input.
        label_options: Attributes of the ``<label>``.
        encode: Escape the label text (default True).

    Parameters:
        enclosed_by_label: Wrap the input in a ``<label>``.
    """

    type_ = "checkbox"

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        enclosed_by_label: bool = True,
    ) -> None:
        super().__init__(form, attribute, options)
        self.enclosed_by_label = enclosed_by_label

    def render(self) -> str:
        options = dict(self.options)
        value = options.pop("value", "1")
        uncheck = options.pop("uncheck", "0")
        label = options.pop("label", None)
        label_options = dict(options.pop("label_options", None) or {})
        encode_label = options.pop("encode", True)
        name = options.pop("name", None) or self.input_name()

        if label is None and self.enclosed_by_label:
            label = self.form.attribute_label(self.attribute)

        options["id"] = self.input_id()
        options.setdefault("checked", is_checked(self.form_value(), value))

        hidden = input_tag("hidden", name, uncheck) if uncheck is not None else ""
        checkbox = input_tag(self.type_, name, value, options)
        if not label:
            return hidden + checkbox

        text = encode(label) if encode_label else label
        if not self.enclosed_by_label:
            # Sibling label pointing at the input instead of wrapping it.
            return hidden + checkbox + label_tag(text, options["id"], label_options, encode_content=False)
        return hidden + label_tag(f"{checkbox} {text}", None, label_options, encode_content=False)

    def form_value(self) -> Any:
        # The "value" option is the submitted value here, so read the model directly.
        return get_attribute_value(self.form, self.attribute)


class Radio(CheckBox):
    type_ = "radio"
