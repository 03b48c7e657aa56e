"""
Widgets choosing among ``items`` (value -> label): selects and input lists.
"""

from typing import Any, Callable, Mapping, Optional

from ..html import encode, input_tag, label_tag, normalize_selection, render_select_options, tag
from ..model import FormModel
from .base import FormWidget

_SELECT_OPTION_KEYS = ("prompt", "options", "groups", "encode_spaces")


class DropDownList(FormWidget):
    """``<select>`` whose selection is the attribute value.

    Special options:
        prompt: First option with an empty value (text or mapping with
            ``text`` and ``options``).
        options: value -> attributes of individual ``<option>`` tags.
        groups: group label -> attributes of ``<optgroup>`` tags.
        encode_spaces: Render spaces in labels as ``&nbsp;``.
        multiple: Allow several values; the name gets a ``[]`` suffix.
        unselect: Value submitted by a hidden input when nothing is
            selected in a ``multiple`` select.

    Nested mappings in ``items`` render as option groups.
    """

    default_size: Optional[int] = None
    default_unselect: Optional[str] = None

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        items: Mapping[Any, Any],
        options: Optional[Mapping[str, Any]] = None,
        *,
        rule_options: bool = True,
    ) -> None:
        super().__init__(form, attribute, options)
        self.items = items
        self.rule_options = rule_options

    def render(self) -> str:
        options: dict[str, Any] = dict(self.form.html_options(self.attribute)) if self.rule_options else {}
        options.update(self.options)
        select_options = {key: options.pop(key) for key in _SELECT_OPTION_KEYS if key in options}
        unselect = options.pop("unselect", self.default_unselect)
        options.pop("value", None)
        if self.default_size is not None:
            options.setdefault("size", self.default_size)

        name = options.pop("name", None) or self.input_name()
        multiple = bool(options.get("multiple"))
        if multiple and not name.endswith("[]"):
            name += "[]"
        options["id"] = self.input_id()
        options["name"] = name

        body = render_select_options(self.input_value(), self.items, select_options)
        content = f"\n{body}\n" if body else "\n"

        hidden = ""
        if multiple and unselect is not None:
            hidden = input_tag("hidden", name[:-2], unselect)
        return hidden + tag("select", content, options)


class ListBox(DropDownList):
    """Select rendered as a box (``size`` 4 by default)."""

    default_size = 4
    default_unselect = ""


ItemFormatter = Callable[[int, Any, str, bool, Any], str]


class CheckBoxList(FormWidget):
    """Container of labelled checkboxes, one per item.

    Special options:
        tag: Container tag (default ``div``); None renders the items bare.
        unselect: Value of the hidden input submitted when nothing is
            checked (default ""); None skips it.
        separator: Between items (default newline).
        item_options: Attributes of every item input.
        encode: Escape item labels (default True).
        item: Callable ``(index, label, name, checked, value) -> str`` that
            renders an item instead of the default markup.
    """

    type_ = "checkbox"
    multiple = True

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        items: Mapping[Any, Any],
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(form, attribute, options)
        self.items = items

    def render(self) -> str:
        options = dict(self.options)
        tag_name = options.pop("tag", "div")
        unselect = options.pop("unselect", "")
        separator = options.pop("separator", "\n")
        item_options = dict(options.pop("item_options", None) or {})
        encode_labels = options.pop("encode", True)
        formatter: Optional[ItemFormatter] = options.pop("item", None)
        name = options.pop("name", None) or self.input_name()
        options.pop("value", None)

        base_name = name[:-2] if name.endswith("[]") else name
        item_name = f"{base_name}[]" if self.multiple else base_name
        selection = normalize_selection(self.input_value())

        lines: list[str] = []
        for index, (value, label) in enumerate(self.items.items()):
            checked = str(value) in selection
            if formatter is not None:
                lines.append(formatter(index, label, item_name, checked, value))
                continue
            attrs = dict(item_options)
            attrs["checked"] = checked
            text = encode(label) if encode_labels else label
            lines.append(label_tag(f"{input_tag(self.type_, item_name, value, attrs)} {text}", encode_content=False))

        hidden = input_tag("hidden", base_name, unselect) if unselect is not None else ""
        body = separator.join(lines)
        if tag_name is None:
            return hidden + body
        options["id"] = self.input_id()
        return hidden + tag(tag_name, body, options)


class RadioList(CheckBoxList):
    type_ = "radio"
    multiple = False
