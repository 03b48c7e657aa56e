"""
Low-level HTML helpers shared by every widget.

Why:
    Widgets differ only in which defaults they compute; the rules for turning
    an options map into markup (attribute order, boolean attributes, class
    merging, escaping) must be identical everywhere so that output stays
    predictable and testable with literal string comparisons.

Conventions:
    - Options maps are plain dicts keyed by the HTML attribute name
      (``"aria-invalid"``, ``"class"``, ...).
    - ``True`` renders a bare attribute, ``False`` and ``None`` omit it.
    - Attributes listed in ATTRIBUTE_ORDER come first, the rest keep their
      insertion order.
    - Content passed to `tag()` is NOT escaped unless ``encode_content=True``.
"""
from __future__ import annotations

import html
from typing import Any, Iterable, Mapping, MutableMapping, Optional


ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "loading",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "minlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Mapping-valued attributes that expand into prefixed attributes.
_EXPANDED_ATTRIBUTES = ("data", "aria")


def encode(value: Any) -> str:
    """Escape text for use in element content and attribute values.

    ``None`` becomes the empty string.
    """
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def split_css_classes(value: Any) -> list[str]:
    """Normalize a class option (string, list or None) into a list of names."""
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    result: list[str] = []
    for item in value:
        result.extend(split_css_classes(item))
    return result


def add_css_class(options: MutableMapping[str, Any], css_class: Any) -> None:
    """Append classes to ``options["class"]`` skipping ones already present."""
    classes = split_css_classes(options.get("class"))
    for name in split_css_classes(css_class):
        if name not in classes:
            classes.append(name)
    if classes:
        options["class"] = " ".join(classes)


def remove_css_class(options: MutableMapping[str, Any], css_class: Any) -> None:
    """Remove classes from ``options["class"]``; drops the key when empty."""
    removed = set(split_css_classes(css_class))
    classes = [name for name in split_css_classes(options.get("class")) if name not in removed]
    if classes:
        options["class"] = " ".join(classes)
    else:
        options.pop("class", None)


def _render_attribute(name: str, value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return f" {name}"
    if name == "class":
        classes = split_css_classes(value)
        return f' class="{encode(" ".join(classes))}"' if classes else ""
    if name == "style" and isinstance(value, Mapping):
        style = " ".join(f"{key}: {item};" for key, item in value.items() if item is not None)
        return f' style="{encode(style)}"' if style else ""
    return f' {name}="{encode(value)}"'


def render_tag_attributes(options: Optional[Mapping[str, Any]]) -> str:
    """Render an options map as an attribute string with a leading space.

    Example:
        >>> render_tag_attributes({"name": "q", "type": "text", "required": True})
        ' type="text" name="q" required'
    """
    if not options:
        return ""

    ordered: dict[str, Any] = {}
    for name in ATTRIBUTE_ORDER:
        if name in options:
            ordered[name] = options[name]
    for name, value in options.items():
        if name not in ordered:
            ordered[name] = value

    parts: list[str] = []
    for name, value in ordered.items():
        if name in _EXPANDED_ATTRIBUTES and isinstance(value, Mapping):
            for key, item in value.items():
                if name == "aria" and item is True:
                    item = "true"
                parts.append(_render_attribute(f"{name}-{key}", item))
            continue
        parts.append(_render_attribute(name, value))
    return "".join(parts)


def begin_tag(name: str, options: Optional[Mapping[str, Any]] = None) -> str:
    return f"<{name}{render_tag_attributes(options)}>"


def end_tag(name: str) -> str:
    return f"</{name}>"


def tag(
    name: str,
    content: Any = "",
    options: Optional[Mapping[str, Any]] = None,
    *,
    encode_content: bool = False,
) -> str:
    """Render a complete element. Void elements ignore ``content``."""
    if name.lower() in VOID_ELEMENTS:
        return begin_tag(name, options)
    if encode_content:
        body = encode(content)
    else:
        body = "" if content is None else str(content)
    return f"{begin_tag(name, options)}{body}{end_tag(name)}"


def input_tag(
    type_: str,
    name: Optional[str] = None,
    value: Any = None,
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render ``<input>``; ``name`` / ``value`` of None are omitted.

    A bool ``value`` is submitted as ``"1"`` / ``"0"``, not rendered as a
    bare attribute.
    """
    attrs = dict(options or {})
    attrs["type"] = type_
    attrs["name"] = name
    attrs["value"] = form_value(value)
    return tag("input", options=attrs)


def label_tag(
    content: Any,
    for_: Optional[str] = None,
    options: Optional[Mapping[str, Any]] = None,
    *,
    encode_content: bool = True,
) -> str:
    attrs = dict(options or {})
    if for_ is not None:
        attrs.setdefault("for", for_)
    return tag("label", content, attrs, encode_content=encode_content)


def form_value(value: Any) -> Any:
    """Map bools to the strings a form posts for them; other values pass through."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return value


def normalize_selection(selection: Any) -> set[str]:
    """Selected option values as strings, whatever shape the model value has.

    Bools select the ``1`` / ``0`` items of yes/no lists.
    """
    if selection is None:
        return set()
    if isinstance(selection, (str, bytes, int, float, bool)):
        return {str(form_value(selection))}
    if isinstance(selection, Iterable):
        return {str(form_value(item)) for item in selection}
    return {str(selection)}


def render_select_options(
    selection: Any,
    items: Mapping[Any, Any],
    options: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render ``<option>`` / ``<optgroup>`` lines for a select element.

    Parameters:
        selection: Current value (scalar or iterable for ``multiple``).
        items: value -> label. A mapping as label renders an option group
            labelled with its key.
        options: Special keys ``prompt`` (text, or mapping with ``text`` and
            ``options``), ``options`` (value -> option attributes),
            ``groups`` (group key -> optgroup attributes), ``encode_spaces``.
    """
    opts = dict(options or {})
    selected = normalize_selection(selection)
    item_options: Mapping[Any, Mapping[str, Any]] = opts.get("options") or {}
    groups: Mapping[Any, Mapping[str, Any]] = opts.get("groups") or {}
    encode_spaces = bool(opts.get("encode_spaces", False))

    lines: list[str] = []
    prompt = opts.get("prompt")
    if prompt is not None:
        if isinstance(prompt, Mapping):
            prompt_text = prompt.get("text", "")
            prompt_attrs = dict(prompt.get("options") or {})
        else:
            prompt_text = prompt
            prompt_attrs = {}
        prompt_attrs.setdefault("value", "")
        lines.append(tag("option", prompt_text, prompt_attrs, encode_content=True))

    for key, label in items.items():
        if isinstance(label, Mapping):
            group_attrs = dict(groups.get(key) or {})
            group_attrs.setdefault("label", key)
            inner = render_select_options(
                selection,
                label,
                {"options": item_options, "groups": groups, "encode_spaces": encode_spaces},
            )
            lines.append(tag("optgroup", f"\n{inner}\n", group_attrs))
            continue

        attrs = dict(item_options.get(key) or {})
        attrs.setdefault("value", key)
        attrs.setdefault("selected", str(key) in selected)
        text = encode(label)
        if encode_spaces:
            text = text.replace(" ", "&nbsp;")
        lines.append(tag("option", text, attrs))
    return "\n".join(lines)


__all__ = [
    "ATTRIBUTE_ORDER",
    "VOID_ELEMENTS",
    "encode",
    "split_css_classes",
    "add_css_class",
    "remove_css_class",
    "render_tag_attributes",
    "begin_tag",
    "end_tag",
    "tag",
    "input_tag",
    "label_tag",
    "form_value",
    "normalize_selection",
    "render_select_options",
]
