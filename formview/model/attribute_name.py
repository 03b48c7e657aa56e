"""
Attribute expressions: tabular prefixes, nested paths and array suffixes.

Widgets are addressed by an *attribute expression* rather than a bare
attribute name so that one form class can render many rows of a table
(``[0]name``, ``[1]name``) or an element of a list attribute (``tags[2]``).

Shape:
    ``[prefix]name[suffix]``
    - prefix: zero or more ``[...]`` groups placed between the form scope and
      the attribute in the input name (tabular input);
    - name: the declared attribute; dots address nested form models
      (``address.city``);
    - suffix: ``[...]`` groups indexing into the attribute value.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from ..exceptions import InvalidAttributeError

if TYPE_CHECKING:  # pragma: no cover
    from .form_model import FormModel


_ATTRIBUTE_RE = re.compile(r"^(|.*\])([\w.+\-]+)(\[.*|)$")
_SUFFIX_KEY_RE = re.compile(r"\[([^\]]*)\]")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<![A-Z])[A-Z]|[A-Z](?=[a-z])")
_SEPARATORS_RE = re.compile(r"[-_.]+")

_ID_REPLACEMENTS = (("[]", ""), ("][", "-"), ("[", "-"), ("]", ""), (" ", "-"), (".", "-"))


def parse_attribute(expression: str) -> tuple[str, str, str]:
    """Split an attribute expression into ``(prefix, name, suffix)``.

    Raises:
        InvalidAttributeError: when no attribute name can be found.
    """
    match = _ATTRIBUTE_RE.match(expression or "")
    if match is None:
        raise InvalidAttributeError(f'Attribute name must contain word characters only: "{expression}".')
    prefix, name, suffix = match.groups()
    return prefix, name, suffix


def get_attribute_name(expression: str) -> str:
    """Return the declared attribute name: ``[0]name[1]`` -> ``name``."""
    return parse_attribute(expression)[1]


def get_input_name(form: "FormModel", expression: str) -> str:
    """Return the ``name`` attribute for the input of an attribute expression.

    Examples (form scope ``PersonalForm``):
        ``name``        -> ``PersonalForm[name]``
        ``[0]name``     -> ``PersonalForm[0][name]``
        ``tags[]``      -> ``PersonalForm[tags][]``
        ``address.city`` -> ``PersonalForm[address][city]``

    With an empty scope the attribute itself is the name (``address[city]``).
    Tabular prefixes require a scope.
    """
    prefix, name, suffix = parse_attribute(expression)
    segments = name.split(".")
    scope = form.form_name()
    if scope:
        path = "".join(f"[{segment}]" for segment in segments)
        return f"{scope}{prefix}{path}{suffix}"
    if prefix:
        raise InvalidAttributeError("form_name() cannot be empty for tabular inputs.")
    head, rest = segments[0], segments[1:]
    return head + "".join(f"[{segment}]" for segment in rest) + suffix


def get_input_id(form: "FormModel", expression: str) -> str:
    """Return a DOM id derived from the input name: ``personalform-0-name``."""
    value = get_input_name(form, expression).lower()
    for old, new in _ID_REPLACEMENTS:
        value = value.replace(old, new)
    return value


def _index(value: Any, key: str) -> Any:
    from .form_model import FormModel

    if value is None:
        return None
    if isinstance(value, FormModel):
        return value.get_attribute_value(key) if value.has_attribute(key) else None
    if isinstance(value, Mapping):
        if key in value:
            return value[key]
        if key.lstrip("-").isdigit():
            return value.get(int(key))
        return None
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        try:
            return value[int(key)]
        except (ValueError, IndexError):
            return None
    return None


def get_attribute_value(form: "FormModel", expression: str) -> Any:
    """Return the model value for an attribute expression.

    The suffix indexes into the value (``tags[1]`` -> second tag). An empty
    ``[]`` suffix leaves the value untouched. Missing keys yield ``None``.
    """
    _, name, suffix = parse_attribute(expression)
    value = form.get_attribute_value(name)
    for key in _SUFFIX_KEY_RE.findall(suffix):
        if key == "":
            continue
        value = _index(value, key)
    return value


def generate_attribute_label(name: str) -> str:
    """Turn an attribute name into words: ``rememberMe`` -> ``Remember Me``."""
    spaced = _CAMEL_BOUNDARY_RE.sub(lambda m: f" {m.group(0)}", name)
    words = _SEPARATORS_RE.sub(" ", spaced).lower().split()
    return " ".join(word.capitalize() for word in words)


__all__ = [
    "parse_attribute",
    "get_attribute_name",
    "get_input_name",
    "get_input_id",
    "get_attribute_value",
    "generate_attribute_label",
]
