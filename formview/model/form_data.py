"""
Nest flat form posts by their bracketed input names.

Web frameworks hand over submitted fields as flat ``(name, value)`` pairs.
The input names the widgets render (``LoginForm[login]``,
``PersonalForm[0][name]``, ``PersonalForm[tags][]``) encode the structure
`FormModel.load` expects, so this module rebuilds it:

    >>> parse_form_data([("LoginForm[login]", "admin"), ("LoginForm[tags][]", "a")])
    {'LoginForm': {'login': 'admin', 'tags': ['a']}}

Rules:
    - Integer segments become int keys; ``[]`` appends.
    - Containers whose keys are exactly 0..n-1 become lists.
    - A later value for the same name replaces the earlier one.
    - Names that are not well-formed bracket expressions are kept verbatim.
"""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Union


_NAME_RE = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT_RE = re.compile(r"\[([^\[\]]*)\]")
_INT_RE = re.compile(r"0|-?[1-9][0-9]*")

FormItems = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def _iter_items(data: Any) -> Iterable[tuple[str, Any]]:
    multi_items = getattr(data, "multi_items", None)
    if callable(multi_items):
        return multi_items()
    if isinstance(data, Mapping):
        pairs: list[tuple[str, Any]] = []
        for name, value in data.items():
            if name.endswith("[]") and isinstance(value, (list, tuple)):
                pairs.extend((name, item) for item in value)
            else:
                pairs.append((name, value))
        return pairs
    return data


def _key(segment: str) -> Union[int, str]:
    return int(segment) if _INT_RE.fullmatch(segment) else segment


def _next_index(node: dict) -> int:
    indexes = [key for key in node if isinstance(key, int)]
    return max(indexes) + 1 if indexes else 0


def _assign(node: dict, segments: list[str], value: Any) -> None:
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        key = _next_index(node) if segment == "" else _key(segment)
        if position == last:
            node[key] = value
            return
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child


def _listify(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    converted = {key: _listify(item) for key, item in value.items()}
    if converted and all(isinstance(key, int) for key in converted):
        if sorted(converted) == list(range(len(converted))):
            return [converted[index] for index in range(len(converted))]
    return converted


def parse_form_data(data: FormItems) -> dict[str, Any]:
    """Return the nested mapping encoded by bracketed field names.

    Parameters:
        data: A mapping, an iterable of ``(name, value)`` pairs, or an object
            with ``multi_items()`` such as Starlette's ``FormData``.
    """
    result: dict[str, Any] = {}
    for name, value in _iter_items(data):
        match = _NAME_RE.match(name)
        if match is None:
            result[name] = value
            continue
        head, tail = match.groups()
        segments = _SEGMENT_RE.findall(tail)
        if not segments:
            result[head] = value
            continue
        child = result.get(head)
        if not isinstance(child, dict):
            child = {}
            result[head] = child
        _assign(child, segments, value)
    return {key: _listify(value) for key, value in result.items()}


__all__ = ["parse_form_data"]
