"""
Exception types raised by formview.

Validation failures are not exceptions: they are collected on the form model
and rendered by the widgets. The types below cover programming errors only
(undeclared attributes, missing type hints, malformed attribute expressions).
"""
from __future__ import annotations


class FormViewError(Exception):
    """Base class for all formview errors."""


class AttributeTypeError(FormViewError, TypeError):
    """A form model declares a public attribute without a type hint."""


class UnknownAttributeError(FormViewError, ValueError):
    """An attribute is read or written that the form model does not declare."""


class InvalidAttributeError(FormViewError, ValueError):
    """An attribute expression such as ``[0]name[1]`` cannot be parsed."""


__all__ = [
    "FormViewError",
    "AttributeTypeError",
    "UnknownAttributeError",
    "InvalidAttributeError",
]
