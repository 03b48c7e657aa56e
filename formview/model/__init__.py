"""
Form models: typed attributes, errors, labels, hints and input naming.
"""

from .form_model import FormModel
from .attribute_name import (
    parse_attribute,
    get_attribute_name,
    get_input_name,
    get_input_id,
    get_attribute_value,
    generate_attribute_label,
)
from .form_data import parse_form_data

__all__ = [
    "FormModel",
    "parse_attribute",
    "get_attribute_name",
    "get_input_name",
    "get_input_id",
    "get_attribute_value",
    "generate_attribute_label",
    "parse_form_data",
]
