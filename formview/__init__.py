"""
formview: server-side HTML form rendering.

Form models hold values, rules, errors, labels and hints; widgets turn one
attribute of a model into HTML with CSS classes and ARIA attributes wired from
the validation state.
"""

from .exceptions import AttributeTypeError, FormViewError, InvalidAttributeError, UnknownAttributeError
from .model import FormModel, parse_form_data
from .validation import (
    Callback,
    Email,
    HasLength,
    HasLengthHtmlOptions,
    InRange,
    MatchRegularExpression,
    MatchRegularExpressionHtmlOptions,
    Number,
    NumberHtmlOptions,
    Required,
    RequiredHtmlOptions,
    Validator,
)
from .widgets import (
    CheckBox,
    CheckBoxList,
    DropDownList,
    Error,
    ErrorSummary,
    Field,
    FileInput,
    Form,
    HiddenInput,
    Hint,
    Input,
    Label,
    ListBox,
    PasswordInput,
    Radio,
    RadioList,
    TextArea,
    TextInput,
)

__all__ = [
    "FormViewError",
    "AttributeTypeError",
    "UnknownAttributeError",
    "InvalidAttributeError",
    "FormModel",
    "parse_form_data",
    "Validator",
    "Required",
    "HasLength",
    "Email",
    "MatchRegularExpression",
    "Number",
    "InRange",
    "Callback",
    "RequiredHtmlOptions",
    "HasLengthHtmlOptions",
    "NumberHtmlOptions",
    "MatchRegularExpressionHtmlOptions",
    "Field",
    "Form",
    "ErrorSummary",
    "Input",
    "TextInput",
    "PasswordInput",
    "HiddenInput",
    "FileInput",
    "TextArea",
    "Label",
    "Hint",
    "Error",
    "CheckBox",
    "Radio",
    "DropDownList",
    "ListBox",
    "CheckBoxList",
    "RadioList",
]
