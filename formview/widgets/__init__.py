# formview widget system
# Pure Python widgets rendering form attributes as HTML

from .base import Widget, FormWidget, InputWidget
from .input import Input, TextInput, PasswordInput, HiddenInput, FileInput, TextArea
from .label import Label, Hint, Error
from .choice import CheckBox, Radio
from .lists import DropDownList, ListBox, CheckBoxList, RadioList
from .error_summary import ErrorSummary
from .form import Form
from .field import Field

__all__ = [
    "Widget",
    "FormWidget",
    "InputWidget",
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
    "ErrorSummary",
    "Form",
    "Field",
]
