"""
Field container: label, input, hint and error of one attribute.

The container fills a token template (``{label}\\n{input}\\n{hint}\\n{error}``
by default) and wraps it in ``<div class="form-group field-<input id>">``.
Validation state is wired automatically:

    - ``has-error`` / ``has-success`` on the input (or on the container with
      ``validation_state_on="container"``);
    - ``aria-required`` and ``aria-invalid`` on the input;
    - the ``required`` class on the label of required attributes.

Example:
    Field(form, "name").label(True, {"class": "big"}).text_input().render()
"""

import re
from typing import Any, Callable, Mapping, Optional, Union

from .. import config
from ..html import add_css_class, begin_tag, end_tag, split_css_classes
from ..model import FormModel, get_input_id
from .base import Widget
from .choice import CheckBox, Radio
from .input import FileInput, HiddenInput, Input, PasswordInput, TextArea, TextInput
from .label import Error, Hint, Label
from .lists import CheckBoxList, DropDownList, ListBox, RadioList

_TOKEN_RE = re.compile(r"\{(label|input|hint|error)\}")


class Field(Widget):
    """Renders one form attribute inside a container.

    Input methods (`text_input`, `checkbox`, ...) and part methods (`label`,
    `hint`, `error`) configure the field and return it, so calls chain. The
    text input is used when no input method was called.

    Parameters:
        form: The form model.
        attribute: Attribute expression (``name``, ``[0]name``, ...).
        options: Attributes of the container tag; ``tag`` changes the tag.
        Remaining keyword arguments override the defaults of
        `formview.config`.
    """

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        template: Optional[str] = None,
        aria_attribute: Optional[bool] = None,
        container_css: Optional[str] = None,
        input_css: Optional[str] = None,
        label_css: Optional[str] = None,
        hint_css: Optional[str] = None,
        error_css: Optional[str] = None,
        has_error_css: Optional[str] = None,
        has_success_css: Optional[str] = None,
        required_css: Optional[str] = None,
        validation_state_on: Optional[str] = None,
    ) -> None:
        self.form = form
        self.attribute = attribute
        self.options = dict(options or {})
        self.template = config.get_field_template() if template is None else template
        self.aria_attribute = config.get_aria_attributes() if aria_attribute is None else aria_attribute
        self.container_css = config.get_container_css() if container_css is None else container_css
        self.input_css = config.get_input_css() if input_css is None else input_css
        self.label_css = config.get_label_css() if label_css is None else label_css
        self.hint_css = config.get_hint_css() if hint_css is None else hint_css
        self.error_css = config.get_error_css() if error_css is None else error_css
        self.has_error_css = config.get_has_error_css() if has_error_css is None else has_error_css
        self.has_success_css = config.get_has_success_css() if has_success_css is None else has_success_css
        self.required_css = config.get_required_css() if required_css is None else required_css
        self.validation_state_on = (
            config.get_validation_state_on() if validation_state_on is None else validation_state_on
        )

        self._input_html: Optional[str] = None
        self._input_id: Optional[str] = None
        self._label_enabled = True
        self._label_options: dict[str, Any] = {}
        self._label_text: Optional[str] = None
        self._skip_label_for = False
        self._hint_enabled = True
        self._hint_options: dict[str, Any] = {}
        self._hint_content: Optional[str] = None
        self._error_enabled = True
        self._error_options: dict[str, Any] = {}

    # --- parts -----------------------------------------------------------------

    def label(
        self,
        enabled: bool = True,
        options: Optional[Mapping[str, Any]] = None,
        label: Optional[str] = None,
    ) -> "Field":
        """Configure the label part.

        Parameters:
            enabled: False leaves the ``{label}`` token empty.
            options: Label tag attributes; classes are appended to the label
                css. ``{"encode": False}`` renders the label text as raw markup.
            label: Text instead of the attribute label; escaped like the
                attribute label unless ``encode`` is False.
        """
        self._label_enabled = enabled
        self._label_options = dict(options or {})
        self._label_text = label
        return self

    def hint(
        self,
        content: Optional[str] = None,
        enabled: bool = True,
        options: Optional[Mapping[str, Any]] = None,
    ) -> "Field":
        self._hint_enabled = enabled
        self._hint_content = content
        self._hint_options = dict(options or {})
        return self

    def error(self, options: Optional[Mapping[str, Any]] = None, enabled: bool = True) -> "Field":
        self._error_enabled = enabled
        self._error_options = dict(options or {})
        return self

    # --- inputs ----------------------------------------------------------------

    def input(self, type_: str, options: Optional[Mapping[str, Any]] = None) -> "Field":
        self._input_html = Input(self.form, self.attribute, self._input_options(options), type_=type_).render()
        return self

    def text_input(self, options: Optional[Mapping[str, Any]] = None) -> "Field":
        self._input_html = TextInput(self.form, self.attribute, self._input_options(options)).render()
        return self

    def password_input(self, options: Optional[Mapping[str, Any]] = None) -> "Field":
        self._input_html = PasswordInput(self.form, self.attribute, self._input_options(options)).render()
        return self

    def hidden_input(self, options: Optional[Mapping[str, Any]] = None) -> "Field":
        """Hidden input only: label, hint and error parts are blanked."""
        input_options = self._input_options(options, css=False, placeholder=False, aria=False, state=False)
        self._input_html = HiddenInput(self.form, self.attribute, input_options).render()
        self._label_enabled = False
        self._hint_enabled = False
        self._error_enabled = False
        return self

    def file_input(self, options: Optional[Mapping[str, Any]] = None) -> "Field":
        input_options = self._input_options(options, placeholder=False)
        self._input_html = FileInput(self.form, self.attribute, input_options).render()
        return self

    def text_area(self, options: Optional[Mapping[str, Any]] = None) -> "Field":
        self._input_html = TextArea(self.form, self.attribute, self._input_options(options)).render()
        return self

    def checkbox(self, options: Optional[Mapping[str, Any]] = None, enclosed_by_label: bool = True) -> "Field":
        """Checkbox; when enclosed by its label the ``{label}`` part is blanked.

        Without the enclosing label, the ``label`` / ``label_options`` options
        configure the ``{label}`` part instead of the widget.
        """
        return self._checkable(CheckBox, options, enclosed_by_label)

    def radio(self, options: Optional[Mapping[str, Any]] = None, enclosed_by_label: bool = True) -> "Field":
        return self._checkable(Radio, options, enclosed_by_label)

    def drop_down_list(
        self, items: Mapping[Any, Any], options: Optional[Mapping[str, Any]] = None
    ) -> "Field":
        input_options = self._input_options(options, placeholder=False)
        self._input_html = DropDownList(self.form, self.attribute, items, input_options).render()
        return self

    def list_box(self, items: Mapping[Any, Any], options: Optional[Mapping[str, Any]] = None) -> "Field":
        input_options = self._input_options(options, placeholder=False)
        self._input_html = ListBox(self.form, self.attribute, items, input_options).render()
        return self

    def checkbox_list(
        self, items: Mapping[Any, Any], options: Optional[Mapping[str, Any]] = None
    ) -> "Field":
        """Checkbox group; the label loses its ``for`` (there is no single input)."""
        input_options = self._input_options(options, css=False, placeholder=False)
        self._input_html = CheckBoxList(self.form, self.attribute, items, input_options).render()
        self._skip_label_for = True
        return self

    def radio_list(self, items: Mapping[Any, Any], options: Optional[Mapping[str, Any]] = None) -> "Field":
        input_options = self._input_options(options, css=False, placeholder=False)
        input_options.setdefault("role", "radiogroup")
        self._input_html = RadioList(self.form, self.attribute, items, input_options).render()
        self._skip_label_for = True
        return self

    # --- rendering -------------------------------------------------------------

    def render(self, content: Union[str, Callable[["Field"], str], None] = None) -> str:
        """Renders the whole field.

        Parameters:
            content: Markup placed inside the container instead of the
                template, or a callable receiving this field and returning it.
        """
        if content is None:
            if self._input_html is None:
                self.text_input()
            parts = {
                "label": self._render_label(),
                "input": self._input_html or "",
                "hint": self._render_hint(),
                "error": self._render_error(),
            }
            body = _TOKEN_RE.sub(lambda match: parts[match.group(1)], self.template)
        elif callable(content):
            body = content(self)
        else:
            body = content
        return f"{self.render_begin()}\n{body}\n{self.render_end()}"

    def render_begin(self) -> str:
        """Renders the opening tag of the container."""
        options = dict(self.options)
        tag_name = options.pop("tag", "div")
        state = self._state_classes() if self.validation_state_on == config.VALIDATION_STATE_ON_CONTAINER else []
        options["class"] = self.classes(
            self.container_css,
            f"field-{self.input_id()}",
            split_css_classes(options.get("class")),
            state,
        )
        return begin_tag(tag_name, options)

    def render_end(self) -> str:
        return end_tag(self.options.get("tag", "div"))

    def input_id(self) -> str:
        """Id of the input: a custom ``id`` option or the derived one."""
        return self._input_id or get_input_id(self.form, self.attribute)

    # --- internals -------------------------------------------------------------

    def _checkable(
        self,
        widget: type[CheckBox],
        options: Optional[Mapping[str, Any]],
        enclosed_by_label: bool,
    ) -> "Field":
        user = dict(options or {})
        if enclosed_by_label:
            self._label_enabled = False
        else:
            label = user.pop("label", None)
            label_options = user.pop("label_options", None)
            if label is not None:
                self._label_text = label
            if label_options:
                self._label_options = dict(label_options)
        input_options = self._input_options(user, css=False, placeholder=False)
        self._input_html = widget(
            self.form, self.attribute, input_options, enclosed_by_label=enclosed_by_label
        ).render()
        return self

    def _state_classes(self) -> list[str]:
        if self.form.has_errors(self.attribute):
            return [self.has_error_css]
        validated = self.form.is_validated and self.form.attribute_rules(self.attribute)
        return [self.has_success_css] if validated else []

    def _input_options(
        self,
        options: Optional[Mapping[str, Any]],
        *,
        css: bool = True,
        placeholder: bool = True,
        aria: bool = True,
        state: bool = True,
    ) -> dict[str, Any]:
        """Merge caller options with the computed input defaults.

        Order of non-prioritized attributes: caller options, aria-required,
        aria-invalid, placeholder. Caller values always win.
        """
        user = dict(options or {})
        result: dict[str, Any] = {}
        if css:
            add_css_class(result, self.input_css)
        add_css_class(result, user.pop("class", None))
        if state and self.validation_state_on == config.VALIDATION_STATE_ON_INPUT:
            add_css_class(result, self._state_classes())
        result.update(user)

        if aria and self.aria_attribute:
            if "aria-required" not in result and self.form.is_attribute_required(self.attribute):
                result["aria-required"] = "true"
            if "aria-invalid" not in result and self.form.has_errors(self.attribute):
                result["aria-invalid"] = "true"
        if placeholder:
            result.setdefault("placeholder", True)

        if result.get("id"):
            self._input_id = result["id"]
        return result

    def _render_label(self) -> str:
        if not self._label_enabled:
            return ""
        options = dict(self._label_options)
        required = self.form.is_attribute_required(self.attribute)
        label_options: dict[str, Any] = {
            "class": self.classes(
                self.label_css,
                split_css_classes(options.pop("class", None)),
                self.required_css if required else "",
            )
        }
        label_options.update(options)
        if self._label_text is not None:
            label_options["label"] = self._label_text
        if self._skip_label_for:
            label_options["for"] = None
        else:
            label_options.setdefault("for", self.input_id())
        return Label(self.form, self.attribute, label_options).render()

    def _render_hint(self) -> str:
        if not self._hint_enabled:
            return ""
        options = dict(self._hint_options)
        hint_options: dict[str, Any] = {
            "class": self.classes(self.hint_css, split_css_classes(options.pop("class", None)))
        }
        hint_options.update(options)
        if self._hint_content is not None:
            hint_options["hint"] = self._hint_content
        return Hint(self.form, self.attribute, hint_options).render()

    def _render_error(self) -> str:
        if not self._error_enabled:
            return ""
        options = dict(self._error_options)
        error_options: dict[str, Any] = {
            "class": self.classes(self.error_css, split_css_classes(options.pop("class", None)))
        }
        error_options.update(options)
        return Error(self.form, self.attribute, error_options).render()
