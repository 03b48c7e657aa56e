"""
Base classes for formview widgets.

Every widget renders one HTML fragment in pure Python. Widgets bound to a form
attribute derive the input id, name and value from the form model; everything
else comes from the caller's options map, which always wins over computed
defaults.
"""

from typing import Any, Mapping, Optional

from ..html import encode, form_value, split_css_classes
from ..model import FormModel, get_attribute_name, get_attribute_value, get_input_id, get_input_name


class Widget:
    """Base class for all widgets.

    Widgets implement `__html__`, so Jinja2/MarkupSafe templates embed them
    without escaping: ``{{ Field(form, "login") }}``.
    """

    def render(self) -> str:
        """Render the widget as an HTML string"""
        raise NotImplementedError("Subclasses must implement render()")

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def escape(text: Optional[str]) -> str:
        """Escape HTML entities; None becomes the empty string."""
        return encode(text)

    @staticmethod
    def classes(*args: Any, **conditionals: bool) -> str:
        """Helper to build CSS class strings with conditional classes

        Args:
            *args: Classes to always include (strings or lists; empty ones are skipped)
            **conditionals: Classes to include if value is True

        Returns:
            str: Space-separated class string

        Example:
            >>> Widget.classes("form-group", "", ["field-x"], disabled=True, active=False)
            'form-group field-x disabled'
        """
        classes = split_css_classes(args)
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)


class FormWidget(Widget):
    """Widget bound to one attribute expression of a form model.

    Parameters:
        form: The form model supplying values, labels, hints and errors.
        attribute: Attribute expression (``name``, ``[0]name``, ``tags[]``).
        options: HTML attributes of the rendered tag plus widget-specific
            keys documented on each subclass.
    """

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.form = form
        self.attribute = attribute
        self.options = dict(options or {})

    @property
    def attribute_name(self) -> str:
        return get_attribute_name(self.attribute)

    def input_id(self) -> Optional[str]:
        """Explicit ``id`` option (None suppresses it) or the derived id."""
        if "id" in self.options:
            return self.options["id"]
        return get_input_id(self.form, self.attribute)

    def input_name(self) -> str:
        return self.options.get("name") or get_input_name(self.form, self.attribute)

    def input_value(self) -> Any:
        if "value" in self.options:
            return form_value(self.options["value"])
        return form_value(get_attribute_value(self.form, self.attribute))


class InputWidget(FormWidget):
    """Attribute widget that also applies the HTML options of the rules.

    Special options:
        placeholder: ``True`` uses the attribute label as placeholder.

    Parameters:
        rule_options: Merge `FormModel.html_options()` (``required``,
            ``maxlength``, ``pattern``, ...) underneath the given options.
    """

    def __init__(
        self,
        form: FormModel,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        rule_options: bool = True,
    ) -> None:
        super().__init__(form, attribute, options)
        self.rule_options = rule_options

    def build_options(self) -> dict[str, Any]:
        """Tag attributes without ``name`` / ``value``, which callers place."""
        options: dict[str, Any] = dict(self.form.html_options(self.attribute)) if self.rule_options else {}
        options.update(self.options)
        if options.get("placeholder") is True:
            options["placeholder"] = self.form.attribute_label(self.attribute)
        options["id"] = self.input_id()
        options.pop("name", None)
        options.pop("value", None)
        return options
