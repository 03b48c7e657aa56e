"""
Form model base class.

Why:
    Views need one object that knows the submitted values of a form, the
    rules they must satisfy, the errors found, and the human-readable labels
    and hints of each attribute. Widgets only ever talk to this object.

Declaring a form:
    class LoginForm(FormModel):
        login: Optional[str] = None
        password: Optional[str] = None
        remember_me: bool = False

        def attribute_labels(self) -> dict[str, str]:
            return {"login": "Login:"}

        def rules(self) -> dict[str, list]:
            return {"login": [Required(), Email()]}

Behavior:
    - Attributes are the type-hinted public class attributes. A public class
      attribute without a hint is a declaration mistake and fails at
      construction (UPPER_CASE constants, callables and descriptors are
      exempt).
    - Assigning through `set_attribute`, `set_attributes` or `load` coerces
      values to the declared type with pydantic in lax mode ("2" -> 2,
      "false" -> False, 555 -> "555"). Values that cannot be coerced are
      kept as given so that rules can report them.
    - Attributes typed as another FormModel accept nested mappings.
"""
from __future__ import annotations

import copy
import functools
import logging
import types
from typing import Any, ClassVar, Mapping, Optional, Sequence, Union, get_args, get_origin, get_type_hints

from pydantic import ConfigDict, PydanticUserError, TypeAdapter, ValidationError

from ..exceptions import AttributeTypeError, UnknownAttributeError
from ..validation import HtmlOptionsProvider, Required, Validator, unwrap_rule
from .attribute_name import generate_attribute_label, get_attribute_name


logger = logging.getLogger("formview.model")

_COERCION_CONFIG = ConfigDict(coerce_numbers_to_str=True, arbitrary_types_allowed=True)


@functools.lru_cache(maxsize=None)
def _type_adapter(hint: Any) -> TypeAdapter:
    try:
        return TypeAdapter(hint, config=_COERCION_CONFIG)
    except PydanticUserError:
        # Pydantic models and dataclasses carry their own config.
        return TypeAdapter(hint)


def _union_members(hint: Any) -> tuple:
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        return get_args(hint)
    return (hint,)


def _allows_none(hint: Any) -> bool:
    return hint is Any or type(None) in _union_members(hint)


def _accepts_str(hint: Any) -> bool:
    return hint is Any or str in _union_members(hint)


def _nested_form_type(hint: Any) -> Optional[type]:
    for member in _union_members(hint):
        if isinstance(member, type) and issubclass(member, FormModel):
            return member
    return None


@functools.lru_cache(maxsize=None)
def _declared_attributes(cls: type) -> dict[str, Any]:
    """Return ``{name: type hint}`` of the form attributes of ``cls``."""
    try:
        hints = get_type_hints(cls)
    except NameError as exc:
        raise AttributeTypeError(f'Cannot resolve type hints of "{cls.__qualname__}" class: {exc}') from exc

    attributes = {
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and get_origin(hint) is not ClassVar and hint is not ClassVar
    }

    for klass in cls.__mro__:
        if klass is FormModel or not issubclass(klass, FormModel):
            continue
        for name, value in vars(klass).items():
            if name.startswith("_") or name.isupper() or name in hints:
                continue
            if callable(value) or hasattr(value, "__get__"):
                continue
            raise AttributeTypeError(
                f'You must specify the type hint for "{name}" property in "{klass.__qualname__}" class.'
            )
    return attributes


class FormModel:
    """Base class for form models. See the module docstring for an example."""

    def __init__(self, validator: Optional[Validator] = None) -> None:
        self._attribute_types = _declared_attributes(type(self))
        self._errors: dict[str, list[str]] = {}
        self._validated = False
        self._validator = validator or Validator()
        for name in self._attribute_types:
            default = getattr(type(self), name, None)
            if hasattr(default, "__get__"):
                continue
            self.__dict__[name] = copy.copy(default)

    # --- naming ----------------------------------------------------------------

    def form_name(self) -> str:
        """Scope of the input names (``LoginForm[login]``); "" means flat names."""
        return type(self).__name__

    def attribute_names(self) -> list[str]:
        return list(self._attribute_types)

    def has_attribute(self, name: str) -> bool:
        return name in self._attribute_types

    # --- values ----------------------------------------------------------------

    def _undefined(self, name: str) -> UnknownAttributeError:
        cls = type(self)
        return UnknownAttributeError(f'Undefined property: "{cls.__module__}.{cls.__qualname__}::{name}".')

    def get_attribute_value(self, attribute: str) -> Any:
        """Return the value of ``attribute``.

        Tabular prefixes are ignored (``[0]name`` reads ``name``) and dotted
        paths descend into nested form models or mappings.

        Raises:
            UnknownAttributeError: the attribute is not declared.
        """
        name = get_attribute_name(attribute) if "[" in attribute else attribute
        head, _, rest = name.partition(".")
        if head not in self._attribute_types:
            raise self._undefined(name)

        value = getattr(self, head)
        if not rest:
            return value
        if isinstance(value, FormModel):
            return value.get_attribute_value(rest)
        for segment in rest.split("."):
            if not isinstance(value, Mapping):
                return None
            value = value.get(segment)
        return value

    def _coerce(self, name: str, value: Any) -> Any:
        hint = self._attribute_types[name]

        nested = _nested_form_type(hint)
        if nested is not None and isinstance(value, Mapping):
            current = self.__dict__.get(name)
            if not isinstance(current, nested):
                current = nested()
            current.set_attributes(value)
            return current

        if isinstance(value, str) and value == "" and _allows_none(hint) and not _accepts_str(hint):
            return None

        try:
            return _type_adapter(hint).validate_python(value)
        except ValidationError as exc:
            logger.debug(
                "Keeping raw value for %s.%s: %d coercion error(s)",
                type(self).__name__,
                name,
                exc.error_count(),
            )
            return value

    def set_attribute(self, name: str, value: Any) -> None:
        """Coerce ``value`` to the declared type and assign it.

        Raises:
            UnknownAttributeError: the attribute is not declared.
        """
        if name not in self._attribute_types:
            raise self._undefined(name)
        setattr(self, name, self._coerce(name, value))

    def set_attributes(self, values: Mapping[str, Any]) -> None:
        """Assign every declared attribute found in ``values``; ignore the rest."""
        for name, value in values.items():
            if name in self._attribute_types:
                self.set_attribute(name, value)
            else:
                logger.debug("Ignoring unknown attribute %s for %s", name, type(self).__name__)

    def load(self, data: Optional[Mapping[str, Any]], scope: Optional[str] = None) -> bool:
        """Populate the form from request data.

        Parameters:
            data: ``{scope: {attribute: value}}`` or, with an empty scope,
                ``{attribute: value}``.
            scope: Defaults to `form_name()`.

        Returns:
            False when ``data`` is empty or has no entry for the scope.
        """
        if not data:
            return False
        scope = self.form_name() if scope is None else scope
        if scope == "":
            values = data
        elif scope in data:
            values = data[scope]
        else:
            return False

        if not isinstance(values, Mapping):
            logger.debug("Scope %s of %s does not hold a mapping", scope, type(self).__name__)
            return False
        self.set_attributes(values)
        return True

    @staticmethod
    def load_multiple(
        forms: Sequence["FormModel"],
        data: Optional[Mapping[Any, Any]],
        scope: Optional[str] = None,
    ) -> bool:
        """Populate tabular forms from ``{scope: {0: {...}, 1: {...}}}``.

        Rows are matched by position; the scope defaults to the first form's
        `form_name()`. Returns True when at least one form was loaded.
        """
        if not forms or not data:
            return False
        scope = forms[0].form_name() if scope is None else scope
        rows = data.get(scope) if scope else data
        if not rows:
            return False

        loaded = False
        for index, form in enumerate(forms):
            if isinstance(rows, Mapping):
                row = rows.get(index, rows.get(str(index)))
            elif isinstance(rows, Sequence) and not isinstance(rows, str) and index < len(rows):
                row = rows[index]
            else:
                row = None
            if isinstance(row, Mapping):
                form.set_attributes(row)
                loaded = True
        return loaded

    # --- labels and hints ------------------------------------------------------

    def attribute_labels(self) -> dict[str, str]:
        """Override to provide explicit labels; missing ones are generated."""
        return {}

    def attribute_label(self, attribute: str) -> str:
        name = get_attribute_name(attribute)
        labels = self.attribute_labels()
        if name in labels:
            return labels[name]
        target = self._nested_target(name)
        if target is not None:
            nested, rest = target
            return nested.attribute_label(rest)
        return generate_attribute_label(name)

    def attribute_hints(self) -> dict[str, str]:
        return {}

    def attribute_hint(self, attribute: str) -> str:
        name = get_attribute_name(attribute)
        hints = self.attribute_hints()
        if name in hints:
            return hints[name]
        target = self._nested_target(name)
        if target is not None:
            nested, rest = target
            return nested.attribute_hint(rest)
        return ""

    # --- rules -----------------------------------------------------------------

    def rules(self) -> dict[str, list[Any]]:
        """Override to map attribute names to rule lists."""
        return {}

    def attribute_rules(self, attribute: str) -> list[Any]:
        """Rules of ``attribute``; dotted names use the nested form's rules."""
        name = get_attribute_name(attribute)
        target = self._nested_target(name)
        if target is not None:
            nested, rest = target
            return nested.attribute_rules(rest)
        return list(self.rules().get(name, []))

    def html_options(self, attribute: str) -> dict[str, Any]:
        """HTML attributes implied by the rules of ``attribute``."""
        options: dict[str, Any] = {}
        for rule in self.attribute_rules(attribute):
            if isinstance(rule, HtmlOptionsProvider):
                options.update(rule.html_options())
        return options

    def is_attribute_required(self, attribute: str) -> bool:
        return any(isinstance(unwrap_rule(rule), Required) for rule in self.attribute_rules(attribute))

    def _nested_target(self, name: str) -> Optional[tuple["FormModel", str]]:
        # A blank instance of the declared type answers for an unset nested form.
        head, _, rest = name.partition(".")
        if not rest or head not in self._attribute_types:
            return None
        nested = getattr(self, head)
        if isinstance(nested, FormModel):
            return nested, rest
        nested_type = _nested_form_type(self._attribute_types[head])
        if nested_type is None:
            return None
        return nested_type(), rest

    # --- errors ----------------------------------------------------------------

    @staticmethod
    def _error_key(attribute: str) -> str:
        return get_attribute_name(attribute) if "[" in attribute else attribute

    @property
    def errors(self) -> dict[str, list[str]]:
        return {name: list(messages) for name, messages in self._errors.items()}

    @property
    def is_validated(self) -> bool:
        return self._validated

    def add_error(self, attribute: str, message: str) -> None:
        """Record an error; ``attribute`` may also be a form-level key."""
        self._errors.setdefault(self._error_key(attribute), []).append(message)

    def add_errors(self, errors: Mapping[str, Sequence[str]]) -> None:
        for attribute, messages in errors.items():
            for message in messages:
                self.add_error(attribute, message)

    def get_errors(self, attribute: str) -> list[str]:
        return list(self._errors.get(self._error_key(attribute), []))

    def first_error(self, attribute: str) -> str:
        messages = self._errors.get(self._error_key(attribute))
        return messages[0] if messages else ""

    def first_errors(self) -> dict[str, str]:
        return {name: messages[0] for name, messages in self._errors.items() if messages}

    def has_errors(self, attribute: Optional[str] = None) -> bool:
        if attribute is None:
            return any(self._errors.values())
        return bool(self._errors.get(self._error_key(attribute)))

    def clear_errors(self, attribute: Optional[str] = None) -> None:
        if attribute is None:
            self._errors = {}
        else:
            self._errors.pop(self._error_key(attribute), None)

    def error_summary(self, show_all_errors: bool = False) -> list[str]:
        """Error lines for a summary block, duplicates removed.

        Parameters:
            show_all_errors: every message of every attribute when True,
                otherwise only the first message of each attribute.
        """
        lines: list[str] = []
        for messages in self._errors.values():
            for message in messages if show_all_errors else messages[:1]:
                if message not in lines:
                    lines.append(message)
        return lines

    # --- validation ------------------------------------------------------------

    def validate(self) -> bool:
        """Run the validator; replaces previously recorded errors.

        Nested form models are validated too and their errors are recorded
        under dotted keys (``address.city``).
        """
        self.clear_errors()
        result = self._validator.validate(self)
        self.add_errors(result.errors)
        for name in self._attribute_types:
            nested = getattr(self, name)
            if isinstance(nested, FormModel):
                nested.validate()
                self.add_errors({f"{name}.{key}": messages for key, messages in nested.errors.items()})
        self._validated = True
        return not self.has_errors()

    @staticmethod
    def validate_multiple(forms: Sequence["FormModel"]) -> bool:
        valid = True
        for form in forms:
            valid = form.validate() and valid
        return valid


__all__ = ["FormModel"]
