"""
Validation rules attached to form attributes via `FormModel.rules()`.

Each rule is a small frozen dataclass with a `validate(value, form)` method
returning a list of error messages (empty when the value passes). Rules never
raise for invalid input; the validator collects their messages on the form.

Empty values (None, "", whitespace-only strings, empty collections) are
skipped by every rule except `Required`, so a rule like `HasLength` only
reports on values that were actually entered. Pass ``skip_on_empty=False`` to
change that per rule, and ``when=`` to apply a rule conditionally.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Optional, Union

if TYPE_CHECKING:  # pragma: no cover
    from ..model.form_model import FormModel


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


@dataclass(frozen=True, kw_only=True)
class Rule:
    """Base class for rules.

    Attributes:
        skip_on_empty: Override of the class default for empty values.
        when: Optional predicate ``(value, form) -> bool``; the rule is
            skipped when it returns False.
    """

    SKIP_ON_EMPTY: ClassVar[bool] = True

    skip_on_empty: Optional[bool] = None
    when: Optional[Callable[[Any, "FormModel"], bool]] = field(default=None, compare=False)

    def should_skip(self, value: Any, form: "FormModel") -> bool:
        skip_on_empty = self.SKIP_ON_EMPTY if self.skip_on_empty is None else self.skip_on_empty
        if skip_on_empty and is_empty(value):
            return True
        if self.when is not None and not self.when(value, form):
            return True
        return False

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        raise NotImplementedError("Subclasses must implement validate()")


@dataclass(frozen=True)
class Required(Rule):
    SKIP_ON_EMPTY: ClassVar[bool] = False

    message: str = "Value cannot be blank."

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        return [self.message] if is_empty(value) else []


@dataclass(frozen=True)
class HasLength(Rule):
    """String length between ``min`` and ``max`` (both inclusive, optional)."""

    min: Optional[int] = None
    max: Optional[int] = None
    message: str = "This value must be a string."
    too_short_message: str = "Is too short."
    too_long_message: str = "Is too long."

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        if not isinstance(value, str):
            return [self.message]
        length = len(value)
        if self.min is not None and length < self.min:
            return [self.too_short_message.format(min=self.min)]
        if self.max is not None and length > self.max:
            return [self.too_long_message.format(max=self.max)]
        return []


# Local part and domain as accepted by the HTML5 email input type.
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?\.)+[a-zA-Z0-9](?:[a-zA-Z0-9-]*[a-zA-Z0-9])?$"
)
_EMAIL_WITH_NAME_RE = re.compile(r"^[^<>]*<(?P<address>[^<>]+)>$")


@dataclass(frozen=True)
class Email(Rule):
    message: str = "This value is not a valid email address."
    allow_name: bool = False

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        if not isinstance(value, str):
            return [self.message]
        address = value
        if self.allow_name:
            named = _EMAIL_WITH_NAME_RE.match(value.strip())
            if named is not None:
                address = named.group("address")
        if len(address) > 254 or _EMAIL_RE.match(address) is None:
            return [self.message]
        return []


@dataclass(frozen=True)
class MatchRegularExpression(Rule):
    """The value must (or with ``not_=True``, must not) match ``pattern``."""

    pattern: str
    message: str = "Value is invalid."
    not_: bool = False

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        if not isinstance(value, str):
            return [self.message]
        matched = re.search(self.pattern, value) is not None
        if matched == self.not_:
            return [self.message]
        return []


@dataclass(frozen=True)
class Number(Rule):
    as_integer: bool = False
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None
    number_message: str = "Value must be a number."
    integer_message: str = "Value must be an integer."
    too_small_message: str = "Value must be no less than {min}."
    too_big_message: str = "Value must be no greater than {max}."

    def _parse(self, value: Any) -> Optional[float]:
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            if self.as_integer and isinstance(value, float) and not value.is_integer():
                return None
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text) if self.as_integer else float(text)
            except ValueError:
                return None
        return None

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        number = self._parse(value)
        if number is None:
            return [self.integer_message if self.as_integer else self.number_message]
        if self.min is not None and number < self.min:
            return [self.too_small_message.format(min=self.min)]
        if self.max is not None and number > self.max:
            return [self.too_big_message.format(max=self.max)]
        return []


@dataclass(frozen=True)
class InRange(Rule):
    """The value (or each item of a list value) must be one of ``range``."""

    range: tuple = ()
    message: str = "This value is invalid."
    strict: bool = False
    not_: bool = False

    def _contains(self, item: Any) -> bool:
        if self.strict:
            return any(item == allowed and type(item) is type(allowed) for allowed in self.range)
        return str(item) in {str(allowed) for allowed in self.range}

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        items: Iterable[Any] = value if isinstance(value, (list, tuple, set)) else [value]
        inside = all(self._contains(item) for item in items)
        if inside == self.not_:
            return [self.message]
        return []


@dataclass(frozen=True)
class Callback(Rule):
    """Delegate to ``callback(value, form)`` returning a message list or None."""

    callback: Callable[[Any, "FormModel"], Optional[Iterable[str]]] = field(compare=False)

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        return list(self.callback(value, form) or [])


__all__ = [
    "is_empty",
    "Rule",
    "Required",
    "HasLength",
    "Email",
    "MatchRegularExpression",
    "Number",
    "InRange",
    "Callback",
]
