"""
Validation rules, HTML option wrappers and the validator.

Why:
    Rules decide the messages shown next to inputs; the wrappers decide which
    constraints are mirrored as HTML attributes. Both must agree so the
    browser and the server reject the same input.
"""

from __future__ import annotations

import logging
from typing import Optional

import pytest

from formview.model import FormModel
from formview.tests.stubs import LoginForm
from formview.validation import (
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
    unwrap_rule,
)


class TypoForm(FormModel):
    name: Optional[str] = None

    def rules(self) -> dict[str, list]:
        return {"nmae": [Required()]}


@pytest.fixture
def form() -> LoginForm:
    return LoginForm()


def test_required(form: LoginForm) -> None:
    assert Required().validate("", form) == ["Value cannot be blank."]
    assert Required().validate("  ", form) == ["Value cannot be blank."]
    assert Required().validate([], form) == ["Value cannot be blank."]
    assert Required().validate("x", form) == []
    assert Required().validate(False, form) == []


def test_has_length(form: LoginForm) -> None:
    assert HasLength(min=4).validate("abc", form) == ["Is too short."]
    assert HasLength(max=3).validate("abcd", form) == ["Is too long."]
    assert HasLength(min=1, max=3).validate("abc", form) == []
    assert HasLength(min=1).validate(5, form) == ["This value must be a string."]


def test_email(form: LoginForm) -> None:
    assert Email().validate("admin@example.com", form) == []
    assert Email().validate("admin@.com", form) == ["This value is not a valid email address."]
    assert Email().validate("John <john@example.com>", form) == ["This value is not a valid email address."]
    assert Email(allow_name=True).validate("John <john@example.com>", form) == []


def test_match_regular_expression(form: LoginForm) -> None:
    assert MatchRegularExpression(r"^\d+$").validate("12", form) == []
    assert MatchRegularExpression(r"^\d+$").validate("ab", form) == ["Value is invalid."]
    assert MatchRegularExpression(r"^\d+$", not_=True).validate("12", form) == ["Value is invalid."]


def test_number(form: LoginForm) -> None:
    assert Number().validate("1.5", form) == []
    assert Number().validate("abc", form) == ["Value must be a number."]
    assert Number().validate(True, form) == ["Value must be a number."]
    assert Number(as_integer=True).validate("1.5", form) == ["Value must be an integer."]
    assert Number(min=1).validate(0, form) == ["Value must be no less than 1."]
    assert Number(max=10).validate("11", form) == ["Value must be no greater than 10."]


def test_in_range(form: LoginForm) -> None:
    assert InRange(("a", "b")).validate("c", form) == ["This value is invalid."]
    assert InRange(("a", "b")).validate(["a", "b"], form) == []
    assert InRange((1, 2)).validate("1", form) == []
    assert InRange((1, 2), strict=True).validate("1", form) == ["This value is invalid."]
    assert InRange(("a",), not_=True).validate("a", form) == ["This value is invalid."]


def test_callback_receives_value_and_form(form: LoginForm) -> None:
    rule = Callback(lambda value, model: ["bad"] if value == model.login else None)
    form.login = "x"
    assert rule.validate("x", form) == ["bad"]
    assert rule.validate("y", form) == []


def test_rules_skip_empty_values_except_required(form: LoginForm) -> None:
    assert HasLength(min=4).should_skip("", form)
    assert HasLength(min=4).should_skip(None, form)
    assert not HasLength(min=4, skip_on_empty=False).should_skip("", form)
    assert not Required().should_skip("", form)


def test_when_predicate_disables_a_rule(form: LoginForm) -> None:
    rule = Required(when=lambda value, model: model.remember_me)
    assert rule.should_skip("", form)
    form.remember_me = True
    assert not rule.should_skip("", form)


def test_html_option_wrappers() -> None:
    assert RequiredHtmlOptions(Required()).html_options() == {"required": True, "aria-required": False}
    assert RequiredHtmlOptions(Required(), aria_attribute=True).html_options() == {
        "required": True,
        "aria-required": "true",
    }
    assert HasLengthHtmlOptions(HasLength(min=2, max=5)).html_options() == {"maxlength": 5, "minlength": 2}
    assert NumberHtmlOptions(Number(min=0, max=9)).html_options() == {"min": 0, "max": 9}
    assert MatchRegularExpressionHtmlOptions(MatchRegularExpression(r"^\w+$")).html_options() == {"pattern": r"\w+"}
    assert MatchRegularExpressionHtmlOptions(MatchRegularExpression(r"\w", not_=True)).html_options() == {}


def test_wrappers_validate_through_the_wrapped_rule(form: LoginForm) -> None:
    wrapped = RequiredHtmlOptions(Required(message="Fill me."))
    assert wrapped.validate("", form) == ["Fill me."]
    assert not wrapped.should_skip("", form)
    assert unwrap_rule(wrapped) == Required(message="Fill me.")
    assert unwrap_rule(Email()) == Email()


def test_validator_returns_errors_per_attribute(form: LoginForm) -> None:
    form.load({"LoginForm": {"login": "admin@.com", "password": "123456"}})
    result = Validator().validate(form)

    assert not result.is_valid
    assert result.get_errors("login") == ["This value is not a valid email address."]
    assert result.get_errors("password") == ["Is too short."]
    assert result.get_errors("remember_me") == []


def test_validator_warns_about_rules_for_unknown_attributes(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="formview.validation"):
        assert TypoForm().validate() is True
    assert "Rules declared for unknown attribute nmae on TypoForm" in caplog.text
