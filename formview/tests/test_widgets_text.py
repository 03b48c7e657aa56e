"""
Label, hint and error widgets.

Why:
    These blocks surround every input; their text comes from the form model
    and is escaped unless the caller opts out.
"""

from __future__ import annotations

from formview.tests.stubs import LoginForm
from formview.widgets import Error, Hint, Label


def test_label_defaults_to_attribute_label_and_input_id() -> None:
    assert Label(LoginForm(), "login").render() == '<label for="loginform-login">Login:</label>'


def test_label_with_custom_unencoded_text() -> None:
    html = Label(LoginForm(), "login", {"label": "<b>Custom</b>", "encode": False, "class": "x"}).render()
    assert html == '<label class="x" for="loginform-login"><b>Custom</b></label>'


def test_label_for_can_be_overridden_or_omitted() -> None:
    assert Label(LoginForm(), "login", {"for": "other"}).render() == '<label for="other">Login:</label>'
    assert Label(LoginForm(), "login", {"for": None}).render() == "<label>Login:</label>"


def test_hint_from_form_model() -> None:
    assert Hint(LoginForm(), "login").render() == "<div>Write your id or email.</div>"


def test_hint_is_empty_without_content() -> None:
    assert Hint(LoginForm(), "remember_me").render() == ""


def test_hint_with_custom_tag_and_text() -> None:
    html = Hint(LoginForm(), "login", {"hint": "Custom", "tag": "span", "class": "hint"}).render()
    assert html == '<span class="hint">Custom</span>'


def test_error_renders_first_message_escaped() -> None:
    form = LoginForm()
    form.add_error("login", "A & B")
    form.add_error("login", "Second")
    assert Error(form, "login").render() == "<div>A &amp; B</div>"
    assert Error(form, "login", {"show_all_errors": True}).render() == "<div>A &amp; B<br>\nSecond</div>"


def test_error_block_is_rendered_without_errors() -> None:
    assert Error(LoginForm(), "login", {"class": "help-block"}).render() == '<div class="help-block"></div>'
