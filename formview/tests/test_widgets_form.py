"""
Form tag and error summary widgets.

Why:
    The form wrapper carries the CSRF token and method override; the summary
    lists every error once above the fields and stays in the DOM (hidden)
    when there is nothing to report.
"""

from __future__ import annotations

from formview.tests.stubs import LoginForm
from formview.widgets import ErrorSummary, Form


def test_error_summary_lists_first_errors() -> None:
    form = LoginForm()
    form.load({"LoginForm": {"login": "admin@.com", "password": "123456"}})
    form.validate()

    assert ErrorSummary(form).render() == (
        '<div class="error-summary"><p>Please fix the following errors:</p>'
        "<ul><li>This value is not a valid email address.</li>\n<li>Is too short.</li></ul></div>"
    )


def test_error_summary_is_hidden_without_errors() -> None:
    assert ErrorSummary(LoginForm()).render() == (
        '<div class="error-summary" style="display:none"><p>Please fix the following errors:</p><ul></ul></div>'
    )


def test_error_summary_custom_header_footer_and_class() -> None:
    form = LoginForm()
    form.add_error("login", "<bad>")
    html = ErrorSummary(form, {"header": "", "footer": "<hr>", "class": "alert"}).render()
    assert html == '<div class="alert"><ul><li>&lt;bad&gt;</li></ul><hr></div>'


def test_post_form_includes_csrf_token() -> None:
    assert Form("/login", csrf_token="abc").begin() == (
        '<form action="/login" method="post">\n<input type="hidden" name="csrf_token" value="abc">'
    )


def test_unsupported_verbs_are_tunneled_through_post() -> None:
    assert Form("/items/1", "delete").begin() == (
        '<form action="/items/1" method="post">\n<input type="hidden" name="_method" value="DELETE">'
    )


def test_get_form_moves_query_string_into_hidden_inputs() -> None:
    assert Form("/search?page=2&q=", "get", csrf_token="abc").begin() == (
        '<form action="/search" method="get">\n'
        '<input type="hidden" name="page" value="2">\n'
        '<input type="hidden" name="q" value="">'
    )


def test_form_render_wraps_content() -> None:
    html = Form("/login", options={"id": "login-form"}).render("<p>fields</p>")
    assert html == '<form id="login-form" action="/login" method="post">\n<p>fields</p>\n</form>'
