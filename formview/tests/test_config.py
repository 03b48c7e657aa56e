"""
Rendering defaults and their FORMVIEW_* environment overrides.

Why:
    Deployments switch CSS frameworks through the environment; invalid or
    empty values must fall back to the defaults instead of breaking markup.
"""

from __future__ import annotations

import pytest

from formview import config


def test_defaults_without_environment() -> None:
    assert config.get_container_css() == "form-group"
    assert config.get_input_css() == "form-control"
    assert config.get_label_css() == "control-label"
    assert config.get_hint_css() == "hint-block"
    assert config.get_error_css() == "help-block"
    assert config.get_has_error_css() == "has-error"
    assert config.get_has_success_css() == "has-success"
    assert config.get_required_css() == "required"
    assert config.get_error_summary_css() == "error-summary"
    assert config.get_field_template() == "{label}\n{input}\n{hint}\n{error}"
    assert config.get_validation_state_on() == "input"
    assert config.get_aria_attributes() is True


def test_css_overrides_are_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMVIEW_HAS_ERROR_CSS", "  is-invalid ")
    monkeypatch.setenv("FORMVIEW_HAS_SUCCESS_CSS", "   ")
    assert config.get_has_error_css() == "is-invalid"
    assert config.get_has_success_css() == "has-success"


def test_field_template_unescapes_newlines(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMVIEW_FIELD_TEMPLATE", "{label}\\n{input}")
    assert config.get_field_template() == "{label}\n{input}"


@pytest.mark.parametrize(("raw", "expected"), [("container", "container"), ("INPUT", "input"), ("label", "input")])
def test_validation_state_on(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("FORMVIEW_VALIDATION_STATE_ON", raw)
    assert config.get_validation_state_on() == expected


@pytest.mark.parametrize(("raw", "expected"), [("off", False), ("0", False), ("yes", True), ("maybe", True)])
def test_aria_attributes(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("FORMVIEW_ARIA_ATTRIBUTES", raw)
    assert config.get_aria_attributes() is expected
