"""
Centralized rendering defaults for fields and widgets.

Intent:
    Provide a single source of truth for the CSS classes, template and ARIA
    behaviour used by `Field` and the widgets, with environment-variable
    overrides so a deployment can switch CSS frameworks without touching
    code.

Behavior:
    - *_DEFAULT constants define canonical values (Bootstrap 3 style class
      names, which is what most server-rendered themes expect).
    - get_*() functions read FORMVIEW_* env overrides and fall back to the
      defaults on empty or invalid values.

Permissions:
    Pure configuration; no external calls or privileges required.
"""
from __future__ import annotations

import os


CONTAINER_CSS_DEFAULT = "form-group"
INPUT_CSS_DEFAULT = "form-control"
LABEL_CSS_DEFAULT = "control-label"
HINT_CSS_DEFAULT = "hint-block"
ERROR_CSS_DEFAULT = "help-block"
HAS_ERROR_CSS_DEFAULT = "has-error"
HAS_SUCCESS_CSS_DEFAULT = "has-success"
REQUIRED_CSS_DEFAULT = "required"
ERROR_SUMMARY_CSS_DEFAULT = "error-summary"
FIELD_TEMPLATE_DEFAULT = "{label}\n{input}\n{hint}\n{error}"

VALIDATION_STATE_ON_INPUT = "input"
VALIDATION_STATE_ON_CONTAINER = "container"
VALIDATION_STATE_ON_DEFAULT = VALIDATION_STATE_ON_INPUT

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def get_container_css() -> str:
    """CSS class of the field container. Env: FORMVIEW_CONTAINER_CSS."""
    return _env_str("FORMVIEW_CONTAINER_CSS", CONTAINER_CSS_DEFAULT)


def get_input_css() -> str:
    """CSS class added to every text-like input. Env: FORMVIEW_INPUT_CSS."""
    return _env_str("FORMVIEW_INPUT_CSS", INPUT_CSS_DEFAULT)


def get_label_css() -> str:
    """Env: FORMVIEW_LABEL_CSS."""
    return _env_str("FORMVIEW_LABEL_CSS", LABEL_CSS_DEFAULT)


def get_hint_css() -> str:
    """Env: FORMVIEW_HINT_CSS."""
    return _env_str("FORMVIEW_HINT_CSS", HINT_CSS_DEFAULT)


def get_error_css() -> str:
    """CSS class of the error block below an input. Env: FORMVIEW_ERROR_CSS."""
    return _env_str("FORMVIEW_ERROR_CSS", ERROR_CSS_DEFAULT)


def get_has_error_css() -> str:
    """State class for attributes with errors. Env: FORMVIEW_HAS_ERROR_CSS."""
    return _env_str("FORMVIEW_HAS_ERROR_CSS", HAS_ERROR_CSS_DEFAULT)


def get_has_success_css() -> str:
    """State class for validated, error-free attributes. Env: FORMVIEW_HAS_SUCCESS_CSS."""
    return _env_str("FORMVIEW_HAS_SUCCESS_CSS", HAS_SUCCESS_CSS_DEFAULT)


def get_required_css() -> str:
    """Env: FORMVIEW_REQUIRED_CSS."""
    return _env_str("FORMVIEW_REQUIRED_CSS", REQUIRED_CSS_DEFAULT)


def get_error_summary_css() -> str:
    """Env: FORMVIEW_ERROR_SUMMARY_CSS."""
    return _env_str("FORMVIEW_ERROR_SUMMARY_CSS", ERROR_SUMMARY_CSS_DEFAULT)


def get_field_template() -> str:
    """Token template of a field container. Env: FORMVIEW_FIELD_TEMPLATE.

    Literal ``\\n`` sequences in the env value are turned into newlines.
    """
    raw = os.getenv("FORMVIEW_FIELD_TEMPLATE") or ""
    if not raw.strip():
        return FIELD_TEMPLATE_DEFAULT
    return raw.replace("\\n", "\n")


def get_validation_state_on() -> str:
    """Where state classes go: ``input`` or ``container``.

    Env:
        FORMVIEW_VALIDATION_STATE_ON – unknown values fall back to
        VALIDATION_STATE_ON_DEFAULT.
    """
    raw = (os.getenv("FORMVIEW_VALIDATION_STATE_ON") or "").strip().lower()
    if raw in {VALIDATION_STATE_ON_INPUT, VALIDATION_STATE_ON_CONTAINER}:
        return raw
    return VALIDATION_STATE_ON_DEFAULT


def get_aria_attributes() -> bool:
    """Whether fields emit aria-required / aria-invalid. Env: FORMVIEW_ARIA_ATTRIBUTES."""
    return _env_bool("FORMVIEW_ARIA_ATTRIBUTES", True)


__all__ = [
    "CONTAINER_CSS_DEFAULT",
    "INPUT_CSS_DEFAULT",
    "LABEL_CSS_DEFAULT",
    "HINT_CSS_DEFAULT",
    "ERROR_CSS_DEFAULT",
    "HAS_ERROR_CSS_DEFAULT",
    "HAS_SUCCESS_CSS_DEFAULT",
    "REQUIRED_CSS_DEFAULT",
    "ERROR_SUMMARY_CSS_DEFAULT",
    "FIELD_TEMPLATE_DEFAULT",
    "VALIDATION_STATE_ON_INPUT",
    "VALIDATION_STATE_ON_CONTAINER",
    "VALIDATION_STATE_ON_DEFAULT",
    "get_container_css",
    "get_input_css",
    "get_label_css",
    "get_hint_css",
    "get_error_css",
    "get_has_error_css",
    "get_has_success_css",
    "get_required_css",
    "get_error_summary_css",
    "get_field_template",
    "get_validation_state_on",
    "get_aria_attributes",
]
