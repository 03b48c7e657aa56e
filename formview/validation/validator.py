"""
Runs the rules of a form model and collects per-attribute errors.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from ..model.form_model import FormModel


logger = logging.getLogger("formview.validation")


@dataclass
class Result:
    """Errors keyed by attribute name, in rule declaration order."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not any(self.errors.values())

    def add_error(self, attribute: str, message: str) -> None:
        self.errors.setdefault(attribute, []).append(message)

    def get_errors(self, attribute: str) -> list[str]:
        return list(self.errors.get(attribute, []))


class Validator:
    """Validate every attribute listed in ``form.rules()``.

    All rules of an attribute run, so an attribute may collect several
    messages. Rules for attributes the form does not declare are skipped with
    a warning; that usually means a typo in `rules()`.
    """

    def validate(self, form: "FormModel") -> Result:
        result = Result()
        for attribute, rules in form.rules().items():
            if not form.has_attribute(attribute):
                logger.warning(
                    "Rules declared for unknown attribute %s on %s", attribute, type(form).__name__
                )
                continue
            value = form.get_attribute_value(attribute)
            for rule in rules:
                if rule.should_skip(value, form):
                    continue
                for message in rule.validate(value, form):
                    result.add_error(attribute, message)

        logger.debug(
            "Validated %s: %d attribute(s) with errors",
            type(form).__name__,
            sum(1 for messages in result.errors.values() if messages),
        )
        return result


__all__ = ["Result", "Validator"]
