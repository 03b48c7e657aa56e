"""
Rule wrappers that also contribute HTML attributes to the rendered input.

A plain rule only validates on the server. Wrapping it tells the widgets to
mirror the constraint in the markup so browsers can enforce it too:

    def rules(self):
        return {
            "password": [
                RequiredHtmlOptions(Required(), aria_attribute=True),
                HasLengthHtmlOptions(HasLength(min=8, max=64)),
            ],
        }

renders ``required aria-required="true" maxlength="64" minlength="8"`` on
the password input. Wrappers validate by delegating to the wrapped rule, so
they can replace the rule one-for-one in `rules()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .rules import HasLength, MatchRegularExpression, Number, Required, Rule

if TYPE_CHECKING:  # pragma: no cover
    from ..model.form_model import FormModel


@runtime_checkable
class HtmlOptionsProvider(Protocol):
    def html_options(self) -> dict[str, Any]:
        ...


@dataclass(frozen=True)
class RuleHtmlOptions:
    """Base wrapper: validates through ``rule`` and exposes `html_options()`."""

    rule: Rule

    def should_skip(self, value: Any, form: "FormModel") -> bool:
        return self.rule.should_skip(value, form)

    def validate(self, value: Any, form: "FormModel") -> list[str]:
        return self.rule.validate(value, form)

    def html_options(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class RequiredHtmlOptions(RuleHtmlOptions):
    rule: Required
    aria_attribute: bool = False

    def html_options(self) -> dict[str, Any]:
        return {
            "required": True,
            "aria-required": "true" if self.aria_attribute else False,
        }


@dataclass(frozen=True)
class HasLengthHtmlOptions(RuleHtmlOptions):
    rule: HasLength

    def html_options(self) -> dict[str, Any]:
        return {"maxlength": self.rule.max, "minlength": self.rule.min}


@dataclass(frozen=True)
class NumberHtmlOptions(RuleHtmlOptions):
    rule: Number

    def html_options(self) -> dict[str, Any]:
        return {"min": self.rule.min, "max": self.rule.max}


@dataclass(frozen=True)
class MatchRegularExpressionHtmlOptions(RuleHtmlOptions):
    """Exposes the pattern; browsers anchor it, so ``^`` / ``$`` are dropped."""

    rule: MatchRegularExpression

    def html_options(self) -> dict[str, Any]:
        if self.rule.not_:
            return {}
        pattern = self.rule.pattern
        if pattern.startswith("^"):
            pattern = pattern[1:]
        if pattern.endswith("$") and not pattern.endswith("\\$"):
            pattern = pattern[:-1]
        return {"pattern": pattern}


def unwrap_rule(rule: Any) -> Any:
    """Return the plain rule behind a wrapper (or the rule itself)."""
    while isinstance(rule, RuleHtmlOptions):
        rule = rule.rule
    return rule


__all__ = [
    "HtmlOptionsProvider",
    "RuleHtmlOptions",
    "RequiredHtmlOptions",
    "HasLengthHtmlOptions",
    "NumberHtmlOptions",
    "MatchRegularExpressionHtmlOptions",
    "unwrap_rule",
]
