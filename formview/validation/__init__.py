"""
Validation rules, HTML-option wrappers and the validator.
"""

from .rules import (
    Rule,
    Required,
    HasLength,
    Email,
    MatchRegularExpression,
    Number,
    InRange,
    Callback,
    is_empty,
)
from .html_options import (
    HtmlOptionsProvider,
    RuleHtmlOptions,
    RequiredHtmlOptions,
    HasLengthHtmlOptions,
    NumberHtmlOptions,
    MatchRegularExpressionHtmlOptions,
    unwrap_rule,
)
from .validator import Result, Validator

__all__ = [
    "Rule",
    "Required",
    "HasLength",
    "Email",
    "MatchRegularExpression",
    "Number",
    "InRange",
    "Callback",
    "is_empty",
    "HtmlOptionsProvider",
    "RuleHtmlOptions",
    "RequiredHtmlOptions",
    "HasLengthHtmlOptions",
    "NumberHtmlOptions",
    "MatchRegularExpressionHtmlOptions",
    "unwrap_rule",
    "Result",
    "Validator",
]
