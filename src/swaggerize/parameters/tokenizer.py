# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Rule tokenizer.

Turns the rule specification of one request field into an ordered list of
string tokens. Tokens are not validated here; unknown tokens simply fail to
match later.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

RULE_DELIMITER = "|"


class Rule:
    """Base class for class-backed validation rules.

    A rule renders to its qualified class name unless it overrides ``__str__``.
    """

    def __str__(self) -> str:
        return qualified_name(type(self))


class In(Rule):
    """Rule restricting a field to a fixed set of values."""

    def __init__(self, values: Iterable[Any]) -> None:
        self.values = [str(value) for value in values]

    def __str__(self) -> str:
        return "in:" + ",".join(self.values)

    def __repr__(self) -> str:
        return f"In({self.values!r})"


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def render_token(value: Any) -> str:
    """Render a single rule token to its string form."""
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return qualified_name(value)
    return str(value)


def split_rules(rules: Any) -> list[str] | None:
    """Normalize a field's rule specification into a list of tokens.

    Args:
        rules: A ``|`` delimited string, a list or tuple of tokens, a single
            rule object, or None for a field declared without rules

    Returns:
        The ordered tokens, or None when no rule list was given
    """
    if rules is None:
        return None
    if isinstance(rules, str):
        return rules.split(RULE_DELIMITER)
    if isinstance(rules, (list, tuple)):
        return [render_token(rule) for rule in rules]
    return [render_token(rules)]
