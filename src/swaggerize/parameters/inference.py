# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: swaggerize
"""
Type inference from rule tokens.

The schema type of a field is picked from ``TYPE_TABLE``: the first entry whose
predicate matches the tokens wins, ``string`` is the fallback (date, email,
ip and friends are not told apart).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Final

REQUIRED_TOKEN: Final = "required"
ENUM_PREFIX: Final = "in:"
DEFAULT_TYPE: Final = "string"


def has_token(token: str) -> Callable[[Sequence[str]], bool]:
    """Build a predicate matching token lists that contain ``token``."""

    def predicate(tokens: Sequence[str]) -> bool:
        return token in tokens

    return predicate


TYPE_TABLE: Final[list[tuple[Callable[[Sequence[str]], bool], str]]] = [
    (has_token("integer"), "integer"),
    (has_token("numeric"), "number"),
    (has_token("boolean"), "boolean"),
    (has_token("array"), "array"),
]


def infer_type(tokens: Sequence[str]) -> str:
    for predicate, schema_type in TYPE_TABLE:
        if predicate(tokens):
            return schema_type
    return DEFAULT_TYPE


def is_required(tokens: Sequence[str]) -> bool:
    return REQUIRED_TOKEN in tokens


def extract_enum(tokens: Sequence[str]) -> list[str]:
    """Return the values of the first ``in:a,b,c`` token, or an empty list.

    Values containing commas cannot be expressed; later ``in:`` tokens are
    ignored.
    """
    for token in tokens:
        if isinstance(token, str) and token.startswith(ENUM_PREFIX):
            return token[len(ENUM_PREFIX):].split(",")
    return []
