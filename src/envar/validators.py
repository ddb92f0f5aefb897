#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Validator contract and the built-in presets.

A validator is anything exposing `is_optional()` and `safe_parse(value)`.
Adapters around schema libraries conform structurally; the presets below
cover projects that only need "is it a string" style checks.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from attrs import frozen


@frozen
class ParseResult:
    """Outcome of `safe_parse`; `error is None` means the value was accepted."""

    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@runtime_checkable
class Validator(Protocol):
    """Capability contract the resolver validates against."""

    def is_optional(self) -> bool: ...

    def safe_parse(self, value: str | None) -> ParseResult: ...


@frozen
class PredicateValidator:
    """Validator built from a boolean predicate and an error message factory."""

    name: str
    optional: bool
    predicate: Callable[[object], bool]
    describe: Callable[[object], str]

    def is_optional(self) -> bool:
        return self.optional

    def safe_parse(self, value: object) -> ParseResult:
        if self.predicate(value):
            return ParseResult()
        if value is None or isinstance(value, str):
            return ParseResult(ValueError(self.describe(value)))
        return ParseResult(TypeError(self.describe(value)))

    def __repr__(self) -> str:
        return f"<Validator {self.name}>"


def predicate_validator(
    name: str,
    predicate: Callable[[str], bool],
    *,
    optional: bool = False,
    message: str = "Value failed validation",
) -> PredicateValidator:
    """Build a validator that accepts strings satisfying `predicate`.

    Non-string input is always rejected. `None` is accepted only when
    `optional` is true.
    """

    def check(value: object) -> bool:
        if value is None:
            return optional
        return isinstance(value, str) and predicate(value)

    def describe(value: object) -> str:
        if value is None or isinstance(value, str):
            return f"{message}: {value!r}"
        return f"Expected value to be a string, but got {type(value).__name__}"

    return PredicateValidator(name, optional, check, describe)


def _type_name(value: object) -> str:
    return "None" if value is None else type(value).__name__


REQUIRED = PredicateValidator(
    "REQUIRED",
    False,
    lambda value: isinstance(value, str),
    lambda value: f"Expected value to be a string, but got {_type_name(value)}",
)
"""Required variable; any string, including the empty one, is accepted."""

OPTIONAL = PredicateValidator(
    "OPTIONAL",
    True,
    lambda value: value is None or isinstance(value, str),
    lambda value: f"Expected value to be a string, but got {_type_name(value)}",
)
"""Optional variable; a string or absence is accepted."""

REQUIRED_NON_EMPTY = PredicateValidator(
    "REQUIRED_NON_EMPTY",
    False,
    lambda value: isinstance(value, str) and len(value) > 0,
    lambda value: f'Expected value to be a non-empty string, but got "{value}"',
)
"""Required variable that must not be the empty string."""

OPTIONAL_NON_EMPTY = PredicateValidator(
    "OPTIONAL_NON_EMPTY",
    True,
    lambda value: value is None or (isinstance(value, str) and len(value) > 0),
    lambda value: f'Expected value to be absent or a non-empty string, but got "{value}"',
)
"""Optional variable that, when present, must not be the empty string."""


# 🌍🔑🔚
