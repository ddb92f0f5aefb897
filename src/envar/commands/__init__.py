#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""CLI commands for envar."""

from __future__ import annotations

from envar.validators import (
    OPTIONAL,
    OPTIONAL_NON_EMPTY,
    REQUIRED,
    REQUIRED_NON_EMPTY,
    PredicateValidator,
)


def select_validator(optional: bool, non_empty: bool) -> PredicateValidator:
    """Map the --optional/--non-empty flags onto a preset."""
    if optional:
        return OPTIONAL_NON_EMPTY if non_empty else OPTIONAL
    return REQUIRED_NON_EMPTY if non_empty else REQUIRED


__all__ = ["select_validator"]

# 🌍🔑🔚
