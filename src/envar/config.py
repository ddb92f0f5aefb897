#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Settings for the envar tool itself.

These only steer how envar reports what it resolves. The variables it
resolves for an application never pass through here.
"""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str) -> str:
    """Upper-case a level name, rejecting anything Foundation would not know."""
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return level


@define
class EnvarRuntimeConfig(RuntimeConfig):
    """Logging settings read from ENVAR_* variables when the CLI starts."""

    log_level: str = field(
        default="WARNING",
        env_var="ENVAR_LOG_LEVEL",
        converter=parse_log_level,
        metadata={
            "help": "How much of each resolution to log; DEBUG shows every source checked for a variable"
        },
    )


# 🌍🔑🔚
