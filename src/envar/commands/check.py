#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Check that variables resolve from the current environment."""

from __future__ import annotations

import asyncio

import click
from provide.foundation import logger
from provide.foundation.console import perr, pout

from envar.commands import select_validator
from envar.exceptions import EnvarError
from envar.resolver import VariableSpec, init_variables


def _parse_defaults(values: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated NAME=VALUE options."""
    defaults: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"Expected NAME=VALUE, got '{item}'", param_hint="--default")
        defaults[name] = value
    return defaults


@click.command("check")
@click.argument("names", nargs=-1, required=True)
@click.option("--optional", is_flag=True, help="Accept variables that resolve to no value")
@click.option("--non-empty", is_flag=True, help="Reject variables that resolve to an empty string")
@click.option(
    "--default",
    "defaults",
    multiple=True,
    metavar="NAME=VALUE",
    help="Default value for a variable (repeatable)",
)
def check_command(names: tuple[str, ...], optional: bool, non_empty: bool, defaults: tuple[str, ...]) -> None:
    """Resolve NAMES and report which source each value came from.

    Values themselves are never printed.
    """
    default_map = _parse_defaults(defaults)
    validator = select_validator(optional, non_empty)
    specs = [VariableSpec(name, validator, default_map.get(name)) for name in names]

    logger.debug("Check command started", names=list(names), optional=optional, non_empty=non_empty)

    try:
        resolutions = asyncio.run(init_variables(specs))
    except EnvarError as e:
        perr(f"❌ {e}")
        raise SystemExit(1) from e

    for resolution in resolutions:
        pout(f"{resolution.name}: {resolution.source.value}")


# 🌍🔑🔚
