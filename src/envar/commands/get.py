#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Print a single resolved variable."""

from __future__ import annotations

import asyncio

import click
from provide.foundation.console import perr

from envar.commands import select_validator
from envar.exceptions import EnvarError
from envar.resolver import resolve_variable


@click.command("get")
@click.argument("name")
@click.option("--default", "default_value", default=None, help="Value used when no other source is set")
@click.option("--optional", is_flag=True, help="Succeed with no output when the variable has no value")
@click.option("--non-empty", is_flag=True, help="Reject an empty value")
def get_command(name: str, default_value: str | None, optional: bool, non_empty: bool) -> None:
    """Resolve NAME and print its value exactly as stored."""
    validator = select_validator(optional, non_empty)
    try:
        resolution = asyncio.run(resolve_variable(name, validator, default_value))
    except EnvarError as e:
        perr(f"❌ {e}")
        raise SystemExit(1) from e

    if resolution.value is not None:
        click.echo(resolution.value, nl=False)


# 🌍🔑🔚
