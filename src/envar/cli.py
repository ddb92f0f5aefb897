#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""envar command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from envar.commands.check import check_command
from envar.commands.get import get_command
from envar.config import EnvarRuntimeConfig

__version__ = get_version("envar", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="envar",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Resolve variables from the environment, NAME_FILE secret files, or defaults.

    Configure logging via environment variables:
    - ENVAR_LOG_LEVEL: Set log level for envar (trace, debug, info, warning, error)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    envar_config = EnvarRuntimeConfig.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="envar",
        logging=evolve(
            base_telemetry.logging,
            default_level=envar_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)


cli.add_command(check_command, name="check")
cli.add_command(get_command, name="get")

main = cli

if __name__ == "__main__":
    cli()

# 🌍🔑🔚
