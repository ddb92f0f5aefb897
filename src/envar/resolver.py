#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Resolve, validate and publish environment variables.

A variable can come from three sources, in this order of precedence:

1. The environment variable itself;
2. A file named by the environment variable `<NAME>_FILE`;
3. A default value given at the call site.

After `init_variable` returns, the value is available synchronously via
`os.environ` (or whichever store was passed in). Code reading it later and
finding it missing should raise `EnvNotSetError`, see `require_variable`.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from attrs import define, frozen
from provide.foundation import logger

from envar.exceptions import ConfigFileReadError, ConfigParseError, EnvNotSetError
from envar.reader import FileReader, read_text_file
from envar.store import EnvironmentStore, OsEnvironStore
from envar.validators import Validator

FILE_SUFFIX = "_FILE"


class Source(str, Enum):
    """Where a resolved value came from."""

    ENVIRONMENT = "environment"
    FILE = "file"
    DEFAULT = "default"
    NONE = "none"


@frozen
class Resolution:
    """Outcome of resolving a single variable."""

    name: str
    source: Source
    value: str | None
    optional: bool


@define
class VariableSpec:
    """A variable to initialize with `init_variables`."""

    name: str
    validator: Validator
    default: str | None = None


def path_variable_for(env_variable: str) -> str:
    return f"{env_variable}{FILE_SUFFIX}"


async def _set_from_file(
    env_variable: str,
    store: EnvironmentStore,
    reader: FileReader,
) -> bool:
    """Copy the contents of the file named by `<NAME>_FILE` into `env_variable`.

    Returns False when no `<NAME>_FILE` variable is set.

    Raises:
        ConfigFileReadError: If the file cannot be read, or the store rejects
            its contents.
    """
    path_variable = path_variable_for(env_variable)
    logger.debug(
        f"({env_variable}) Trying to read variable from file",
        env_variable=env_variable,
        path_variable=path_variable,
    )

    path = store.get(path_variable)
    if not path:
        logger.debug(f"({env_variable}) No {path_variable} variable set, skipping")
        return False

    try:
        content = await reader(path)
    except (OSError, UnicodeDecodeError) as e:
        _log_read_failure(env_variable, path_variable, path, e)
        raise ConfigFileReadError(env_variable, path_variable, path, e) from e

    logger.debug(
        f"({env_variable}) Setting variable from file",
        env_variable=env_variable,
        path_variable=path_variable,
        path=path,
    )
    try:
        store.set(env_variable, content)
    except ValueError as e:
        # os.environ rejects values with embedded NUL bytes.
        _log_read_failure(env_variable, path_variable, path, e)
        raise ConfigFileReadError(env_variable, path_variable, path, e) from e
    return True


def _log_read_failure(env_variable: str, path_variable: str, path: str, error: Exception) -> None:
    logger.error(
        "Could not read file",
        env_variable=env_variable,
        path_variable=path_variable,
        path=path,
        error=str(error),
    )


def _set_from_default(env_variable: str, store: EnvironmentStore, default_value: str | None) -> None:
    """Publish the default, or clear the variable when there is none."""
    if default_value is None:
        logger.debug(f"({env_variable}) No default value, clearing variable", env_variable=env_variable)
        store.delete(env_variable)
        return

    logger.debug(f"({env_variable}) Setting variable from default", env_variable=env_variable)
    store.set(env_variable, default_value)


async def resolve_variable(
    env_variable: str,
    validator: Validator,
    default_value: str | None = None,
    *,
    store: EnvironmentStore | None = None,
    reader: FileReader | None = None,
) -> Resolution:
    """Resolve `env_variable` and return where its value came from.

    Same behavior as `init_variable`, which is the usual entry point.
    """
    store = store if store is not None else OsEnvironStore()
    reader = reader if reader is not None else read_text_file

    logger.debug(f"({env_variable}) Setting up variable", env_variable=env_variable)

    source = Source.ENVIRONMENT
    if not store.get(env_variable):
        source = Source.FILE
        await _set_from_file(env_variable, store, reader)

    # An empty file counts as no value, so the default still applies.
    if not store.get(env_variable):
        source = Source.DEFAULT if default_value is not None else Source.NONE
        _set_from_default(env_variable, store, default_value)

    # Validate whatever the store ended up holding, not a local copy.
    candidate = store.get(env_variable) or default_value
    result = validator.safe_parse(candidate)
    if result.error is not None:
        logger.error(
            f"Could not parse variable {env_variable}",
            env_variable=env_variable,
            source=source.value,
            error=str(result.error),
        )
        raise ConfigParseError(env_variable, result.error) from result.error

    optional = validator.is_optional()
    logger.info(
        f"Variable: {env_variable} (using {source.value})",
        env_variable=env_variable,
        source=source.value,
        optional=optional,
    )
    return Resolution(name=env_variable, source=source, value=store.get(env_variable), optional=optional)


async def init_variable(
    env_variable: str,
    validator: Validator,
    default_value: str | None = None,
    *,
    store: EnvironmentStore | None = None,
    reader: FileReader | None = None,
) -> None:
    """Set up `env_variable` from the environment, a `_FILE` file, or a default.

    Steps, stopping at the first that yields a value:

    1. Use the variable `env_variable` if it is set and non-empty;
    2. Otherwise read the file at the path in `<env_variable>_FILE`;
    3. Otherwise set `default_value`, or delete the variable if there is none.

    The resulting value is then checked with `validator.safe_parse`.

    Args:
        env_variable: Name of the environment variable.
        validator: Object implementing `is_optional()` and `safe_parse(value)`.
        default_value: Fallback value; `None` means no default.
        store: Store to read and publish into. Defaults to `os.environ`.
        reader: Coroutine function reading a file path into a string.

    Raises:
        ConfigFileReadError: If `<env_variable>_FILE` is set but the file cannot be read.
        ConfigParseError: If the validator rejects the final value.
    """
    await resolve_variable(env_variable, validator, default_value, store=store, reader=reader)


async def init_variables(
    specs: Iterable[VariableSpec],
    *,
    store: EnvironmentStore | None = None,
    reader: FileReader | None = None,
) -> list[Resolution]:
    """Initialize several variables one after another.

    Calls are made serially so that overlapping names never race. The first
    failure propagates and later variables are left untouched.
    """
    resolutions = []
    for spec in specs:
        resolution = await resolve_variable(
            spec.name,
            spec.validator,
            spec.default,
            store=store,
            reader=reader,
        )
        resolutions.append(resolution)
    return resolutions


def require_variable(env_variable: str, *, store: EnvironmentStore | None = None) -> str:
    """Read an initialized variable, raising `EnvNotSetError` when it is absent."""
    store = store if store is not None else OsEnvironStore()
    value = store.get(env_variable)
    if value is None:
        raise EnvNotSetError(env_variable)
    return value


# 🌍🔑🔚
