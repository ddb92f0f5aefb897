#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for envar."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class EnvarError(FoundationError):
    """Base exception for all envar-related errors."""

    pass


class EnvNotSetError(EnvarError):
    """Raised by application code when an initialized variable is unexpectedly absent.

    Variables should be set up with `init_variable` at the start of the
    process. Reading one afterwards and finding nothing is what this error
    reports; the resolver itself never raises it.
    """

    def __init__(self, env_variable: str, cause: BaseException | None = None) -> None:
        self.env_variable = env_variable
        super().__init__(
            f"Environment variable {env_variable} is not set.\n"
            f"You can also set it by specifying a path to a file "
            f"with its value using {env_variable}_FILE.",
            code="ENVAR_NOT_SET",
            cause=cause,
        )
        if cause is not None:
            self.__cause__ = cause


class ConfigFileReadError(EnvarError):
    """Raised when the file referenced by `<NAME>_FILE` cannot be read."""

    def __init__(
        self,
        env_variable: str,
        path_variable: str,
        path: str,
        cause: BaseException,
    ) -> None:
        self.env_variable = env_variable
        self.path_variable = path_variable
        self.path = path
        super().__init__(
            f'Could not read file "{path}" to set {env_variable} '
            f"(based on {path_variable}). Details:\n{cause}",
            code="ENVAR_FILE_READ",
            cause=cause,
        )
        self.__cause__ = cause


class ConfigParseError(EnvarError):
    """Raised when the resolved value is rejected by the validator."""

    def __init__(self, env_variable: str, cause: BaseException) -> None:
        self.env_variable = env_variable
        super().__init__(
            f"Could not parse variable {env_variable}. Details:\n{cause}",
            code="ENVAR_PARSE",
            cause=cause,
        )
        self.__cause__ = cause


# 🌍🔑🔚
