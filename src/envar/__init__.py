#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Environment variables from the environment, `_FILE` secret files, or defaults."""

from __future__ import annotations

from provide.foundation.utils import get_version

from envar.exceptions import ConfigFileReadError, ConfigParseError, EnvarError, EnvNotSetError
from envar.resolver import (
    Resolution,
    Source,
    VariableSpec,
    init_variable,
    init_variables,
    require_variable,
    resolve_variable,
)
from envar.store import EnvironmentStore, MemoryStore, OsEnvironStore
from envar.validators import (
    OPTIONAL,
    OPTIONAL_NON_EMPTY,
    REQUIRED,
    REQUIRED_NON_EMPTY,
    ParseResult,
    Validator,
    predicate_validator,
)

__version__ = get_version("envar", caller_file=__file__)

__all__ = [
    "OPTIONAL",
    "OPTIONAL_NON_EMPTY",
    "REQUIRED",
    "REQUIRED_NON_EMPTY",
    "ConfigFileReadError",
    "ConfigParseError",
    "EnvNotSetError",
    "EnvarError",
    "EnvironmentStore",
    "MemoryStore",
    "OsEnvironStore",
    "ParseResult",
    "Resolution",
    "Source",
    "Validator",
    "VariableSpec",
    "__version__",
    "init_variable",
    "init_variables",
    "predicate_validator",
    "require_variable",
    "resolve_variable",
]

# 🌍🔑🔚
