#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Asynchronous file reading for `_FILE` indirection."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path

FileReader = Callable[[str], Awaitable[str]]


def _read_verbatim(path: str) -> str:
    # Bytes then decode: text mode would translate CRLF line endings.
    return Path(path).read_bytes().decode("utf-8")


async def read_text_file(path: str) -> str:
    """Read the full UTF-8 contents of `path` without trimming or newline translation.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the contents are not valid UTF-8.
    """
    return await asyncio.to_thread(_read_verbatim, path)


# 🌍🔑🔚
