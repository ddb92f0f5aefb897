#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for envar tests."""

from __future__ import annotations

from collections.abc import Iterator
import os
from pathlib import Path
from unittest.mock import patch

from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from envar.store import MemoryStore
from envar.validators import ParseResult

PARSE_ERROR = ValueError("parse error")


class StubValidator:
    """Validator with fixed optionality that records every value it sees."""

    def __init__(self, optional: bool, accept: bool | None = None) -> None:
        self.optional = optional
        self.accept = accept
        self.seen: list[object] = []

    def is_optional(self) -> bool:
        return self.optional

    def safe_parse(self, value: str | None) -> ParseResult:
        self.seen.append(value)
        if self.accept is None:
            ok = isinstance(value, str) or (self.optional and value is None)
        else:
            ok = self.accept
        return ParseResult(None if ok else PARSE_ERROR)


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory environment store."""
    return MemoryStore()


@pytest.fixture
def secret_file(tmp_path: Path) -> Path:
    """A secret file whose contents end in a newline."""
    path = tmp_path / "secret.txt"
    path.write_bytes(b"s3cr3t\n")
    return path


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Snapshot os.environ and remove the variables used by process-environment tests."""
    with patch.dict(os.environ):
        for name in ("ENVAR_TEST", "ENVAR_TEST_FILE", "PORT", "PORT_FILE", "SECRET", "SECRET_FILE"):
            monkeypatch.delenv(name, raising=False)
        yield monkeypatch


@pytest.fixture
def make_validator() -> type[StubValidator]:
    """Factory for validators with controllable behavior."""
    return StubValidator
