#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Key-value stores the resolver reads from and publishes into.

The process environment is the store used in production. `MemoryStore`
lets callers and tests resolve variables without touching `os.environ`.
"""

from __future__ import annotations

from collections.abc import Mapping
import os
from typing import Protocol, runtime_checkable

from attrs import define, field


@runtime_checkable
class EnvironmentStore(Protocol):
    """Case-sensitive string mapping where absence differs from an empty value."""

    def get(self, name: str) -> str | None: ...

    def set(self, name: str, value: str) -> None: ...

    def delete(self, name: str) -> None: ...


class OsEnvironStore:
    """Store backed by the live process environment."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str) -> None:
        os.environ[name] = value

    def delete(self, name: str) -> None:
        os.environ.pop(name, None)

    def __repr__(self) -> str:
        return "OsEnvironStore()"


@define
class MemoryStore:
    """In-memory store, seeded from an optional mapping.

    Like `os.environ`, it refuses names and values containing NUL bytes.
    """

    data: dict[str, str] = field(factory=dict, converter=dict)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> MemoryStore:
        return cls(dict(values))

    def get(self, name: str) -> str | None:
        return self.data.get(name)

    def set(self, name: str, value: str) -> None:
        if "\x00" in name or "\x00" in value:
            raise ValueError("embedded null byte")
        self.data[name] = value

    def delete(self, name: str) -> None:
        self.data.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self.data


# 🌍🔑🔚
