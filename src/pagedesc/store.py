# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Write-once page property store.

One ``PropertyStore`` per page compilation. A key moves from unset to
set exactly once; later writes are no-ops reported as ``ALREADY_SET``.
This is what lets an explicit override and automatic derivation share
the ``description`` key: whichever runs first decides the value.

Precedence is a property of call order, which the host controls. The
store only guarantees idempotence.

NOTE: not thread-safe. Concurrent compilations need separate instances.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, StrEnum, auto

DESCRIPTION_KEY = "description"
OG_DESCRIPTION_KEY = "og:description"


class _Absent(Enum):
    ABSENT = auto()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


# Returned by PropertyStore.get() for a key that was never set.
# Distinct from every stored value, including "".
ABSENT = _Absent.ABSENT


class SetResult(StrEnum):
    """Outcome of ``PropertyStore.set_if_absent``."""

    STORED = "stored"
    ALREADY_SET = "already_set"


class PropertyStore:
    """Per-compilation mapping of property name to value, first write wins."""

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | _Absent:
        return self._values.get(key, ABSENT)

    def set_if_absent(self, key: str, value: str) -> SetResult:
        """Store *value* under *key* unless the key already holds a value.

        The value is not validated: an empty string is a legitimate,
        final value.
        """
        if key in self._values:
            return SetResult.ALREADY_SET
        self._values[key] = value
        return SetResult.STORED

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def as_dict(self) -> dict[str, str]:
        """Snapshot for hosts that persist page properties after rendering."""
        return dict(self._values)

    def __repr__(self) -> str:
        return f"PropertyStore({self._values!r})"


def get_description(store: PropertyStore) -> str | _Absent:
    return store.get(DESCRIPTION_KEY)


def set_description(store: PropertyStore, description: str) -> SetResult:
    return store.set_if_absent(DESCRIPTION_KEY, description)
