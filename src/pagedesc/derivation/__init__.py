# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Description derivation engine.

Core data structures shared by the table stripper, paragraph scanner
and text sanitizer. Everything here is positional: tokens and regions
point into the source string instead of copying it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TokenKind(StrEnum):
    """Token classification for the table scanner."""

    OPEN_TAG = "open_tag"
    CLOSE_TAG = "close_tag"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    """A contiguous span of the source, classified by kind."""

    kind: TokenKind
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Region:
    """A structural element (table or paragraph) located by offsets."""

    source: str = field(default="", repr=False)
    start: int = 0
    end: int = 0

    @property
    def markup(self) -> str:
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start
