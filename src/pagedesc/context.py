# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""PageCompilation: leaf module with minimal dependencies.

Explicit per-compilation state handed to the derivation hook and the
override directive, instead of a shared mutable property bag.
Dependency graph: context.py <- hooks.py, context.py <- cli.py (acyclic).
"""

from __future__ import annotations

import dataclasses
import uuid

from .store import PropertyStore


def _new_compilation_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclasses.dataclass(frozen=True, slots=True, kw_only=True)
class PageCompilation:
    """One rendering pass of a page: content HTML plus its page properties.

    Created by the host at the start of rendering and discarded (or its
    store persisted) afterwards.
    """

    compilation_id: str = dataclasses.field(default_factory=_new_compilation_id)
    store: PropertyStore = dataclasses.field(default_factory=PropertyStore)
    # Interface messages (UI strings) are rendered through the same pipeline
    # but never carry a page description.
    interface_message: bool = False
