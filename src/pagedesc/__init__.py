# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Page description derivation for page metadata.

Derives a short plain-text description from rendered page HTML:
- tables (infoboxes, navboxes) are removed first
- the first paragraph with non-empty text becomes the description
- the value is written once per page compilation; explicit overrides
  and automatic derivation are reconciled by call order (first wins)
"""

from __future__ import annotations

from pagedesc.context import PageCompilation
from pagedesc.derivation.provider import (
    DescriptionProvider,
    SimpleDescriptionProvider,
    derive_description,
)
from pagedesc.store import (
    ABSENT,
    DESCRIPTION_KEY,
    OG_DESCRIPTION_KEY,
    PropertyStore,
    SetResult,
)

__all__ = [
    "ABSENT",
    "DESCRIPTION_KEY",
    "OG_DESCRIPTION_KEY",
    "DescriptionProvider",
    "PageCompilation",
    "PropertyStore",
    "SetResult",
    "SimpleDescriptionProvider",
    "derive_description",
]
