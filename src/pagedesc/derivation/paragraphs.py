# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Lazy first-paragraph scanning.

Yields ``<p>...</p>`` regions in document order. Matching is
non-greedy, so each region ends at the nearest ``</p>``. Callers stop
consuming once a usable paragraph is found; to start over, rescan the
full input.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from pagedesc.derivation import Region

# <p> or <p class="...">; not <pre>, <param>, <picture>
_PARAGRAPH_RE = re.compile(r"<p(?:\s[^>]*)?>.*?</p\s*>", re.IGNORECASE | re.DOTALL)


def scan_paragraphs(html: str) -> Iterator[Region]:
    """Yield one Region per paragraph element in *html*."""
    for m in _PARAGRAPH_RE.finditer(html):
        yield Region(source=html, start=m.start(), end=m.end())
