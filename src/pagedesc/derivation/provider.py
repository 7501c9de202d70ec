# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Description providers: rendered HTML in, plain-text description out.

``SimpleDescriptionProvider`` runs the first-paragraph heuristic:
strip tables -> scan paragraphs -> sanitize -> first non-empty wins.
Hosts can plug in their own provider through ``DescriptionProvider``.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pagedesc.derivation.paragraphs import scan_paragraphs
from pagedesc.derivation.table_stripper import strip_tables
from pagedesc.derivation.text_sanitizer import is_accepted, sanitize_paragraph

logger = logging.getLogger(__name__)


@runtime_checkable
class DescriptionProvider(Protocol):
    """Derives a description from one page's rendered HTML."""

    def derive(self, html: str) -> str | None: ...


class SimpleDescriptionProvider:
    """First non-empty paragraph outside of any table."""

    def derive(self, html: str) -> str | None:
        if not html:
            return None

        stripped = strip_tables(html)
        scanned = 0
        for region in scan_paragraphs(stripped):
            scanned += 1
            candidate = sanitize_paragraph(region.markup)
            if is_accepted(candidate):
                logger.debug("Description derived from paragraph %d at offset %d", scanned, region.start)
                return candidate

        logger.debug("No description derived (%d paragraph(s) scanned)", scanned)
        return None


_default_provider = SimpleDescriptionProvider()


def derive_description(html: str) -> str | None:
    """Derive a description with the default provider. None when nothing qualifies."""
    return _default_provider.derive(html)
