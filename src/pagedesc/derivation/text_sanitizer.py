# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Paragraph markup to plain-text candidate.

1. Strip every ``<...>`` construct
2. Decode character references (``&amp;``, ``&nbsp;``)
3. Drop control and zero-width characters
4. Collapse whitespace runs and trim

An empty result means the paragraph is rejected.
"""

from __future__ import annotations

import html as _html
import re

# "a < b" keeps its "<": a tag never starts with whitespace
_TAG_RE = re.compile(r"<(?!\s)[^>]*>")

# Zero-width chars, bidi overrides, C0/C1 controls (whitespace controls are left for collapsing)
_CONTROL_CHAR_RE = re.compile(
    r"[\u200B-\u200F\u202A-\u202E\u2060-\u2069\uFEFF"
    r"\u0000-\u0008\u000E-\u001F\u007F-\u0084\u0086-\u009F]"
)

_WHITESPACE_RE = re.compile(r"\s+")


def strip_tags(markup: str) -> str:
    return _TAG_RE.sub("", markup)


def sanitize_paragraph(markup: str) -> str:
    """Return the plain text of a paragraph region, or "" if nothing is left."""
    if not markup:
        return ""
    text = strip_tags(markup)
    text = _html.unescape(text)
    text = _CONTROL_CHAR_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_accepted(candidate: str) -> bool:
    return bool(candidate)
