# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Balanced table removal via a stack scan over table tag tokens.

Infoboxes and navboxes are usually rendered as tables near the top of a
page, so they are removed before paragraph scanning. Nested tables go as
one unit.

Pipeline:
  1. tokenize_tables(): OPEN_TAG / CLOSE_TAG / TEXT token stream
  2. table_spans(): push on open, pop on close, keep outermost matched spans
  3. strip_tables(): splice the spans out of the source

Malformed markup never raises. An unmatched close tag is ignored and an
unmatched open tag stays in the output, but balanced tables inside it
are still removed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from pagedesc.derivation import Token, TokenKind

logger = logging.getLogger(__name__)

# <table>, <TABLE class="infobox">, <table/>; not <table-of-contents>
_TABLE_TAG_RE = re.compile(
    r"<(?P<close>/)?table(?(close)\s*>|(?=[\s/>])[^>]*>)",
    re.IGNORECASE,
)


def tokenize_tables(html: str) -> Iterator[Token]:
    """Yield table tag tokens and the text between them, in document order."""
    pos = 0
    for m in _TABLE_TAG_RE.finditer(html):
        if m.start() > pos:
            yield Token(TokenKind.TEXT, pos, m.start())
        kind = TokenKind.CLOSE_TAG if m.group("close") else TokenKind.OPEN_TAG
        yield Token(kind, m.start(), m.end())
        pos = m.end()
    if pos < len(html):
        yield Token(TokenKind.TEXT, pos, len(html))


def table_spans(tokens: Iterator[Token]) -> list[tuple[int, int]]:
    """Return outermost balanced ``(start, end)`` table spans, sorted by start."""
    stack: list[int] = []
    spans: list[tuple[int, int]] = []
    for token in tokens:
        if token.kind is TokenKind.OPEN_TAG:
            stack.append(token.start)
        elif token.kind is TokenKind.CLOSE_TAG:
            if not stack:
                continue  # stray </table>
            start = stack.pop()
            # Spans recorded so far that begin inside this one are nested in it
            while spans and spans[-1][0] >= start:
                spans.pop()
            spans.append((start, token.end))
    return spans


def strip_tables(html: str) -> str:
    """Remove every balanced table region from *html*. Other markup is untouched."""
    if not html:
        return html
    spans = table_spans(tokenize_tables(html))
    if not spans:
        return html

    parts: list[str] = []
    pos = 0
    for start, end in spans:
        parts.append(html[pos:start])
        pos = end
    parts.append(html[pos:])

    logger.debug("Stripped %d table region(s)", len(spans))
    return "".join(parts)
