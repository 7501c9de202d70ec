# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""In-memory page response metadata: collected meta tags, rendered as HTML."""

from __future__ import annotations


def _escape_attr(value: str) -> str:
    """Escape a string for use in an HTML attribute."""
    return value.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;").replace(">", "&gt;")


class MetaTagCollector:
    """MetadataSink that keeps ``(name, content)`` pairs in insertion order."""

    def __init__(self) -> None:
        self.meta_tags: list[tuple[str, str]] = []

    def publish(self, name: str, value: str) -> None:
        self.meta_tags.append((name, value))

    def has_meta(self, name: str) -> bool:
        return any(tag_name == name for tag_name, _ in self.meta_tags)

    def render(self) -> str:
        """One ``<meta>`` element per line; ``og:*`` names use ``property=``."""
        lines = []
        for name, content in self.meta_tags:
            attr = "property" if name.startswith("og:") else "name"
            lines.append(f'<meta {attr}="{_escape_attr(name)}" content="{_escape_attr(content)}">')
        return "\n".join(lines)
