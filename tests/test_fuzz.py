# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Property-based fuzz tests using Hypothesis.

Derivation never raises on arbitrary input, tables are always fully
removed when balanced, and the store keeps the first write.
"""

from __future__ import annotations

try:
    from hypothesis import given, settings
    from hypothesis import strategies as st
except ImportError:
    import pytest

    pytest.skip("hypothesis not installed", allow_module_level=True)

from pagedesc import PageCompilation, derive_description
from pagedesc.config import DescriptionConfig
from pagedesc.derivation.table_stripper import strip_tables
from pagedesc.derivation.text_sanitizer import sanitize_paragraph
from pagedesc.hooks import DescriptionHooks, override_description
from pagedesc.store import get_description

# ---------------------------------------------------------------------------
# Module-level strategies
# ---------------------------------------------------------------------------

GENERAL_TEXT = st.text(min_size=0, max_size=2000)

HTML_FRAGMENTS = st.lists(
    st.sampled_from(["<table>", "</table>", "<TABLE class='x'>", "<p>", "</p>", "<b>", "</b>", "<br/>", " ", "\n"])
    | st.text(alphabet="abc &;<>/", min_size=0, max_size=10),
    max_size=60,
).map("".join)

TEXT_NO_MARKUP = st.text(
    alphabet=st.characters(whitelist_categories=("L", "N", "P", "Zs"), blacklist_characters="<>&"),
    max_size=50,
)


def _balanced_table(depth: int, inner: str) -> str:
    return "<table>" * depth + inner + "</table>" * depth


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestNeverRaises:
    @given(GENERAL_TEXT)
    def test_derive_arbitrary_text(self, html):
        result = derive_description(html)
        assert result is None or (result and result == result.strip())

    @given(HTML_FRAGMENTS)
    @settings(max_examples=300)
    def test_derive_html_like(self, html):
        derive_description(html)

    @given(GENERAL_TEXT)
    def test_sanitize_output_trimmed(self, markup):
        out = sanitize_paragraph(markup)
        assert out == out.strip()
        assert "  " not in out


class TestTableStripping:
    @given(HTML_FRAGMENTS)
    def test_never_grows(self, html):
        assert len(strip_tables(html)) <= len(html)

    @given(HTML_FRAGMENTS)
    def test_idempotent(self, html):
        once = strip_tables(html)
        assert strip_tables(once) == once

    @given(st.integers(min_value=1, max_value=50), TEXT_NO_MARKUP, TEXT_NO_MARKUP)
    def test_balanced_removed_completely(self, depth, inner, tail):
        assert strip_tables(_balanced_table(depth, inner) + tail) == tail

    @given(st.integers(min_value=1, max_value=20), TEXT_NO_MARKUP)
    def test_table_paragraph_never_chosen(self, depth, text):
        html = _balanced_table(depth, "<p>inside</p>") + f"<p>{text}</p>"
        assert derive_description(html) == (" ".join(text.split()) or None)


class TestFirstWins:
    @given(TEXT_NO_MARKUP, TEXT_NO_MARKUP)
    def test_override_first_takes_precedence(self, override, body):
        compilation = PageCompilation()
        override_description(compilation, override)
        DescriptionHooks(DescriptionConfig()).on_content_rendered(compilation, f"<p>{body}</p>")
        assert get_description(compilation.store) == override

    @given(HTML_FRAGMENTS)
    def test_pipeline_twice_same_result(self, html):
        hooks = DescriptionHooks(DescriptionConfig())
        once, twice = PageCompilation(), PageCompilation()
        hooks.on_content_rendered(once, html)
        hooks.on_content_rendered(twice, html)
        hooks.on_content_rendered(twice, html)
        assert once.store.as_dict() == twice.store.as_dict()
