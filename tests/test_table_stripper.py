# Copyright (C) 2025-2026 Retio AI
# SPDX-License-Identifier: AGPL-3.0-only

"""Tests for pagedesc.derivation.table_stripper: balanced table removal."""

from __future__ import annotations

from pagedesc.derivation import Token, TokenKind
from pagedesc.derivation.table_stripper import strip_tables, table_spans, tokenize_tables


class TestTokenize:
    def test_text_only(self):
        assert list(tokenize_tables("<p>hi</p>")) == [Token(TokenKind.TEXT, 0, 9)]

    def test_empty_input(self):
        assert list(tokenize_tables("")) == []

    def test_open_close_and_text(self):
        html = "a<table>b</table>c"
        kinds = [t.kind for t in tokenize_tables(html)]
        assert kinds == [
            TokenKind.TEXT,
            TokenKind.OPEN_TAG,
            TokenKind.TEXT,
            TokenKind.CLOSE_TAG,
            TokenKind.TEXT,
        ]

    def test_tokens_cover_input(self):
        html = 'x<table class="a">y<table>z</table></table>w'
        tokens = list(tokenize_tables(html))
        assert "".join(html[t.start : t.end] for t in tokens) == html

    def test_custom_element_is_text(self):
        tokens = list(tokenize_tables("<table-of-contents></table-of-contents>"))
        assert all(t.kind is TokenKind.TEXT for t in tokens)

    def test_case_insensitive(self):
        kinds = [t.kind for t in tokenize_tables("<TABLE></Table >")]
        assert kinds == [TokenKind.OPEN_TAG, TokenKind.CLOSE_TAG]


class TestTableSpans:
    def test_nested_yields_single_span(self):
        html = "<table><table></table></table>"
        assert table_spans(tokenize_tables(html)) == [(0, len(html))]

    def test_siblings(self):
        html = "<table></table>x<table></table>"
        assert table_spans(tokenize_tables(html)) == [(0, 15), (16, 31)]

    def test_stray_close_ignored(self):
        assert table_spans(tokenize_tables("</table>")) == []


class TestStripTables:
    def test_simple_table(self):
        assert strip_tables("<table><tr><td>x</td></tr></table><p>y</p>") == "<p>y</p>"

    def test_nested_tables_removed_as_unit(self):
        assert strip_tables("<table><table></table></table><p>Hello</p>") == "<p>Hello</p>"

    def test_deep_nesting(self):
        html = "<table>" * 500 + "</table>" * 500 + "<p>after</p>"
        assert strip_tables(html) == "<p>after</p>"

    def test_attributes_and_case(self):
        html = '<TABLE class="infobox" style="x"><TR><TD>box</TD></TR></TABLE>rest'
        assert strip_tables(html) == "rest"

    def test_multiline_table(self):
        html = "<table>\n<tr>\n<td>a</td>\n</tr>\n</table>\n<p>b</p>"
        assert strip_tables(html) == "\n<p>b</p>"

    def test_text_between_tables_kept(self):
        assert strip_tables("a<table></table>b<table></table>c") == "abc"

    def test_no_tables_returns_input(self):
        html = "<div><p>unchanged</p></div>"
        assert strip_tables(html) == html

    def test_empty_input(self):
        assert strip_tables("") == ""

    def test_unmatched_open_left_in_place(self):
        html = "<table><p>x</p>"
        assert strip_tables(html) == html

    def test_unmatched_close_left_in_place(self):
        html = "<p>x</p></table>"
        assert strip_tables(html) == html

    def test_balanced_table_inside_unmatched_open_removed(self):
        assert strip_tables("<table>a<table>b</table>c") == "<table>ac"

    def test_extra_close_after_balanced_pair(self):
        assert strip_tables("<table>a</table></table>b") == "</table>b"

    def test_other_markup_untouched(self):
        html = "<div class='x'><tbody><tr><td>cell</td></tr></tbody></div>"
        assert strip_tables(html) == html
