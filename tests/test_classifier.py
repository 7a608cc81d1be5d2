"""Tests for the node classifier."""

from __future__ import annotations

from bs4 import BeautifulSoup, Comment

from wikiterm.classifier import anchor_text, classify_node, has_anchor_ancestor, node_text
from wikiterm.markers import LINK_MARKER, RESET_MARKER
from wikiterm.schemas import LinkSegment, TextSegment


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestClassifyNode:
    """Tests for classify_node rules."""

    def test_anchor_becomes_link_segment(self) -> None:
        anchor = _soup('<a href="/wiki/X">world</a>').a
        segment = classify_node(anchor)
        assert segment == LinkSegment(text="world", href="/wiki/X")

    def test_anchor_text_child_is_suppressed(self) -> None:
        anchor = _soup('<a href="x">world</a>').a
        assert classify_node(anchor.contents[0]) is None

    def test_plain_text_node_is_kept_literally(self) -> None:
        paragraph = _soup("<p>  Hello\n there </p>").p
        segment = classify_node(paragraph.contents[0])
        assert segment == TextSegment(text="  Hello\n there ")

    def test_other_elements_contribute_nothing(self) -> None:
        soup = _soup("<div><p>text</p></div>")
        assert classify_node(soup.div) is None
        assert classify_node(soup.p) is None

    def test_comments_are_not_text(self) -> None:
        paragraph = _soup("<p><!-- hidden -->shown</p>").p
        comment = paragraph.contents[0]
        assert isinstance(comment, Comment)
        assert classify_node(comment) is None

    def test_nested_anchor_content_is_suppressed(self) -> None:
        anchor = _soup('<a href="x"><b>bold</b></a>').a
        assert classify_node(anchor.b.contents[0]) is None

    def test_anchor_without_href(self) -> None:
        anchor = _soup("<a>name</a>").a
        assert classify_node(anchor) == LinkSegment(text="name", href=None)


class TestAnchorText:
    """Tests for anchor visible-text extraction."""

    def test_uses_first_text_child(self) -> None:
        anchor = _soup('<a href="x">first<i>second</i></a>').a
        assert anchor_text(anchor) == "first"

    def test_finds_text_inside_inline_elements(self) -> None:
        anchor = _soup('<a href="x"><b>bold text</b></a>').a
        assert anchor_text(anchor) == "bold text"

    def test_skips_whitespace_only_text(self) -> None:
        anchor = _soup('<a href="x">  <span>label</span></a>').a
        assert anchor_text(anchor) == "label"

    def test_empty_anchor(self) -> None:
        anchor = _soup('<a href="x"></a>').a
        assert anchor_text(anchor) == ""


class TestHasAnchorAncestor:
    """Tests for the anchor-ancestor check."""

    def test_stops_at_boundary(self) -> None:
        soup = _soup('<a href="x"><p>inside</p></a>')
        text = soup.p.contents[0]
        assert has_anchor_ancestor(text) is True
        assert has_anchor_ancestor(text, boundary=soup.p) is False

    def test_boundary_that_is_an_anchor_still_suppresses(self) -> None:
        anchor = _soup('<a href="x">word</a>').a
        assert has_anchor_ancestor(anchor.contents[0], boundary=anchor) is True


class TestNodeText:
    """Tests for the encoded single-node contribution."""

    def test_anchor_is_wrapped_in_markers(self) -> None:
        anchor = _soup('<a href="x">world</a>').a
        assert node_text(anchor) == LINK_MARKER + "world" + RESET_MARKER

    def test_non_contributing_node_is_empty(self) -> None:
        assert node_text(_soup("<div></div>").div) == ""
