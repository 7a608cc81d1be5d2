"""Decide what a single HTML node contributes to the output stream."""

from __future__ import annotations

from wikiterm.markers import encode_segment
from wikiterm.schemas import LinkSegment, Segment, TextSegment

try:
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def is_anchor(node: PageElement | None) -> bool:
    return isinstance(node, Tag) and node.name == "a"


def is_text_node(node: PageElement | None) -> bool:
    """True for prose text; comments, doctypes and CDATA are not text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def anchor_text(anchor: Tag) -> str:
    """Return the first non-empty text found among the anchor's descendants."""
    for descendant in anchor.descendants:
        if is_text_node(descendant) and descendant.strip():
            return str(descendant)
    return ""


def has_anchor_ancestor(node: PageElement, boundary: PageElement | None = None) -> bool:
    """Check whether ``node`` sits inside an anchor.

    The search stops at ``boundary`` (inclusive), so an aggregation rooted
    below an anchor does not see it.
    """
    parent = node.parent
    while parent is not None:
        if is_anchor(parent):
            return True
        if parent is boundary:
            return False
        parent = parent.parent
    return False


def classify_node(node: PageElement, *, boundary: PageElement | None = None) -> Segment | None:
    """Return the segment contributed by ``node`` alone, ignoring descendants.

    Rules, first match wins:

    1. anchor element -> link segment carrying the anchor's text
    2. inside an anchor -> nothing (already emitted by rule 1)
    3. text node -> its literal text
    4. anything else -> nothing
    """
    if is_anchor(node):
        href = node.get("href")
        if isinstance(href, list):
            href = " ".join(href)
        return LinkSegment(text=anchor_text(node), href=href)

    if has_anchor_ancestor(node, boundary):
        return None

    if is_text_node(node):
        return TextSegment(text=str(node))

    return None


def node_text(node: PageElement, *, boundary: PageElement | None = None) -> str:
    """Encoded contribution of a single node, empty when it contributes nothing."""
    segment = classify_node(node, boundary=boundary)
    if segment is None:
        return ""
    return encode_segment(segment)
