"""Walk parsed HTML into headings, paragraphs, links and a page title."""

from __future__ import annotations

import logging
from typing import Iterator

from wikiterm.classifier import classify_node
from wikiterm.config import WIKITERM_TITLE_CLASS
from wikiterm.exceptions import ParseError
from wikiterm.markers import encode_segments
from wikiterm.schemas import Block, ParsedPage, Segment

try:
    from bs4 import BeautifulSoup
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_TAG = "h2"
_PARAGRAPH_TAG = "p"


def parse_html(
    markup: str | bytes,
    *,
    title_class: str = WIKITERM_TITLE_CLASS,
    strict: bool = False,
) -> ParsedPage:
    """Parse HTML and extract its readable content.

    Args:
        markup: Raw document, as text or undecoded bytes.
        title_class: Class value marking the page-title element.
        strict: Raise instead of falling back to an empty document when the
            parser rejects the markup.

    Returns:
        The extracted page.

    Raises:
        ParseError: If ``strict`` is set and the markup is rejected.
    """
    try:
        soup = BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as exc:
        if strict:
            raise ParseError(f"Could not parse document: {exc}") from exc
        logger.error("Error parsing document: %s", exc)
        soup = BeautifulSoup("", "lxml")

    page = walk_document(soup, title_class=title_class)
    logger.debug(
        "Parsed %d blocks and %d links (title=%r)",
        len(page.blocks),
        len(page.links),
        page.title,
    )
    return page


def walk_document(root: PageElement, *, title_class: str = WIKITERM_TITLE_CLASS) -> ParsedPage:
    """Single pre-order pass over ``root`` and all of its descendants.

    Only ``<h2>`` and ``<p>`` elements are surfaced; text outside them is
    dropped. The first element whose class list contains ``title_class``
    supplies the title.
    """
    title: str | None = None
    blocks: list[Block] = []

    for node in _iter_preorder(root):
        if not isinstance(node, Tag):
            continue

        if title is None and _has_class(node, title_class):
            title = get_text(node)

        if node.name == _HEADING_TAG:
            blocks.append(Block(kind="heading", segments=collect_segments(node)))
        elif node.name == _PARAGRAPH_TAG:
            blocks.append(Block(kind="paragraph", segments=collect_segments(node)))

    return ParsedPage(title=title or "", blocks=blocks)


def collect_segments(node: PageElement) -> list[Segment]:
    """Classify ``node`` and every descendant, in document order."""
    segments: list[Segment] = []
    for current in _iter_preorder(node):
        segment = classify_node(current, boundary=node)
        if segment is not None:
            segments.append(segment)
    return segments


def get_text(node: PageElement) -> str:
    """Encoded text of ``node`` and its descendants."""
    return encode_segments(collect_segments(node))


def _iter_preorder(root: PageElement) -> Iterator[PageElement]:
    yield root
    if isinstance(root, Tag):
        yield from root.descendants


def _has_class(tag: Tag, class_name: str) -> bool:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return class_name in classes
