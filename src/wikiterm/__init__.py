"""wikiterm: read web pages in the terminal and step through their links."""

from wikiterm.exceptions import (
    FetchError,
    FetchTimeoutError,
    ParseError,
    WikitermError,
)
from wikiterm.highlight import highlight_link
from wikiterm.html_parser import parse_html, walk_document
from wikiterm.ingestion import LoadOptions, load_page
from wikiterm.links import LinkSpan, count_links, find_links
from wikiterm.schemas import Block, LinkSegment, PageSession, ParsedPage, TextSegment

__all__ = [
    "Block",
    "FetchError",
    "FetchTimeoutError",
    "LinkSegment",
    "LinkSpan",
    "LoadOptions",
    "PageSession",
    "ParseError",
    "ParsedPage",
    "TextSegment",
    "WikitermError",
    "count_links",
    "find_links",
    "highlight_link",
    "load_page",
    "parse_html",
    "walk_document",
]
