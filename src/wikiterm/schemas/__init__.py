"""Shared schemas for wikiterm."""

from wikiterm.schemas.page import PageSession, ParsedPage
from wikiterm.schemas.segments import Block, LinkSegment, Segment, TextSegment

__all__ = [
    "Block",
    "LinkSegment",
    "PageSession",
    "ParsedPage",
    "Segment",
    "TextSegment",
]
