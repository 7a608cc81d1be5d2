"""Reserved marker sequences and the segment-to-AnnotatedText encoder.

Markers are ANSI SGR escapes, so encoded text can be handed straight to
``rich.text.Text.from_ansi`` for display.
"""

from __future__ import annotations

from typing import Final, Iterable

from wikiterm.schemas import Block, LinkSegment, Segment

LINK_MARKER: Final[str] = "\x1b[32m"
HEADING_MARKER: Final[str] = "\x1b[31m"
HIGHLIGHT_MARKER: Final[str] = "\x1b[7m"
RESET_MARKER: Final[str] = "\x1b[0m"
NEWLINE: Final[str] = "\n"


def encode_segment(segment: Segment) -> str:
    if isinstance(segment, LinkSegment):
        return LINK_MARKER + segment.text + RESET_MARKER
    return segment.text


def encode_segments(segments: Iterable[Segment]) -> str:
    """Concatenate segments, wrapping each link in link/reset markers."""
    return "".join(encode_segment(segment) for segment in segments)


def encode_block(block: Block) -> str:
    text = encode_segments(block.segments)
    if block.kind == "heading":
        return HEADING_MARKER + text + RESET_MARKER + NEWLINE
    return text + NEWLINE


def encode_blocks(blocks: Iterable[Block]) -> str:
    """Encode a document's blocks into one AnnotatedText string."""
    return "".join(encode_block(block) for block in blocks)
