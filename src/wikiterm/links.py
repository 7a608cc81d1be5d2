"""Locate links inside encoded AnnotatedText.

The index is not stored anywhere: the i-th occurrence of the link marker,
scanning left to right, is link ``i``. This holds for any text derived from
AnnotatedText by transforms that keep marker sequences intact.
"""

from __future__ import annotations

from dataclasses import dataclass

from wikiterm.markers import LINK_MARKER, RESET_MARKER


@dataclass(frozen=True)
class LinkSpan:
    """Position of one link inside encoded text.

    Attributes:
        index: Zero-based ordinal in scan order.
        start: Offset of the link marker.
        text_start: Offset of the first visible character.
        text: Visible text up to the next reset marker.
    """

    index: int
    start: int
    text_start: int
    text: str


def find_links(text: str) -> list[LinkSpan]:
    spans: list[LinkSpan] = []
    position = text.find(LINK_MARKER)
    while position != -1:
        text_start = position + len(LINK_MARKER)
        end = text.find(RESET_MARKER, text_start)
        visible = text[text_start:] if end == -1 else text[text_start:end]
        spans.append(
            LinkSpan(index=len(spans), start=position, text_start=text_start, text=visible)
        )
        position = text.find(LINK_MARKER, text_start)
    return spans


def count_links(text: str) -> int:
    return text.count(LINK_MARKER)
