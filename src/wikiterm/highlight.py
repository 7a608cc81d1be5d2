"""Mark the currently selected link in encoded text."""

from __future__ import annotations

from wikiterm.markers import HIGHLIGHT_MARKER, LINK_MARKER


def highlight_link(text: str, index: int) -> str:
    """Return ``text`` with the ``index``-th link highlighted.

    The highlight marker is inserted right after that link's marker, so it
    sits immediately before the link's visible text. Every other character is
    copied unchanged. A negative or out-of-range ``index`` matches no link and
    the text comes back as is.
    """
    parts: list[str] = []
    link_count = 0
    position = 0
    marker_length = len(LINK_MARKER)

    while position < len(text):
        if text.startswith(LINK_MARKER, position):
            parts.append(LINK_MARKER)
            if link_count == index:
                parts.append(HIGHLIGHT_MARKER)
            link_count += 1
            position += marker_length
            continue
        parts.append(text[position])
        position += 1

    return "".join(parts)
