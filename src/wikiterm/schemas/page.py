"""Page-level models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from wikiterm.schemas.segments import Block, LinkSegment


class ParsedPage(BaseModel):
    """Readable content extracted from one HTML document.

    Attributes:
        title: Text of the first title-marker element, or empty.
        blocks: Headings and paragraphs in document order.
    """

    title: str = ""
    blocks: list[Block] = Field(default_factory=list)

    @property
    def links(self) -> list[LinkSegment]:
        """Every link in document order; index ``i`` is the i-th link marker."""
        return [link for block in self.blocks for link in block.links]

    @property
    def annotated_text(self) -> str:
        from wikiterm.markers import encode_blocks

        return encode_blocks(self.blocks)


class PageSession(BaseModel):
    """Everything the terminal session needs, built once before it starts."""

    url: str
    title: str = ""
    annotated_text: str = ""
    links: list[LinkSegment] = Field(default_factory=list)

    @classmethod
    def from_page(cls, url: str, page: ParsedPage) -> "PageSession":
        return cls(
            url=url,
            title=page.title,
            annotated_text=page.annotated_text,
            links=page.links,
        )

    @property
    def link_count(self) -> int:
        return len(self.links)
