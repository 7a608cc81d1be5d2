"""Typed segments produced by the document walker."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class TextSegment(BaseModel):
    """Literal prose taken from a text node."""

    kind: Literal["text"] = "text"
    text: str


class LinkSegment(BaseModel):
    """A hyperlink's visible text and its target."""

    kind: Literal["link"] = "link"
    text: str
    href: str | None = None


Segment = Union[TextSegment, LinkSegment]


class Block(BaseModel):
    """A heading or paragraph with its inline segments in document order."""

    kind: Literal["heading", "paragraph"]
    segments: list[Segment] = Field(default_factory=list)

    @property
    def links(self) -> list[LinkSegment]:
        return [segment for segment in self.segments if isinstance(segment, LinkSegment)]
