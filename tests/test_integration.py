"""Integration tests for wikiterm with real network calls.

These tests make actual HTTP requests and are marked with
@pytest.mark.integration so they can be skipped in CI environments.

Run integration tests only:
    pytest -m integration
"""

from __future__ import annotations

import asyncio

import pytest

from wikiterm import LoadOptions, count_links, load_page


class TestWikipediaPage:
    """Fetch and parse a live encyclopedia article."""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_article_has_title_text_and_links(self, network_timeout: float) -> None:
        session = await asyncio.wait_for(
            load_page(
                "https://en.wikipedia.org/wiki/Terminal_emulator",
                LoadOptions(timeout=network_timeout, strict=True),
            ),
            timeout=network_timeout,
        )

        assert session.title == "Terminal emulator"
        assert session.annotated_text, "Content should not be empty"
        assert count_links(session.annotated_text) == session.link_count
        assert session.link_count > 0
