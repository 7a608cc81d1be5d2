"""Fetch the raw bytes of a web page."""

from __future__ import annotations

import logging

from wikiterm.exceptions import FetchError
from wikiterm.http_utils import fetch_with_retries

logger = logging.getLogger(__name__)


async def fetch_page(
    url: str,
    *,
    timeout: float | None = None,
    user_agent: str | None = None,
    strict: bool = False,
) -> bytes:
    """Fetch a page body.

    Args:
        url: Page URL.
        timeout: Deadline in seconds; ``None`` uses the configured default.
        user_agent: Override for the User-Agent header.
        strict: Propagate fetch failures instead of returning an empty body.

    Returns:
        The page body, or ``b""`` when the fetch failed and ``strict`` is off.

    Raises:
        FetchError: Only when ``strict`` is set. ``FetchTimeoutError`` when the
            deadline expired.
    """
    try:
        return await fetch_with_retries(url, timeout=timeout, user_agent=user_agent)
    except FetchError as exc:
        if strict:
            raise
        logger.error("Error fetching URL: %s", exc)
        return b""
