"""HTTP utilities for fetching pages with a deadline and optional retries."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from wikiterm.config import (
    WIKITERM_FETCH_BACKOFF_S,
    WIKITERM_FETCH_MAX_RETRIES,
    WIKITERM_FETCH_TIMEOUT_S,
    WIKITERM_USER_AGENT,
)
from wikiterm.exceptions import FetchError, FetchTimeoutError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
    user_agent: str | None = None,
    max_retries: int | None = None,
    backoff: float | None = None,
) -> bytes:
    """Fetch raw bytes from a URL.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        timeout: Deadline in seconds for the whole fetch, retries included.
            Defaults to ``WIKITERM_FETCH_TIMEOUT_S``.
        user_agent: User-Agent header. Defaults to ``WIKITERM_USER_AGENT``.
        max_retries: Extra attempts after a retryable status. Defaults to
            ``WIKITERM_FETCH_MAX_RETRIES``.
        backoff: Base backoff in seconds, doubled on every retry.

    Returns:
        The response body.

    Raises:
        FetchTimeoutError: If the deadline expires, including a body that
            keeps arriving too slowly.
        FetchError: If the request fails or the final status is not a success.
    """
    deadline = WIKITERM_FETCH_TIMEOUT_S if timeout is None else timeout
    retries = WIKITERM_FETCH_MAX_RETRIES if max_retries is None else max_retries
    base_backoff = WIKITERM_FETCH_BACKOFF_S if backoff is None else backoff
    headers = {"User-Agent": user_agent or WIKITERM_USER_AGENT}
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> bytes:
        nonlocal last_exc

        for attempt in range(retries + 1):
            logger.debug("GET %s (attempt %d)", url, attempt + 1)
            try:
                response = await http_client.get(url, headers=headers, timeout=deadline)
            except httpx.TimeoutException as exc:
                raise FetchTimeoutError(
                    f"Timed out after {deadline:g}s fetching {url}"
                ) from exc
            except httpx.RequestError as exc:
                raise FetchError(f"Failed to fetch {url}: {exc}") from exc

            if response.status_code not in RETRY_STATUS_CODES:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    raise FetchError(
                        f"HTTP {response.status_code} from {url}"
                    ) from exc
                return response.content

            last_exc = FetchError(f"HTTP {response.status_code} from {url}")
            if attempt < retries:
                await asyncio.sleep(base_backoff * (2**attempt))

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    async def fetch_within_deadline(http_client: httpx.AsyncClient) -> bytes:
        # httpx timeouts bound each connect/read step; this bounds the whole fetch.
        try:
            return await asyncio.wait_for(do_fetch(http_client), timeout=deadline)
        except (asyncio.TimeoutError, TimeoutError) as exc:
            raise FetchTimeoutError(
                f"Timed out after {deadline:g}s fetching {url}"
            ) from exc

    if client is not None:
        return await fetch_within_deadline(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(deadline),
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await fetch_within_deadline(new_client)
