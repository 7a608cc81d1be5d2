"""Load pipeline: URL -> bytes -> parsed page -> terminal session data."""

from __future__ import annotations

from dataclasses import dataclass

from wikiterm.config import WIKITERM_TITLE_CLASS
from wikiterm.fetch import fetch_page
from wikiterm.html_parser import parse_html
from wikiterm.schemas import PageSession


@dataclass
class LoadOptions:
    """Options for loading a page.

    Attributes:
        timeout: Fetch deadline in seconds. ``None`` uses the configured default.
        user_agent: Override for the User-Agent header.
        title_class: Class value marking the page-title element.
        strict: Fail on fetch or parse errors instead of showing an empty page.
    """

    timeout: float | None = None
    user_agent: str | None = None
    title_class: str = WIKITERM_TITLE_CLASS
    strict: bool = False


async def load_page(url: str, options: LoadOptions | None = None) -> PageSession:
    """Fetch and parse ``url`` into the data the terminal session displays.

    Raises:
        FetchError: In strict mode, if the page could not be fetched.
        ParseError: In strict mode, if the markup was rejected.
    """
    opts = options or LoadOptions()
    body = await fetch_page(
        url,
        timeout=opts.timeout,
        user_agent=opts.user_agent,
        strict=opts.strict,
    )
    page = parse_html(body, title_class=opts.title_class, strict=opts.strict)
    return PageSession.from_page(url, page)
