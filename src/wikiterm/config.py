"""Local configuration for wikiterm."""

from __future__ import annotations

import os


DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 0
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "wikiterm/0.1 (+https://github.com/wikiterm/wikiterm)"
DEFAULT_TITLE_CLASS = "mw-page-title-main"
DEFAULT_LOG_LEVEL = "WARNING"

WIKITERM_FETCH_TIMEOUT_S = float(os.getenv("WIKITERM_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
WIKITERM_FETCH_MAX_RETRIES = int(os.getenv("WIKITERM_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
WIKITERM_FETCH_BACKOFF_S = float(os.getenv("WIKITERM_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
WIKITERM_USER_AGENT = os.getenv("WIKITERM_USER_AGENT", DEFAULT_USER_AGENT)
# Class attribute value that marks the element holding the page title.
WIKITERM_TITLE_CLASS = os.getenv("WIKITERM_TITLE_CLASS", DEFAULT_TITLE_CLASS)
WIKITERM_LOG_LEVEL = os.getenv("WIKITERM_LOG_LEVEL", DEFAULT_LOG_LEVEL)
