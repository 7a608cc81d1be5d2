"""Custom exceptions for wikiterm."""


class WikitermError(Exception):
    """Base exception for wikiterm operations."""


class FetchError(WikitermError):
    """Error during page fetching."""


class FetchTimeoutError(FetchError):
    """Page fetch did not complete before its deadline."""


class ParseError(WikitermError):
    """Error during HTML parsing."""
