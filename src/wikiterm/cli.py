"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys

from rich.console import Console
from rich.text import Text

from wikiterm.config import WIKITERM_FETCH_TIMEOUT_S, WIKITERM_LOG_LEVEL
from wikiterm.exceptions import WikitermError
from wikiterm.highlight import highlight_link
from wikiterm.ingestion import LoadOptions, load_page
from wikiterm.schemas import PageSession
from wikiterm.utils.logging_config import (
    LOG_LEVELS,
    configure_logging,
    get_logger,
    resolve_log_level,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wikiterm",
        description="Read a web page in the terminal and step through its links.",
        epilog="Keys: n next link, arrows/page keys/mouse scroll, q or esc quit.",
    )
    parser.add_argument("url", help="Page to read (e.g. https://en.wikipedia.org/wiki/Python)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=WIKITERM_FETCH_TIMEOUT_S,
        help="Fetch deadline in seconds (default: %(default)s)",
    )
    parser.add_argument("--user-agent", help="Override the User-Agent header")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error when the page cannot be fetched or parsed",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the page to stdout instead of opening the interactive view",
    )
    parser.add_argument(
        "--select",
        type=int,
        default=0,
        help="Link to highlight in --dump output (default: %(default)s)",
    )
    parser.add_argument("--width", type=int, help="Wrap width for --dump output")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=resolve_log_level(WIKITERM_LOG_LEVEL),
        help="Logging level (default: %(default)s)",
    )
    return parser


def dump_page(session: PageSession, *, select: int = 0, console: Console | None = None) -> None:
    """Write the title and highlighted page text to the console."""
    out = console or Console()
    if session.title:
        out.rule(Text.from_ansi(session.title))
    out.print(Text.from_ansi(highlight_link(session.annotated_text, select)))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    options = LoadOptions(
        timeout=args.timeout,
        user_agent=args.user_agent,
        strict=args.strict,
    )
    try:
        session = asyncio.run(load_page(args.url, options))
    except WikitermError as exc:
        print(f"wikiterm: error: {exc}", file=sys.stderr)
        return 1

    if args.dump:
        dump_page(session, select=args.select, console=Console(width=args.width))
        return 0

    from wikiterm.tui import WikitermApp

    try:
        WikitermApp(session).run()
    except Exception as exc:  # noqa: BLE001 - any startup failure ends the process
        logger.debug("Interactive session failed", exc_info=True)
        print(f"could not run program: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
