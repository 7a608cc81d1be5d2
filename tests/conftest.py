"""Test setup for wikiterm."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def network_timeout() -> float:
    """Default timeout for network operations in seconds."""
    return 60.0


@pytest.fixture
def wiki_html() -> str:
    """A trimmed-down encyclopedia article."""
    return """
    <html>
      <head><title>Example - Wiki</title></head>
      <body>
        <div class="mw-body">
          <h1><span class="mw-page-title-main">Example</span></h1>
          <p>An <a href="/wiki/Example">example</a> is a
             <a href="/wiki/Representative">representative</a> case.</p>
          <h2 id="History">History</h2>
          <p>First seen in <a href="/wiki/1900">1900</a>.</p>
          <ul><li>Dropped list item</li></ul>
        </div>
      </body>
    </html>
    """


@pytest.fixture(autouse=True)
def reset_wikiterm_logger() -> Iterator[None]:
    """Undo configure_logging so caplog keeps seeing package records."""
    logger = logging.getLogger("wikiterm")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
