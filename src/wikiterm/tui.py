"""Terminal session: a header, the scrollable page body and a scroll footer."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.reactive import reactive
from textual.widgets import Rule, Static

from wikiterm.highlight import highlight_link
from wikiterm.schemas import PageSession

THEME = """
Screen {
    layout: vertical;
}

.bar {
    height: auto;
    width: 100%;
}

.bar-box {
    width: auto;
    border: round $accent;
    padding: 0 1;
}

.bar-fill {
    width: 1fr;
    margin: 1 0;
}

#body {
    height: 1fr;
    padding: 0 1;
}
"""


def format_scroll_percent(percent: float) -> str:
    """Right-aligned whole percentage, e.g. ``" 42%"``."""
    return f"{percent:3.0f}%"


class TitleBar(Horizontal):
    """Page title in a rounded box followed by a fill rule."""

    def __init__(self, title: str, **kwargs) -> None:
        super().__init__(classes="bar", **kwargs)
        self._title = title

    def compose(self) -> ComposeResult:
        yield Static(Text.from_ansi(self._title), classes="bar-box", id="title")
        yield Rule(classes="bar-fill")


class InfoBar(Horizontal):
    """Fill rule followed by the scroll percentage in a rounded box."""

    def __init__(self, **kwargs) -> None:
        super().__init__(classes="bar", **kwargs)

    def compose(self) -> ComposeResult:
        yield Rule(classes="bar-fill")
        yield Static(format_scroll_percent(0), classes="bar-box", id="scroll-info")

    def set_percent(self, percent: float) -> None:
        self.query_one("#scroll-info", Static).update(format_scroll_percent(percent))


class PageBody(VerticalScroll):
    """Scrollable page text. Arrow, page and mouse-wheel scrolling come from the container."""

    @property
    def scroll_percent(self) -> float:
        if self.max_scroll_y <= 0:
            return 100.0
        return min(100.0, self.scroll_y / self.max_scroll_y * 100)


class WikitermApp(App):
    """Read one page and step through its links."""

    CSS = THEME

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("escape", "quit", "Quit", show=False, priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("n", "next_link", "Next link", show=True),
    ]

    TITLE = "wikiterm"

    # Never decreased, wrapped or clamped; past the last link nothing is highlighted.
    selected: reactive[int] = reactive(0, init=False)

    def __init__(self, session: PageSession):
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield TitleBar(self.session.title, id="header")
        with PageBody(id="body"):
            yield Static(id="content")
        yield InfoBar(id="footer")

    def on_mount(self) -> None:
        self.sub_title = self.session.url
        self.refresh_content()
        self.watch(self.query_one(PageBody), "scroll_y", self._update_scroll_info)

    def on_resize(self) -> None:
        self.call_after_refresh(self._update_scroll_info)

    def highlighted_text(self) -> str:
        return highlight_link(self.session.annotated_text, self.selected)

    def refresh_content(self) -> None:
        """Re-highlight the page; textual reflows it to the current width."""
        content = self.query_one("#content", Static)
        content.update(Text.from_ansi(self.highlighted_text()))
        self.call_after_refresh(self._update_scroll_info)

    def watch_selected(self) -> None:
        self.refresh_content()

    def action_next_link(self) -> None:
        self.selected += 1

    def _update_scroll_info(self) -> None:
        body = self.query_one(PageBody)
        self.query_one(InfoBar).set_percent(body.scroll_percent)
