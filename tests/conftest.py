"""Shared fakes: no test launches a real browser or touches the network."""

from __future__ import annotations

import pytest

from profile_scraper_pkg.browser import BrowserSessionManager
from profile_scraper_pkg.errors import FailureKind, ScrapeFailed
from profile_scraper_pkg.models import SessionOptions


FIVERR_GIG_HTML = """
<html>
  <head><title>Logo gig</title><script>var tracking = 1;</script></head>
  <body>
    <header><nav>Fiverr Pro Explore Sign in</nav></header>
    <main>
      <h1 data-testid="gig-title">Professional Logo Design</h1>
      <div data-testid="gig-description">
        I will design a   modern, minimalist logo
        for your brand.
      </div>
      <div class="tags-container">
        <a class="tag">logo design</a>
        <a class="tag">branding</a>
        <a class="tag">logo design</a>
      </div>
      <span class="price">US$45</span>
      <span class="rating-score">4.9</span>
      <span class="review-count">(1k+)</span>
    </main>
    <footer>Terms Privacy</footer>
  </body>
</html>
"""


class FakeResponse:
    def __init__(self, status: int = 200) -> None:
        self.status = status


class FakePage:
    """Minimal stand-in for a Playwright page."""

    def __init__(
        self,
        html: str = "<html><body></body></html>",
        final_url: str = "",
        status: int | None = 200,
        goto_error: Exception | None = None,
        open_requests: int = 0,
    ) -> None:
        self.html = html
        self.url = final_url
        self.status = status
        self.goto_error = goto_error
        self.open_requests = open_requests
        self.listeners: dict[str, list] = {}
        self.goto_calls: list[dict] = []
        self.waits: list[int] = []
        self.routes: list[str] = []
        self.closed = False

    async def goto(self, url: str, timeout: int = 0, wait_until: str = "") -> FakeResponse | None:
        self.goto_calls.append({"url": url, "timeout": timeout, "wait_until": wait_until})
        if self.goto_error is not None:
            raise self.goto_error
        for i in range(self.open_requests):
            self.emit("request", f"{url}#poll{i}")
        if not self.url:
            self.url = url
        return FakeResponse(self.status) if self.status is not None else None

    def on(self, event: str, handler) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler) -> None:
        self.listeners[event].remove(handler)

    def emit(self, event: str, request: str) -> None:
        for handler in list(self.listeners.get(event, [])):
            handler(request)

    async def wait_for_timeout(self, ms: int) -> None:
        self.waits.append(ms)

    async def content(self) -> str:
        return self.html

    async def screenshot(self, path: str, full_page: bool = False) -> None:
        with open(path, "wb") as f:
            f.write(b"png")

    async def route(self, pattern: str, handler) -> None:
        self.routes.append(pattern)

    async def close(self) -> None:
        self.closed = True


class FakeSession:
    def __init__(self, page: FakePage) -> None:
        self.page = page


class CountingSessionManager(BrowserSessionManager):
    """Session manager that hands out fake pages and counts acquire/release."""

    def __init__(self, pages: list[FakePage] | None = None, fail_acquire: bool = False) -> None:
        self.pages = list(pages or [])
        self.fail_acquire = fail_acquire
        self.acquired = 0
        self.released = 0
        self.platforms: list = []

    async def acquire(self, options: SessionOptions, platform=None) -> FakeSession:
        if self.fail_acquire:
            raise ScrapeFailed(FailureKind.SESSION_ACQUISITION_FAILED, "chromium missing")
        self.acquired += 1
        self.platforms.append(platform)
        page = self.pages.pop(0) if self.pages else FakePage()
        return FakeSession(page)

    async def release(self, session: FakeSession) -> None:
        self.released += 1
        await session.page.close()


@pytest.fixture
def fiverr_html() -> str:
    return FIVERR_GIG_HTML
