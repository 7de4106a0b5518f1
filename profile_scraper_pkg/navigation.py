import asyncio
import logging
from typing import NamedTuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config import MAX_INFLIGHT_REQUESTS, NAVIGATION_TIMEOUT_MS, NETWORK_IDLE_MS, SETTLE_DELAY_MS
from .errors import FailureKind, ScrapeFailed

logger = logging.getLogger(__name__)


class RenderedPage(NamedTuple):
    html: str
    final_url: str
    status: int


class InflightRequests:
    """Count a page's open requests from its request lifecycle events."""

    def __init__(self, page, max_inflight: int = MAX_INFLIGHT_REQUESTS):
        self.page = page
        self.max_inflight = max_inflight
        self.count = 0
        self._busy = asyncio.Event()
        self._quiet = asyncio.Event()

    def attach(self):
        self.page.on("request", self._started)
        self.page.on("requestfinished", self._ended)
        self.page.on("requestfailed", self._ended)

    def detach(self):
        self.page.remove_listener("request", self._started)
        self.page.remove_listener("requestfinished", self._ended)
        self.page.remove_listener("requestfailed", self._ended)

    def _started(self, request):
        self.count += 1
        if self.count > self.max_inflight:
            self._busy.set()

    def _ended(self, request):
        self.count = max(0, self.count - 1)
        if self.count <= self.max_inflight:
            self._quiet.set()

    async def wait_until_idle(self, timeout_ms: int, idle_ms: int = NETWORK_IDLE_MS) -> bool:
        """Wait until at most `max_inflight` requests stay open for `idle_ms`.

        Returns False when `timeout_ms` runs out first.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout_ms / 1000
        window = idle_ms / 1000
        while True:
            remaining = deadline - loop.time()
            if self.count > self.max_inflight:
                if remaining <= 0:
                    return False
                self._quiet.clear()
                try:
                    await asyncio.wait_for(self._quiet.wait(), remaining)
                except asyncio.TimeoutError:
                    return False
                continue
            if remaining < window:
                return False
            self._busy.clear()
            try:
                await asyncio.wait_for(self._busy.wait(), window)
            except asyncio.TimeoutError:
                return True


async def load_page(
    session,
    url: str,
    timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    settle_ms: int = SETTLE_DELAY_MS,
    idle_ms: int = NETWORK_IDLE_MS,
) -> RenderedPage:
    """Navigate the session's page and return the rendered DOM.

    Waits for the `load` event, then until no more than two requests stay in
    flight for `idle_ms`, all within `timeout_ms`. A fixed settle delay
    follows so late client-side rendering can finish. No retries: a timeout
    is terminal for this request.
    """
    page = session.page
    loop = asyncio.get_running_loop()
    started = loop.time()
    inflight = InflightRequests(page)
    inflight.attach()
    logger.info("Navigating to %s", url)
    try:
        try:
            response = await page.goto(url, timeout=timeout_ms, wait_until="load")
        except PlaywrightTimeoutError as e:
            raise ScrapeFailed(FailureKind.NAVIGATION_FAILED, f"Timed out after {timeout_ms} ms: {e}") from e
        except PlaywrightError as e:
            raise ScrapeFailed(FailureKind.NAVIGATION_FAILED, str(e)) from e

        if response is None:
            raise ScrapeFailed(FailureKind.NAVIGATION_FAILED, "No response received")
        if response.status >= 400:
            raise ScrapeFailed(FailureKind.NAVIGATION_FAILED, f"HTTP {response.status}")

        remaining_ms = timeout_ms - (loop.time() - started) * 1000
        if not await inflight.wait_until_idle(remaining_ms, idle_ms):
            raise ScrapeFailed(
                FailureKind.NAVIGATION_FAILED,
                f"Timed out after {timeout_ms} ms waiting for network idle ({inflight.count} requests open)",
            )
        logger.debug("Network idle with %d requests open", inflight.count)
    finally:
        inflight.detach()

    if settle_ms > 0:
        await page.wait_for_timeout(settle_ms)

    try:
        html = await page.content()
    except PlaywrightError as e:
        raise ScrapeFailed(FailureKind.NAVIGATION_FAILED, f"Could not read page content: {e}") from e
    logger.info("Page loaded, content length: %d", len(html))
    return RenderedPage(html=html, final_url=page.url, status=response.status)
