import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, Route
from playwright.async_api import async_playwright

from .auth import apply_cookies, load_cookies
from .config import DEFAULT_HEADERS, SLOW_MO_MS, random_user_agent
from .errors import FailureKind, ScrapeFailed
from .models import SessionOptions
from .platforms import PlatformId

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-infobars",
    "--window-size=1920,1080",
    "--disable-dev-shm-usage",
    "--disable-features=IsolateOrigins,site-per-process",
    "--disable-accelerated-2d-canvas",
    "--disable-gpu",
    "--hide-scrollbars",
    "--mute-audio",
    "--no-first-run",
    "--disable-extensions",
]


@dataclass
class BrowserSession:
    """One browser process and one tab, owned by a single scrape call."""
    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page


async def launch_browser(playwright: Playwright, headless: bool = True, proxy: str | None = None) -> Browser:
    """Launch a Chromium browser with defensive flags for scraping.

    Headless and proxy are configurable per request. We avoid GPU and
    extension features and disable automation signals where possible.
    """
    return await playwright.chromium.launch(
        headless=headless,
        proxy={"server": proxy} if proxy else None,
        slow_mo=SLOW_MO_MS if SLOW_MO_MS > 0 else None,
        args=LAUNCH_ARGS,
    )


async def new_context(
    browser: Browser,
    locale: str = "en-US",
    timezone_id: str = "UTC",
    user_agent: str | None = None,
) -> BrowserContext:
    """Create a browser context with realistic headers and locale settings.

    We set a desktop viewport and language headers to reduce anomaly signals,
    then rely on `apply_stealth()` to patch common automation fingerprints.
    """
    return await browser.new_context(
        user_agent=user_agent or random_user_agent(),
        viewport={"width": 1920, "height": 1080},
        locale=locale,
        timezone_id=timezone_id,
        has_touch=False,
        is_mobile=False,
        device_scale_factor=1,
        extra_http_headers=DEFAULT_HEADERS,
    )


async def apply_stealth(context: BrowserContext) -> None:
    """Inject lightweight anti-detection scripts to patch common fingerprints.

    Best effort only: webdriver, plugins, languages and a minimal
    `window.chrome`. Sites with active bot detection will still notice.
    """
    await context.add_init_script(
        """
        Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
        Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });
        Object.defineProperty(navigator, 'languages', { get: () => ['en-US', 'en'] });
        window.chrome = { runtime: {} };

        const originalQuery = window.navigator.permissions.query;
        window.navigator.permissions.query = (parameters) => (
          parameters.name === 'notifications'
            ? Promise.resolve({ state: Notification.permission })
            : originalQuery(parameters)
        );
        """
    )


async def _block_images(route: Route) -> None:
    await route.abort()


async def _close_quietly(*resources) -> None:
    """Close page/context/browser and stop Playwright, innermost first.

    Every resource gets its own attempt so one failing close never leaves
    the browser process behind.
    """
    for res in resources:
        if res is None:
            continue
        try:
            # The Playwright driver is stopped; everything else is closed.
            closer = getattr(res, "stop", None) or res.close
            await closer()
        except Exception:
            logger.warning("Failed to close %s", type(res).__name__, exc_info=True)


class BrowserSessionManager:
    """Acquires and releases one isolated browser session per scrape.

    Sessions are never pooled; each `acquire` starts its own Playwright
    driver and Chromium process, and `release` tears both down.
    """

    async def acquire(self, options: SessionOptions, platform: Optional[PlatformId] = None) -> BrowserSession:
        pw = browser = context = page = None
        try:
            pw = await async_playwright().start()
            browser = await launch_browser(pw, headless=options.headless, proxy=options.proxy)
            context = await new_context(
                browser,
                locale=options.locale,
                timezone_id=options.timezone_id,
                user_agent=options.user_agent,
            )
            await apply_stealth(context)

            if platform is not None:
                cookies = load_cookies(platform, options.cookies_path)
                if await apply_cookies(context, cookies):
                    logger.info("Loaded %d %s cookies", len(cookies), platform.value)

            page = await context.new_page()
            if options.block_images and not options.debug:
                await page.route("**/*.{png,jpg,jpeg,gif,svg,ico,webp}", _block_images)
        except BaseException as e:
            await _close_quietly(page, context, browser, pw)
            if isinstance(e, Exception):
                raise ScrapeFailed(FailureKind.SESSION_ACQUISITION_FAILED, str(e)) from e
            raise

        logger.debug("Browser session acquired")
        return BrowserSession(playwright=pw, browser=browser, context=context, page=page)

    async def release(self, session: BrowserSession) -> None:
        await _close_quietly(session.page, session.context, session.browser, session.playwright)
        logger.debug("Browser session released")

    @asynccontextmanager
    async def session(
        self, options: SessionOptions, platform: Optional[PlatformId] = None
    ) -> AsyncIterator[BrowserSession]:
        """Scoped acquisition: the session is released on every exit path,
        including exceptions raised by the caller and task cancellation.
        """
        sess = await self.acquire(options, platform)
        try:
            yield sess
        finally:
            await self.release(sess)
