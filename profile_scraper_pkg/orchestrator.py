"""Scrape orchestration: identify, acquire, load, extract, sanitize, release.

`ProfileScraper` is the only component that talks to the browser session
manager. Each call owns its own session, so concurrent calls share no
mutable state and need no locks.
"""
import logging
from enum import Enum
from typing import List, Optional

from .auth import detect_auth_wall
from .browser import BrowserSessionManager
from .config import NAVIGATION_TIMEOUT_MS, SETTLE_DELAY_MS
from .errors import FailureKind, ScrapeFailed
from .extraction import strategy_for
from .models import ScrapedProfile, SessionOptions
from .navigation import load_page
from .platforms import identify
from .sanitizer import sanitize
from .scraper_logging import add_debug, save_debug_files

logger = logging.getLogger(__name__)


class ScrapeState(str, Enum):
    IDLE = "idle"
    IDENTIFYING = "identifying"
    SESSION_ACQUIRED = "session_acquired"
    PAGE_LOADED = "page_loaded"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


class ProfileScraper:
    """Single entry point for URL scrapes.

    `sessions` and `loader` are injectable so callers (and tests) can supply
    their own session manager or page loader.
    """

    def __init__(
        self,
        sessions: Optional[BrowserSessionManager] = None,
        options: Optional[SessionOptions] = None,
        loader=load_page,
        timeout_ms: int = NAVIGATION_TIMEOUT_MS,
        settle_ms: int = SETTLE_DELAY_MS,
    ):
        self.sessions = sessions or BrowserSessionManager()
        self.options = options or SessionOptions()
        self.loader = loader
        self.timeout_ms = timeout_ms
        self.settle_ms = settle_ms

    async def scrape_profile(self, url: str, debug: Optional[List[str]] = None) -> ScrapedProfile:
        """Scrape one profile URL into a normalized `ScrapedProfile`.

        Raises `ScrapeFailed` for every failure; the browser session is
        released on all paths and no substitute data is ever returned.
        """
        state = ScrapeState.IDLE

        def transition(new_state: ScrapeState) -> None:
            nonlocal state
            state = new_state
            add_debug(debug, f"State:{new_state.value}")

        try:
            transition(ScrapeState.IDENTIFYING)
            platform = identify(url)
            add_debug(debug, f"Platform:{platform.value}")
            logger.info("Scraping %s profile: %s", platform.value, url)

            async with self.sessions.session(self.options, platform) as session:
                transition(ScrapeState.SESSION_ACQUIRED)
                page = await self.loader(session, url, timeout_ms=self.timeout_ms, settle_ms=self.settle_ms)
                transition(ScrapeState.PAGE_LOADED)

                if self.options.debug:
                    files = await save_debug_files(session.page, f"landing_{platform.value}")
                    if files:
                        add_debug(debug, f"DebugFiles:{files['html']}")

                wall = detect_auth_wall(page.html, page.final_url)
                if wall:
                    add_debug(debug, wall)
                    raise ScrapeFailed(FailureKind.AUTH_REQUIRED, f"{platform.value} requires login ({wall})")

                transition(ScrapeState.EXTRACTING)
                try:
                    fields = strategy_for(platform).fields(page.html, page.final_url or url)
                except Exception as e:
                    raise ScrapeFailed(FailureKind.EXTRACTION_ERROR, str(e)) from e
                raw_content = sanitize(page.html)

            profile = ScrapedProfile(platform=platform, raw_content=raw_content, **fields)
            transition(ScrapeState.DONE)
            logger.info("Scraped %s profile: %s", platform.value, profile.title)
            return profile
        except ScrapeFailed as e:
            logger.error("Scrape failed in state %s: %s", state.value, e)
            transition(ScrapeState.FAILED)
            raise
        except Exception as e:
            kind = _UNEXPECTED_FAILURES.get(state, FailureKind.EXTRACTION_ERROR)
            logger.exception("Unexpected error in state %s", state.value)
            transition(ScrapeState.FAILED)
            raise ScrapeFailed(kind, str(e)) from e


# Maps the state an unexpected exception escaped from to its failure kind.
_UNEXPECTED_FAILURES = {
    ScrapeState.IDENTIFYING: FailureKind.INVALID_URL,
    ScrapeState.SESSION_ACQUIRED: FailureKind.NAVIGATION_FAILED,
    ScrapeState.PAGE_LOADED: FailureKind.EXTRACTION_ERROR,
    ScrapeState.EXTRACTING: FailureKind.EXTRACTION_ERROR,
}


async def scrape_profile(url: str, options: Optional[SessionOptions] = None) -> ScrapedProfile:
    """Convenience wrapper using a default `ProfileScraper`."""
    return await ProfileScraper(options=options).scrape_profile(url)
