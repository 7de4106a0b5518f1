import os
import random
import tempfile


COOKIES_FILE = os.environ.get("PROFILE_SCRAPER_COOKIES_PATH", "cookies.json")
SLOW_MO_MS = int(os.environ.get("SCRAPER_SLOW_MO_MS", "0"))
BLOCK_IMAGES = os.environ.get("SCRAPER_BLOCK_IMAGES", "true").lower() != "false"
HEADLESS = os.environ.get("SCRAPER_HEADLESS", "true").lower() not in ["0", "false", "no"]
NAVIGATION_TIMEOUT_MS = int(os.environ.get("SCRAPER_NAV_TIMEOUT_MS", "60000"))
SETTLE_DELAY_MS = int(os.environ.get("SCRAPER_SETTLE_MS", "5000"))
NETWORK_IDLE_MS = int(os.environ.get("SCRAPER_IDLE_MS", "500"))
DEBUG_DIR = os.environ.get("SCRAPER_DEBUG_DIR", tempfile.gettempdir())

# Downstream prompt budget for sanitized page text.
RAW_CONTENT_LIMIT = 4000
MAX_TAGS = 10
# Open requests tolerated when deciding the network is idle.
MAX_INFLIGHT_REQUESTS = 2

DEFAULT_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate, br",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}


def user_agents():
    """Return a curated pool of desktop Chrome user agents.

    Rotating across a small, realistic set of user agents reduces the chance
    of fingerprinting correlating all requests to a single static UA.
    """
    return [
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ]


def random_user_agent():
    """Pick a random user agent from the pool.

    Callers can seed randomness externally if they need reproducibility
    in tests, or pass an explicit user agent in `SessionOptions`.
    """
    return random.choice(user_agents())
