import json
import logging
import os
import re
from typing import List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from playwright.async_api import BrowserContext

from .config import COOKIES_FILE
from .platforms import PlatformId, domain_for
from .selectors import AUTH_WALL_SELECTORS, AUTH_WALL_URL_MARKERS

logger = logging.getLogger(__name__)


def load_cookies(platform: PlatformId, path: Optional[str] = COOKIES_FILE) -> List[dict]:
    """Load and sanitize an exported cookies JSON for one platform.

    - Keeps only cookies whose domain belongs to the platform
    - Removes whitespace from values
    - Normalizes domain to start with a dot
    - Normalizes `sameSite` values
    - Filters out entries missing name/value

    A missing or unreadable file yields an empty list; cookies are optional.
    """
    if not path or not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            cookies = json.load(f)
    except (OSError, ValueError):
        logger.warning("Ignoring unreadable cookies file %s", path, exc_info=True)
        return []
    if not isinstance(cookies, list):
        return []

    marker = domain_for(platform)
    clean: List[dict] = []
    for raw in cookies:
        if not isinstance(raw, dict):
            continue
        c = dict(raw)
        if "value" in c and isinstance(c["value"], str):
            c["value"] = re.sub(r"\s+", "", c["value"])
        domain = c.get("domain", "")
        if domain and not domain.startswith("."):
            domain = "." + domain
        if marker not in domain:
            continue
        c["domain"] = domain

        if "sameSite" in c:
            ss = str(c["sameSite"]).lower()
            if ss in ["no_restriction", "none"]:
                c["sameSite"] = "None"
            elif ss in ["lax", "strict"]:
                c["sameSite"] = ss.capitalize()
            else:
                c["sameSite"] = "Lax"

        for k in ["hostOnly", "session", "storeId", "id"]:
            c.pop(k, None)

        if not c.get("name") or not c.get("value"):
            continue

        clean.append(c)
    return clean


async def apply_cookies(context: BrowserContext, cookies: List[dict]) -> bool:
    """Apply cookies to the context; returns True when they were accepted."""
    if not cookies:
        return False
    try:
        await context.add_cookies(cookies)
        return True
    except Exception:
        logger.warning("Browser rejected %d cookies", len(cookies), exc_info=True)
        return False


def detect_auth_wall(html: str, final_url: str = "") -> Optional[str]:
    """Detect login/authwall pages served in place of a profile.

    Returns a short reason tag, or None when the page looks like content.
    Relies on stable attributes and URL paths rather than dynamic classes.
    """
    path = urlparse(final_url or "").path.lower()
    for marker in AUTH_WALL_URL_MARKERS:
        if path == marker or path.startswith(marker + "/"):
            return f"URL:{marker}"

    soup = BeautifulSoup(html or "", "html.parser")
    for sel in AUTH_WALL_SELECTORS:
        if soup.select_one(sel) is not None:
            return f"Authwall:{sel}"
    return None
