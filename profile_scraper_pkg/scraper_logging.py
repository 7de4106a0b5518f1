import logging
import os
import time
from typing import List, Optional

from .config import DEBUG_DIR

logger = logging.getLogger(__name__)


def add_debug(debug_list: Optional[List[str]], tag: str) -> None:
    """Append a debug tag to the in-flight list, if the caller keeps one.

    Small, structured tags trace the executed steps and decisions without
    exposing scraped content. Every tag is also logged at DEBUG level.
    """
    logger.debug(tag)
    if debug_list is not None:
        debug_list.append(tag)


async def save_debug_files(page, prefix: str = "debug", directory: str = DEBUG_DIR) -> Optional[dict]:
    """Save a full-page screenshot and HTML content for diagnostics.

    Returns a map with file paths or None if saving fails. This is gated by
    the `debug` session option and should not be enabled in production.
    """
    try:
        ts = time.time_ns()
        screenshot_path = os.path.join(directory, f"{prefix}_{ts}.png")
        html_path = os.path.join(directory, f"{prefix}_{ts}.html")
        await page.screenshot(path=screenshot_path, full_page=True)
        content = await page.content()
        with open(html_path, "w", encoding="utf-8") as f:
            f.write(content)
        return {"screenshot": screenshot_path, "html": html_path}
    except Exception:
        logger.warning("Could not save debug files for %s", prefix, exc_info=True)
        return None
