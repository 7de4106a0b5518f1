from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .config import BLOCK_IMAGES, COOKIES_FILE, HEADLESS, NAVIGATION_TIMEOUT_MS, SETTLE_DELAY_MS
from .platforms import PlatformId


class ScrapeRequest(BaseModel):
    """Incoming payload for a URL scrape.

    The URL is checked against the supported platforms by the orchestrator
    before any browser is launched.
    """
    url: str
    debug: bool = False
    headless: Optional[bool] = None
    max_wait: int = NAVIGATION_TIMEOUT_MS
    settle_ms: int = SETTLE_DELAY_MS
    proxy: Optional[str] = None


class TextProfileRequest(BaseModel):
    """Incoming payload for the offline, text-only profile path."""
    platform: str
    profile_content: str

    @field_validator("profile_content")
    @classmethod
    def _long_enough(cls, value: str) -> str:
        if len(value.strip()) < 50:
            raise ValueError("Profile content must be at least 50 characters long")
        return value


class SessionOptions(BaseModel, frozen=True):
    """Per-request knobs for launching a browser session."""
    headless: bool = HEADLESS
    proxy: Optional[str] = None
    user_agent: Optional[str] = None
    locale: str = "en-US"
    timezone_id: str = "UTC"
    block_images: bool = BLOCK_IMAGES
    cookies_path: Optional[str] = COOKIES_FILE
    debug: bool = False


class ScrapedProfile(BaseModel, frozen=True):
    """Normalized profile record handed to the downstream analysis stage.

    Every text field holds either extracted page content or a declared
    placeholder; list fields are deduplicated and capped by the strategy.
    """
    platform: PlatformId
    title: str = ""
    description: str = ""
    tags: Tuple[str, ...] = Field(default_factory=tuple)
    pricing: str = ""
    skills: Tuple[str, ...] = Field(default_factory=tuple)
    experience: str = ""
    rating: str = ""
    reviews: str = ""
    raw_content: str = ""
