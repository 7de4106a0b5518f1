"""Scraper package providing modular components for the profile scraper.

Small, well-defined modules cover platform detection, the browser session
lifecycle, page loading, per-platform extraction and content sanitization.
`ProfileScraper` in `orchestrator` composes them into a single entry point.
"""
from .errors import FailureKind, ScrapeFailed
from .models import ScrapedProfile
from .platforms import PlatformId, identify
from .orchestrator import ProfileScraper, scrape_profile
from .text_profile import build_profile_from_text

__all__ = [
    "FailureKind",
    "PlatformId",
    "ProfileScraper",
    "ScrapeFailed",
    "ScrapedProfile",
    "build_profile_from_text",
    "identify",
    "scrape_profile",
]
