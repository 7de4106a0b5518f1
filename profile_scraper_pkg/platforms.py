"""Platform identification from profile URLs.

Matching is done on the URL host only, never by fetching anything, so an
unsupported link is rejected before any browser work happens.
"""
from enum import Enum
from typing import List, Tuple
from urllib.parse import urlparse

from .errors import FailureKind, ScrapeFailed


class PlatformId(str, Enum):
    FIVERR = "fiverr"
    UPWORK = "upwork"
    LINKEDIN = "linkedin"
    FREELANCER = "freelancer"


# Checked in this order; first marker contained in the host wins.
DOMAIN_MARKERS: List[Tuple[PlatformId, str]] = [
    (PlatformId.FIVERR, "fiverr.com"),
    (PlatformId.UPWORK, "upwork.com"),
    (PlatformId.LINKEDIN, "linkedin.com"),
    (PlatformId.FREELANCER, "freelancer.com"),
]


def domain_for(platform: PlatformId) -> str:
    for candidate, marker in DOMAIN_MARKERS:
        if candidate is platform:
            return marker
    raise KeyError(platform)


def _host_of(url) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ScrapeFailed(FailureKind.INVALID_URL, "URL must be a non-empty string")
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname or ""
    except ValueError as exc:
        raise ScrapeFailed(FailureKind.INVALID_URL, str(exc)) from exc
    if parsed.scheme.lower() not in ("http", "https") or not host:
        raise ScrapeFailed(FailureKind.INVALID_URL, f"Not an absolute http(s) URL: {url}")
    return host.lower()


def identify(url: str) -> PlatformId:
    """Map a profile URL to its platform.

    Raises `ScrapeFailed(INVALID_URL)` for unparsable or relative URLs and
    `ScrapeFailed(UNSUPPORTED_PLATFORM)` when no domain marker matches.
    """
    host = _host_of(url)
    for platform, marker in DOMAIN_MARKERS:
        if marker in host:
            return platform
    raise ScrapeFailed(FailureKind.UNSUPPORTED_PLATFORM, f"Unsupported platform URL: {url}")


def parse_platform(name: str) -> PlatformId:
    """Resolve a platform name such as "Upwork" to its `PlatformId`."""
    try:
        return PlatformId((name or "").strip().lower())
    except ValueError as exc:
        allowed = ", ".join(p.value for p in PlatformId)
        raise ScrapeFailed(
            FailureKind.UNSUPPORTED_PLATFORM,
            f"Platform must be one of: {allowed}",
        ) from exc
