"""Per-platform extraction strategies over already-rendered HTML.

Each strategy is a pure function of (html, url): no network, no browser,
no retries. A field is read from an ordered list of candidates evaluated
lazily; the first candidate that yields non-empty text wins. When all
candidates miss, the strategy's declared placeholder is used instead.
"""
import logging
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from bs4 import BeautifulSoup

from . import selectors
from .config import MAX_TAGS
from .models import ScrapedProfile
from .platforms import PlatformId

logger = logging.getLogger(__name__)

Candidate = Callable[[BeautifulSoup], str]

SCALAR_FIELDS = ("title", "description", "pricing", "experience", "rating", "reviews")


def normalize_text(text: str | None) -> str:
    return " ".join((text or "").split())


def css_text(selector: str) -> Candidate:
    """Candidate reading the text of the first element matching `selector`."""
    def _read(soup: BeautifulSoup) -> str:
        el = soup.select_one(selector)
        return normalize_text(el.get_text(" ")) if el is not None else ""
    return _read


def css_attr(selector: str, attr: str) -> Candidate:
    """Candidate reading an attribute (e.g. meta `content`) instead of text."""
    def _read(soup: BeautifulSoup) -> str:
        el = soup.select_one(selector)
        if el is None:
            return ""
        value = el.get(attr)
        if isinstance(value, list):
            value = " ".join(value)
        return normalize_text(value)
    return _read


def first_match(soup: BeautifulSoup, candidates: Iterable[Candidate]) -> str:
    """Return the first non-empty candidate result, or "" if all miss."""
    for candidate in candidates:
        text = candidate(soup)
        if text:
            return text
    return ""


def collect_texts(soup: BeautifulSoup, css: Sequence[str], cap: int) -> Tuple[str, ...]:
    """Collect texts of all elements matching any selector in DOM order.

    Empty strings are dropped and duplicates removed by exact match, keeping
    the first appearance, then the result is truncated to `cap` entries.
    """
    if not css or cap <= 0:
        return ()
    seen: List[str] = []
    for el in soup.select(", ".join(css)):
        text = normalize_text(el.get_text(" "))
        if text and text not in seen:
            seen.append(text)
            if len(seen) >= cap:
                break
    return tuple(seen)


class ExtractionStrategy:
    """Selector-driven extraction shared by all platforms.

    Subclasses declare `platform`, `selectors`, `placeholders` and
    `skill_cap`; they may add extra candidates per field by overriding
    `candidates()`.
    """
    platform: PlatformId
    selectors: selectors.PlatformSelectors
    placeholders: Dict[str, str] = {}
    skill_cap: int = 10

    def candidates(self, field: str) -> List[Candidate]:
        return [css_text(sel) for sel in getattr(self.selectors, field)]

    def fields(self, html: str, url: str) -> Dict[str, object]:
        """Extract every profile field except `raw_content`."""
        soup = BeautifulSoup(html, "html.parser")
        values: Dict[str, object] = {}
        missing = []
        for field in SCALAR_FIELDS:
            text = first_match(soup, self.candidates(field))
            if not text:
                missing.append(field)
                text = self.placeholders.get(field, "")
            values[field] = text
        values["tags"] = collect_texts(soup, self.selectors.tags, MAX_TAGS)
        values["skills"] = collect_texts(soup, self.selectors.skills, self.skill_cap)
        if missing:
            logger.debug("%s: no match for %s on %s", self.platform.value, ", ".join(missing), url)
        return values

    def extract(self, html: str, url: str) -> ScrapedProfile:
        """Build a profile without `raw_content`; the sanitizer supplies it."""
        return ScrapedProfile(platform=self.platform, **self.fields(html, url))


class FiverrStrategy(ExtractionStrategy):
    platform = PlatformId.FIVERR
    selectors = selectors.FIVERR
    skill_cap = 5
    placeholders = {
        "title": "Fiverr Gig",
        "description": "No description available",
        "pricing": "Pricing not listed",
        "rating": "No rating available",
        "reviews": "No reviews available",
    }


class UpworkStrategy(ExtractionStrategy):
    platform = PlatformId.UPWORK
    selectors = selectors.UPWORK
    placeholders = {
        "title": "Upwork Freelancer",
        "description": "No description available",
        "pricing": "Rate not listed",
        "experience": "No experience listed",
        "rating": "No rating available",
        "reviews": "No reviews available",
    }


class LinkedInStrategy(ExtractionStrategy):
    # No pricing, rating or reviews on LinkedIn: those stay empty.
    platform = PlatformId.LINKEDIN
    selectors = selectors.LINKEDIN
    placeholders = {
        "title": "LinkedIn Profile",
        "description": "No description available",
        "experience": "No experience listed",
    }

    def candidates(self, field: str) -> List[Candidate]:
        found = super().candidates(field)
        # Public profiles served to guests still carry Open Graph metadata.
        if field == "title":
            found.append(css_attr("meta[property='og:title']", "content"))
        elif field == "description":
            found.append(css_attr("meta[property='og:description']", "content"))
        return found


class FreelancerStrategy(ExtractionStrategy):
    platform = PlatformId.FREELANCER
    selectors = selectors.FREELANCER
    placeholders = {
        "title": "Freelancer Profile",
        "description": "No description available",
        "pricing": "Varies by project",
        "rating": "No rating available",
        "reviews": "No reviews available",
    }


STRATEGIES: Dict[PlatformId, ExtractionStrategy] = {
    PlatformId.FIVERR: FiverrStrategy(),
    PlatformId.UPWORK: UpworkStrategy(),
    PlatformId.LINKEDIN: LinkedInStrategy(),
    PlatformId.FREELANCER: FreelancerStrategy(),
}

_missing = set(PlatformId) - set(STRATEGIES)
if _missing:
    raise RuntimeError(f"No extraction strategy for: {sorted(p.value for p in _missing)}")


def strategy_for(platform: PlatformId) -> ExtractionStrategy:
    return STRATEGIES[platform]
