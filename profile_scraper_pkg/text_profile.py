"""Offline profile building from pasted text, no browser involved."""
import re
from typing import Dict, Tuple

from .models import ScrapedProfile
from .platforms import parse_platform
from .sanitizer import clean_text

MAX_TEXT_TAGS = 5
MAX_TEXT_SKILLS = 5

# Tag -> word-prefix markers; "developer" and "development" both hit "develop".
TAG_VOCABULARY: Dict[str, Tuple[str, ...]] = {
    "web": ("web",),
    "design": ("design",),
    "development": ("develop",),
    "seo": ("seo",),
    "marketing": ("marketing",),
    "graphic": ("graphic",),
    "video": ("video",),
    "writing": ("writing", "writer", "copywrit"),
    "translation": ("translat",),
}

SKILL_VOCABULARY: Dict[str, Tuple[str, ...]] = {
    "JavaScript": ("javascript",),
    "React": ("react",),
    "Node.js": ("node",),
    "Python": ("python",),
    "HTML": ("html",),
    "CSS": ("css",),
    "PHP": ("php",),
    "WordPress": ("wordpress",),
}

_PRICE = re.compile(r"\$(\d+)")


def _match_vocabulary(text: str, vocabulary: Dict[str, Tuple[str, ...]], cap: int) -> Tuple[str, ...]:
    lowered = text.lower()
    found = [
        name
        for name, markers in vocabulary.items()
        if any(re.search(r"\b" + re.escape(m), lowered) for m in markers)
    ]
    return tuple(found[:cap])


def extract_title(text: str) -> str:
    first = text.split("\n")[0].strip()
    return first[:100] or "Profile Title"


def extract_description(text: str) -> str:
    lines = [line.strip() for line in text.split("\n")[1:3]]
    return " ".join(line for line in lines if line)[:200] or "Profile Description"


def extract_pricing(text: str) -> str:
    m = _PRICE.search(text)
    return f"${m.group(1)}" if m else "Not specified"


def build_profile_from_text(platform: str, text: str) -> ScrapedProfile:
    """Build a profile from raw text using simple heuristics.

    First line becomes the title, the next two lines the description; tags
    and skills come from fixed keyword vocabularies and pricing from the
    first dollar amount. Fields with no counterpart in plain text stay empty.
    """
    platform_id = parse_platform(platform)
    text = text or ""
    return ScrapedProfile(
        platform=platform_id,
        title=extract_title(text),
        description=extract_description(text),
        tags=_match_vocabulary(text, TAG_VOCABULARY, MAX_TEXT_TAGS),
        pricing=extract_pricing(text),
        skills=_match_vocabulary(text, SKILL_VOCABULARY, MAX_TEXT_SKILLS),
        raw_content=clean_text(text),
    )
