import re

from bs4 import BeautifulSoup

from .config import RAW_CONTENT_LIMIT
from .errors import FailureKind, ScrapeFailed
from .selectors import CONTENT_REGIONS, NOISE_ELEMENTS

_WHITESPACE = re.compile(r"\s+")
_UNSAFE_CHARS = re.compile(r"[^\w\s.,!?@#$%&*()\-+=:;/\\]", re.ASCII)


def clean_text(text: str, limit: int = RAW_CONTENT_LIMIT) -> str:
    """Collapse whitespace, drop characters outside the safe set, truncate.

    The result is forwarded inside a prompt to a text-generation service,
    so it is bounded to `limit` characters.
    """
    if not isinstance(text, str):
        raise ScrapeFailed(FailureKind.SANITIZATION_ERROR, f"Expected text, got {type(text).__name__}")
    text = _WHITESPACE.sub(" ", text)
    text = _UNSAFE_CHARS.sub("", text)
    return text.strip()[:limit]


def sanitize(html: str, limit: int = RAW_CONTENT_LIMIT) -> str:
    """Reduce a rendered page to bounded, printable main-content text.

    Non-content elements are removed first. The first content selector that
    matches anything wins and the text of all its matches is joined; an empty
    result falls back to the page body.
    """
    if not isinstance(html, str):
        raise ScrapeFailed(FailureKind.SANITIZATION_ERROR, f"Expected HTML text, got {type(html).__name__}")
    try:
        soup = BeautifulSoup(html, "html.parser")
        for name in NOISE_ELEMENTS:
            for el in soup.find_all(name):
                el.decompose()

        content = ""
        for selector in CONTENT_REGIONS:
            regions = soup.select(selector)
            if regions:
                content = " ".join(region.get_text(" ") for region in regions)
                break

        if not content.strip():
            body = soup.body or soup
            content = body.get_text(" ")
    except Exception as e:
        raise ScrapeFailed(FailureKind.SANITIZATION_ERROR, str(e)) from e

    return clean_text(content, limit)
