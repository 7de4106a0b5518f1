from typing import Any, Dict, List, Optional

from .errors import FailureKind, ScrapeFailed
from .models import ScrapedProfile


def build_response(profile: ScrapedProfile, url: Optional[str], debug_msgs: List[str]) -> Dict[str, Any]:
    """Compose the public response for a successful scrape.

    `profile` is serialized with JSON-friendly values (lists, plain strings)
    and `debug` joins the step trail collected during the scrape.
    """
    return {
        "url": url,
        "found": True,
        "platform": profile.platform.value,
        "profile": profile.model_dump(mode="json"),
        "debug": " | ".join(debug_msgs),
    }


def build_error(url: Optional[str], error: ScrapeFailed, debug_msgs: List[str]) -> Dict[str, Any]:
    """Build a consistent error response.

    `profile` is None: a failed scrape never carries substitute data.
    """
    return {
        "url": url,
        "found": False,
        "kind": error.kind.value,
        "error": error.detail or str(error),
        "profile": None,
        "debug": " | ".join(debug_msgs),
    }


HTTP_STATUS = {
    FailureKind.INVALID_URL: 400,
    FailureKind.UNSUPPORTED_PLATFORM: 400,
    FailureKind.AUTH_REQUIRED: 403,
    FailureKind.SESSION_ACQUISITION_FAILED: 503,
    FailureKind.NAVIGATION_FAILED: 502,
    FailureKind.EXTRACTION_ERROR: 500,
    FailureKind.SANITIZATION_ERROR: 500,
}


def status_for(error: ScrapeFailed) -> int:
    return HTTP_STATUS.get(error.kind, 500)
