from enum import Enum


class FailureKind(str, Enum):
    """Closed taxonomy of scrape failures surfaced to callers."""

    INVALID_URL = "invalid_url"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    SESSION_ACQUISITION_FAILED = "session_acquisition_failed"
    NAVIGATION_FAILED = "navigation_failed"
    AUTH_REQUIRED = "auth_required"
    EXTRACTION_ERROR = "extraction_error"
    SANITIZATION_ERROR = "sanitization_error"


class ScrapeFailed(Exception):
    """Single failure surface for every stage of a scrape.

    `kind` tells callers which stage failed; `detail` carries a short,
    human-readable reason (usually the underlying error message).
    """

    def __init__(self, kind: FailureKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
