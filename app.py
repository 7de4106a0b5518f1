import logging
import os

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from profile_scraper_pkg.config import HEADLESS
from profile_scraper_pkg.errors import ScrapeFailed
from profile_scraper_pkg.models import ScrapeRequest, SessionOptions, TextProfileRequest
from profile_scraper_pkg.orchestrator import ProfileScraper
from profile_scraper_pkg.response import build_error, build_response, status_for
from profile_scraper_pkg.text_profile import build_profile_from_text

logger = logging.getLogger(__name__)

app = FastAPI(title="Profile Scraper")


def build_scraper(data: ScrapeRequest) -> ProfileScraper:
    """Create a scraper configured from the request's session knobs."""
    options = SessionOptions(
        headless=data.headless if data.headless is not None else HEADLESS,
        proxy=data.proxy,
        debug=data.debug,
    )
    return ProfileScraper(options=options, timeout_ms=data.max_wait, settle_ms=data.settle_ms)


@app.post("/scrape/profile")
async def scrape_profile(data: ScrapeRequest):
    debug_msg: list[str] = []
    try:
        profile = await build_scraper(data).scrape_profile(data.url, debug=debug_msg)
    except ScrapeFailed as e:
        logger.warning("Scrape of %s failed: %s", data.url, e)
        return JSONResponse(status_code=status_for(e), content=build_error(data.url, e, debug_msg))
    return build_response(profile, data.url, debug_msg)


@app.post("/profile/from-text")
def profile_from_text(data: TextProfileRequest):
    try:
        profile = build_profile_from_text(data.platform, data.profile_content)
    except ScrapeFailed as e:
        return JSONResponse(status_code=status_for(e), content=build_error(None, e, []))
    return build_response(profile, None, [])


@app.get("/health")
def health(): return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.environ.get("HOST", "0.0.0.0"), port=int(os.environ.get("PORT", "8000")))
