#!/usr/bin/env python3
"""
Profile Scraper - CLI Standalone Version

Scrape a Fiverr, Upwork, LinkedIn or Freelancer profile URL into a normalized
JSON record, or build the same record offline from pasted profile text.

Usage:
    python scraper.py <PROFILE_URL> [OPTIONS]
    python scraper.py --text-file profile.txt --platform upwork

Example:
    python scraper.py https://www.fiverr.com/username/some-gig --debug
    python scraper.py https://www.upwork.com/freelancers/~01abc --headless false
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from profile_scraper_pkg.config import COOKIES_FILE, NAVIGATION_TIMEOUT_MS, SETTLE_DELAY_MS
from profile_scraper_pkg.errors import ScrapeFailed
from profile_scraper_pkg.models import SessionOptions
from profile_scraper_pkg.orchestrator import ProfileScraper
from profile_scraper_pkg.response import build_error, build_response
from profile_scraper_pkg.text_profile import build_profile_from_text

logger = logging.getLogger("profile_scraper")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Profile Scraper - Extract normalized profile data from freelancer platforms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s https://www.fiverr.com/username/some-gig
  %(prog)s https://www.linkedin.com/in/johndoe/ --cookies cookies.json
  %(prog)s https://www.freelancer.com/u/johndoe --headless false --max-wait 30000
  %(prog)s --text-file profile.txt --platform upwork
        """
    )

    parser.add_argument(
        "url",
        nargs="?",
        help="Profile URL to scrape (e.g., https://www.fiverr.com/username/some-gig)"
    )
    parser.add_argument(
        "--text-file",
        help="Build the profile offline from this text file instead of a URL"
    )
    parser.add_argument(
        "--platform",
        help="Platform of the text file: fiverr, upwork, linkedin or freelancer"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode to save screenshots and detailed logs"
    )
    parser.add_argument(
        "--headless",
        type=lambda x: x.lower() in ("true", "1", "yes"),
        default=True,
        help="Run browser in headless mode (default: true)"
    )
    parser.add_argument(
        "--max-wait",
        type=int,
        default=NAVIGATION_TIMEOUT_MS,
        help=f"Navigation timeout in milliseconds (default: {NAVIGATION_TIMEOUT_MS})"
    )
    parser.add_argument(
        "--settle",
        type=int,
        default=SETTLE_DELAY_MS,
        help=f"Extra wait after load for late rendering, in ms (default: {SETTLE_DELAY_MS})"
    )
    parser.add_argument(
        "--proxy",
        help="Proxy URL to use for requests (e.g., http://proxy.example.com:8080)"
    )
    parser.add_argument(
        "--cookies",
        default=COOKIES_FILE,
        help="Path to an exported cookies.json file (optional)"
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Output file path (JSON format). If not specified, prints to stdout"
    )
    return parser


async def run_url(args: argparse.Namespace) -> dict:
    options = SessionOptions(
        headless=args.headless,
        proxy=args.proxy,
        cookies_path=args.cookies,
        debug=args.debug,
    )
    scraper = ProfileScraper(options=options, timeout_ms=args.max_wait, settle_ms=args.settle)
    debug_msg: list[str] = []
    try:
        profile = await scraper.scrape_profile(args.url, debug=debug_msg)
    except ScrapeFailed as e:
        return build_error(args.url, e, debug_msg)
    return build_response(profile, args.url, debug_msg)


def run_text(args: argparse.Namespace) -> dict:
    text = Path(args.text_file).read_text(encoding="utf-8")
    try:
        profile = build_profile_from_text(args.platform or "", text)
    except ScrapeFailed as e:
        return build_error(None, e, [])
    return build_response(profile, None, [])


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.text_file:
        if not args.platform:
            parser.error("--platform is required with --text-file")
    elif not args.url:
        parser.error("a profile URL or --text-file is required")
    elif not args.url.startswith("http"):
        args.url = f"https://{args.url}"

    try:
        result = run_text(args) if args.text_file else asyncio.run(run_url(args))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
        logger.info("Results saved to: %s", args.output)
    else:
        print(json.dumps(result, indent=2))

    return 0 if result.get("found") else 1


if __name__ == "__main__":
    sys.exit(main())
