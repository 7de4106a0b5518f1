"""Tests for the offline, text-only profile path."""

from __future__ import annotations

import pytest

from profile_scraper_pkg.errors import FailureKind, ScrapeFailed
from profile_scraper_pkg.platforms import PlatformId
from profile_scraper_pkg.text_profile import (
    build_profile_from_text,
    extract_description,
    extract_pricing,
    extract_title,
)


class TestBuildProfileFromText:
    def test_upwork_scenario(self) -> None:
        profile = build_profile_from_text("upwork", "Jane Doe\nSenior React Developer, $40 budget mentioned")
        assert profile.platform is PlatformId.UPWORK
        assert profile.title == "Jane Doe"
        assert profile.description == "Senior React Developer, $40 budget mentioned"
        assert profile.pricing == "$40"
        assert "development" in profile.tags
        assert profile.skills == ("React",)
        assert profile.experience == ""
        assert profile.rating == ""
        assert profile.reviews == ""

    def test_raw_content_is_cleaned(self) -> None:
        profile = build_profile_from_text("fiverr", "Logo★ designer\n\n" + "x" * 5000)
        assert profile.raw_content.startswith("Logo designer")
        assert len(profile.raw_content) <= 4000

    def test_vocabulary_caps(self) -> None:
        text = "web design development seo marketing graphic video writing translation"
        profile = build_profile_from_text("freelancer", "Title\n" + text)
        assert profile.tags == ("web", "design", "development", "seo", "marketing")

    def test_matches_word_prefixes_only(self) -> None:
        profile = build_profile_from_text("fiverr", "Title\nI love undesigned chaos and cobwebs")
        assert profile.tags == ()

    def test_unknown_platform(self) -> None:
        with pytest.raises(ScrapeFailed) as exc:
            build_profile_from_text("dribbble", "Some text")
        assert exc.value.kind is FailureKind.UNSUPPORTED_PLATFORM


class TestHelpers:
    def test_title_placeholder(self) -> None:
        assert extract_title("\nsecond line") == "Profile Title"

    def test_title_truncated(self) -> None:
        assert len(extract_title("a" * 300)) == 100

    def test_description_uses_two_lines(self) -> None:
        assert extract_description("t\nline one\nline two\nline three") == "line one line two"

    def test_description_placeholder(self) -> None:
        assert extract_description("only a title") == "Profile Description"

    def test_pricing_placeholder(self) -> None:
        assert extract_pricing("no money here") == "Not specified"

    def test_pricing_first_match(self) -> None:
        assert extract_pricing("from $15 to $99") == "$15"
