"""Tests for per-platform extraction strategies."""

from __future__ import annotations

from bs4 import BeautifulSoup

from profile_scraper_pkg.extraction import STRATEGIES, collect_texts, css_text, first_match, strategy_for
from profile_scraper_pkg.platforms import PlatformId

URL = "https://www.fiverr.com/username/some-gig"


class TestFiverr:
    def test_gig_title(self, fiverr_html: str) -> None:
        profile = strategy_for(PlatformId.FIVERR).extract(fiverr_html, URL)
        assert profile.title == "Professional Logo Design"

    def test_fields_are_normalized(self, fiverr_html: str) -> None:
        profile = strategy_for(PlatformId.FIVERR).extract(fiverr_html, URL)
        assert profile.platform is PlatformId.FIVERR
        assert profile.description == "I will design a modern, minimalist logo for your brand."
        assert profile.tags == ("logo design", "branding")
        assert profile.pricing == "US$45"
        assert profile.rating == "4.9"
        assert profile.reviews == "(1k+)"
        assert profile.experience == ""
        assert profile.raw_content == ""

    def test_second_candidate_wins_over_placeholder(self) -> None:
        html = "<html><body><h1 class='text-display-5'>Fallback Title</h1></body></html>"
        profile = strategy_for(PlatformId.FIVERR).extract(html, URL)
        assert profile.title == "Fallback Title"

    def test_earlier_candidate_wins_regardless_of_dom_order(self) -> None:
        html = (
            "<div class='gig-title'>Late candidate</div>"
            "<h1 data-testid='gig-title'>First candidate</h1>"
        )
        assert strategy_for(PlatformId.FIVERR).extract(html, URL).title == "First candidate"

    def test_empty_candidate_falls_through(self) -> None:
        html = "<h1 data-testid='gig-title'>   </h1><div class='gig-title'>Real title</div>"
        assert strategy_for(PlatformId.FIVERR).extract(html, URL).title == "Real title"

    def test_placeholders_when_nothing_matches(self) -> None:
        profile = strategy_for(PlatformId.FIVERR).extract("<html><body><p>hi</p></body></html>", URL)
        assert profile.title == "Fiverr Gig"
        assert profile.description == "No description available"
        assert profile.pricing == "Pricing not listed"
        assert profile.tags == ()
        assert profile.skills == ()


class TestOtherPlatforms:
    def test_upwork(self) -> None:
        html = """
        <h1 data-qa="freelancer_name">Jane D.</h1>
        <div class="overview-description">Full-stack engineer.</div>
        <span class="air3-token">React</span><span class="air3-token">Node.js</span>
        <span class="hourly-rate">$40.00/hr</span>
        <span class="skill-item">TypeScript</span>
        <div class="experience-item">Acme Corp, 2019-2024</div>
        """
        profile = strategy_for(PlatformId.UPWORK).extract(html, "https://www.upwork.com/freelancers/~01")
        assert profile.title == "Jane D."
        assert profile.description == "Full-stack engineer."
        assert profile.tags == ("React", "Node.js")
        assert profile.pricing == "$40.00/hr"
        assert profile.skills == ("TypeScript",)
        assert profile.experience == "Acme Corp, 2019-2024"
        assert profile.reviews == "No reviews available"

    def test_linkedin_has_no_pricing_rating_or_reviews(self) -> None:
        html = "<h1 class='top-card-layout__title'>Jane Doe</h1>"
        profile = strategy_for(PlatformId.LINKEDIN).extract(html, "https://www.linkedin.com/in/jane")
        assert profile.title == "Jane Doe"
        assert profile.pricing == ""
        assert profile.rating == ""
        assert profile.reviews == ""
        assert profile.experience == "No experience listed"

    def test_linkedin_open_graph_fallback(self) -> None:
        html = (
            "<head><meta property='og:title' content='Jane Doe - Staff Engineer'>"
            "<meta property='og:description' content='Building things.'></head>"
        )
        profile = strategy_for(PlatformId.LINKEDIN).extract(html, "https://www.linkedin.com/in/jane")
        assert profile.title == "Jane Doe - Staff Engineer"
        assert profile.description == "Building things."

    def test_freelancer(self) -> None:
        html = """
        <h1 class="ProfileWidget__userName">jdoe</h1>
        <div class="user-bio">Data entry specialist</div>
        <span class="ProfileWidget__hourlyRate">$15 USD / hour</span>
        <span class="user-rating">4.7</span>
        """
        profile = strategy_for(PlatformId.FREELANCER).extract(html, "https://www.freelancer.com/u/jdoe")
        assert profile.title == "jdoe"
        assert profile.description == "Data entry specialist"
        assert profile.pricing == "$15 USD / hour"
        assert profile.rating == "4.7"
        assert profile.reviews == "No reviews available"


class TestListFields:
    def test_tags_capped_at_ten_in_dom_order(self) -> None:
        html = "".join(f"<a class='tag'>tag{i}</a>" for i in range(15))
        profile = strategy_for(PlatformId.FIVERR).extract(html, URL)
        assert profile.tags == tuple(f"tag{i}" for i in range(10))

    def test_tags_across_selectors_keep_dom_order(self) -> None:
        html = "<span class='tag-item'>first</span><a class='tag'>second</a><span class='skill-tag'>first</span>"
        profile = strategy_for(PlatformId.FIVERR).extract(html, URL)
        assert profile.tags == ("first", "second")

    def test_skill_cap_is_per_platform(self) -> None:
        html = "".join(f"<span class='skill-item'>s{i}</span>" for i in range(20))
        upwork = strategy_for(PlatformId.UPWORK).extract(html, "https://www.upwork.com/x")
        assert len(upwork.skills) == STRATEGIES[PlatformId.UPWORK].skill_cap

    def test_collect_texts_drops_empties(self) -> None:
        soup = BeautifulSoup("<i class='t'> </i><i class='t'>a</i><i class='t'>a</i>", "html.parser")
        assert collect_texts(soup, (".t",), 10) == ("a",)


def test_candidates_stop_at_first_hit() -> None:
    calls: list[str] = []

    def candidate(name: str, value: str):
        def _read(soup):
            calls.append(name)
            return value
        return _read

    soup = BeautifulSoup("", "html.parser")
    assert first_match(soup, [candidate("a", ""), candidate("b", "hit"), candidate("c", "late")]) == "hit"
    assert calls == ["a", "b"]


def test_css_text_missing_element() -> None:
    assert css_text("h1")(BeautifulSoup("<p>x</p>", "html.parser")) == ""


def test_extraction_is_deterministic(fiverr_html: str) -> None:
    strategy = strategy_for(PlatformId.FIVERR)
    assert strategy.extract(fiverr_html, URL) == strategy.extract(fiverr_html, URL)


def test_every_platform_has_a_strategy() -> None:
    assert set(STRATEGIES) == set(PlatformId)
    for platform, strategy in STRATEGIES.items():
        assert strategy.platform is platform
