# FILE: profile_scraper_pkg/selectors.py
"""Ordered selector candidates per platform and field.

Target sites serve different markup per account type, A/B cohort and
redesign rollout, so every field lists several candidates. Earlier entries
win; later ones are fallbacks for older or alternative layouts.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PlatformSelectors:
    title: Tuple[str, ...] = ()
    description: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    pricing: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    experience: Tuple[str, ...] = ()
    rating: Tuple[str, ...] = ()
    reviews: Tuple[str, ...] = ()


FIVERR = PlatformSelectors(
    title=(
        "h1[data-testid='gig-title']",
        "h1.text-display-5",
        ".gig-title",
        ".gig-overview h1",
    ),
    description=(
        "div[data-testid='gig-description']",
        ".gig-description",
        ".description-container",
        ".description-content",
    ),
    tags=(
        "a.tag",
        ".tags-container a",
        ".skill-tag",
        ".tag-item",
    ),
    pricing=(
        ".price",
        ".package-price",
        "[data-testid*='price']",
    ),
    skills=(
        ".seller-skills li",
        ".user-skills a",
        ".skills-section .skill",
    ),
    rating=(
        ".rating-score",
        ".average-rating",
        ".rating",
    ),
    reviews=(
        ".review-count",
        ".rating-count",
        ".ratings-count",
    ),
)

UPWORK = PlatformSelectors(
    title=(
        "h1[data-qa='freelancer_name']",
        "h1.air3-title",
        ".freelancer-title",
    ),
    description=(
        "div[data-qa='freelancer_bio']",
        ".overview-description",
        ".bio",
    ),
    tags=(
        ".air3-token",
        ".skill-tag",
        ".o-tag-skill",
    ),
    pricing=(
        ".hourly-rate",
        ".rate",
        "[data-qa='rate']",
        ".air3-text-emphasis",
    ),
    skills=(
        ".up-skill-badge",
        ".skill-item",
    ),
    experience=(
        ".employment-history",
        ".experience-item",
    ),
    rating=(
        ".star-rating",
        ".up-rating",
    ),
    reviews=(
        "[data-qa='reviews-count']",
        ".reviews-count",
    ),
)

LINKEDIN = PlatformSelectors(
    title=(
        "h1.top-card-layout__title",
        ".profile-topcard-headline",
        "h1.text-heading-xlarge",
    ),
    description=(
        ".core-section-container__content .description",
        ".summary .description",
        ".about-section",
    ),
    tags=(
        ".skill-category-entity__name",
        ".pv-skill-category-entity__name-text",
    ),
    skills=(
        ".pv-skill-entity__skill-name",
        ".skill-pill",
    ),
    experience=(
        ".experience-section",
        ".pv-experience-section",
        "section[data-section='experience']",
    ),
)

FREELANCER = PlatformSelectors(
    title=(
        "h1.owner-name",
        ".profile-username",
        "h1.ProfileWidget__userName",
    ),
    description=(
        ".profile-description",
        ".user-bio",
        ".ProfileWidget__description",
    ),
    tags=(
        ".skill-tag",
        ".tag-item",
        ".ProfileWidget__skill",
    ),
    pricing=(
        ".hourly-rate",
        ".rate-display",
        ".ProfileWidget__hourlyRate",
    ),
    skills=(
        ".skill-item",
        ".expertise-tag",
    ),
    rating=(
        ".rating-score",
        ".user-rating",
        ".ProfileWidget__rating",
    ),
    reviews=(
        ".review-count",
        ".ProfileWidget__reviewCount",
    ),
)

# Non-content elements removed before reading page text.
NOISE_ELEMENTS = ("script", "style", "nav", "footer", "header", "iframe", "noscript")

# Generic content containers, most specific first.
CONTENT_REGIONS = (
    "main",
    ".main-content",
    "#main-content",
    ".profile-content",
    ".user-profile",
    ".gig-page",
    ".freelancer-profile",
    ".profile-container",
    ".content",
    ".container",
    "article",
    "section",
)

# Markers of login/authwall pages served instead of the requested profile.
AUTH_WALL_SELECTORS = (
    ".authwall-join-form",
    "form.authwall-join-form",
    "[data-test-id='join-form']",
)
AUTH_WALL_URL_MARKERS = ("/authwall", "/login", "/signup", "/checkpoint", "/ab/account-security")
