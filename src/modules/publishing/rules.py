"""Required-field rules for page-builder sections.

Tables are keyed by closed enums so adding a section type forces a decision
about its rule (see ``test_rules_cover_every_section``).
"""

from dataclasses import dataclass
from enum import Enum

from src.database.models.pages import PageType


@dataclass(frozen=True)
class SectionRule:
    required_fields: tuple[str, ...] = ()


class CampaignSection(str, Enum):
    HERO = "hero"
    STORY = "story"
    DONATION_BUTTONS = "donationButtons"
    DONATION_HEADER = "donationHeader"
    THANK_YOU_HEADER = "thankYouHeader"
    DONATION_BACKGROUND = "donationBackground"
    THANK_YOU_BACKGROUND = "thankYouBackground"


class WebsiteSection(str, Enum):
    HERO = "hero"
    BANNER = "banner"
    MAIN = "main"
    ABOUT = "about"
    IMPACT = "impact"
    FEATURED = "featured"
    STORY = "story"
    WHAT = "what"
    WHY = "why"
    TEAM = "team"
    DONATION_FIELDS = "donationFields"


CAMPAIGN_SECTION_RULES: dict[CampaignSection, SectionRule] = {
    CampaignSection.HERO: SectionRule(("headline",)),
    CampaignSection.STORY: SectionRule(("title",)),
    CampaignSection.DONATION_BUTTONS: SectionRule(("suggestedAmounts",)),
    CampaignSection.DONATION_HEADER: SectionRule(("headline",)),
    CampaignSection.THANK_YOU_HEADER: SectionRule(("headline",)),
    CampaignSection.DONATION_BACKGROUND: SectionRule(),
    CampaignSection.THANK_YOU_BACKGROUND: SectionRule(),
}

WEBSITE_SECTION_RULES: dict[WebsiteSection, SectionRule] = {
    WebsiteSection.HERO: SectionRule(("headline",)),
    WebsiteSection.BANNER: SectionRule(("headline",)),
    WebsiteSection.MAIN: SectionRule(("title",)),
    WebsiteSection.ABOUT: SectionRule(("title",)),
    WebsiteSection.IMPACT: SectionRule(("title",)),
    WebsiteSection.FEATURED: SectionRule(("title",)),
    WebsiteSection.STORY: SectionRule(("title",)),
    WebsiteSection.WHAT: SectionRule(("title",)),
    WebsiteSection.WHY: SectionRule(("title",)),
    WebsiteSection.TEAM: SectionRule(),
    WebsiteSection.DONATION_FIELDS: SectionRule(("title",)),
}

# Pages that must be published before an organization is publicly active
REQUIRED_PAGE_TYPES: tuple[PageType, ...] = (PageType.LANDING, PageType.ABOUT)


def _section(type_: str, props: dict) -> dict:
    return {"type": type_, "enabled": True, "props": props}


def default_campaign_config() -> dict:
    return {
        CampaignSection.HERO.value: _section(
            "hero", {"headline": "Your Campaign Title", "buttonText": "Donate Now"}
        ),
        CampaignSection.STORY.value: _section("story", {"title": "Our Story"}),
        CampaignSection.DONATION_HEADER.value: _section(
            "donationHeader",
            {"headline": "Donate!", "message": "Your Support is Greatly Appreciated"},
        ),
        CampaignSection.DONATION_BUTTONS.value: _section(
            "donationButtons", {"suggestedAmounts": [25, 50, 100]}
        ),
        CampaignSection.THANK_YOU_HEADER.value: _section(
            "thankYouHeader",
            {"headline": "Thank You", "message": "Your Support is Greatly Appreciated!"},
        ),
    }


def default_page_config(page_type: PageType) -> dict:
    """Starter content for a freshly created organization page."""
    if page_type == PageType.LANDING:
        return {
            WebsiteSection.HERO.value: _section(
                "hero", {"headline": "Welcome", "buttonText": "Donate Now"}
            ),
            WebsiteSection.MAIN.value: _section("main", {"title": "Our Mission"}),
            WebsiteSection.IMPACT.value: _section("impact", {"title": "Our Impact"}),
            WebsiteSection.FEATURED.value: _section(
                "featured", {"title": "Featured Campaigns"}
            ),
            WebsiteSection.BANNER.value: _section(
                "banner",
                {"headline": "Donate!", "message": "Your Support is Greatly Appreciated"},
            ),
        }
    return {
        WebsiteSection.ABOUT.value: _section("about", {"title": "About Us"}),
        WebsiteSection.STORY.value: _section("story", {}),
        WebsiteSection.WHAT.value: _section("what", {}),
        WebsiteSection.WHY.value: _section("why", {}),
        WebsiteSection.TEAM.value: _section("team", {}),
    }
