"""Scoring tables and heuristics used to rank discovered media.

Everything that decides *how much* a page or video is worth lives here as
data, so the policy can be tested and swapped without touching the crawling
code.
"""

from dataclasses import dataclass, field

from mediascout.core.models import PageType, ScreenshotCandidate, Viewport


@dataclass(frozen=True)
class PageTypeRule:
    """Keywords that identify links to one kind of key page."""

    page_type: PageType
    keywords: tuple[str, ...]

    def matches_href(self, href: str) -> bool:
        return any(keyword in href for keyword in self.keywords)


DEFAULT_PAGE_RULES: tuple[PageTypeRule, ...] = (
    PageTypeRule(PageType.PRICING, ("pricing", "plans", "subscribe")),
    PageTypeRule(PageType.FEATURES, ("features", "capabilities", "how-it-works")),
    PageTypeRule(PageType.DASHBOARD, ("dashboard", "app", "platform", "workspace")),
    PageTypeRule(PageType.DEMO, ("demo", "try", "playground", "sandbox")),
)


@dataclass(frozen=True)
class ScoringPolicy:
    """Weights and thresholds for page, screenshot and video scoring."""

    page_rules: tuple[PageTypeRule, ...] = DEFAULT_PAGE_RULES
    page_confidence_bonus: float = 0.2
    min_page_confidence: float = 0.3

    type_priority: dict[PageType, int] = field(
        default_factory=lambda: {
            PageType.HOMEPAGE: 5,
            PageType.FEATURES: 4,
            PageType.PRICING: 3,
            PageType.DASHBOARD: 2,
            PageType.DEMO: 1,
        }
    )
    viewport_priority: dict[Viewport, int] = field(
        default_factory=lambda: {
            Viewport.DESKTOP: 3,
            Viewport.TABLET: 2,
            Viewport.MOBILE: 1,
        }
    )

    term_weight: float = 0.2
    tutorial_keywords: tuple[str, ...] = ("tutorial", "demo", "how to")
    tutorial_bonus: float = 0.3
    official_keywords: tuple[str, ...] = ("official", "overview")
    official_bonus: float = 0.2

    embedded_youtube_confidence: float = 0.9
    embedded_vimeo_confidence: float = 0.8

    def page_confidence(self, link_text: str, rule: PageTypeRule) -> float:
        """Score how strongly a link's visible text matches a page type.

        Args:
            link_text: Visible text of the anchor.
            rule: Rule for the page type being tested.

        Returns:
            Share of the rule's keywords found in the text, plus a flat bonus,
            capped at 1.0.
        """
        if not rule.keywords:
            return 0.0
        text = link_text.lower()
        matches = sum(1 for keyword in rule.keywords if keyword in text)
        return min(matches / len(rule.keywords) + self.page_confidence_bonus, 1.0)

    def accepts_page(self, confidence: float) -> bool:
        return confidence > self.min_page_confidence

    def screenshot_score(self, screenshot: ScreenshotCandidate) -> float:
        """Composite sort key: page type priority + viewport priority + confidence."""
        return (
            self.type_priority.get(screenshot.page_type, 0)
            + self.viewport_priority.get(screenshot.viewport, 0)
            + screenshot.confidence
        )

    def video_relevance(self, query: str, title: str, description: str) -> float:
        """Score a search result against the query that produced it.

        Args:
            query: Search query, e.g. "Notion tutorial".
            title: Result title.
            description: Result description snippet.

        Returns:
            Relevance in [0, 1].
        """
        text = f"{title} {description}".lower()
        terms = query.lower().split()

        score = self.term_weight * sum(1 for term in terms if term in text)
        if any(keyword in text for keyword in self.tutorial_keywords):
            score += self.tutorial_bonus
        if any(keyword in text for keyword in self.official_keywords):
            score += self.official_bonus

        # ties with the embed constants must compare equal
        return round(min(score, 1.0), 6)


DEFAULT_POLICY = ScoringPolicy()
