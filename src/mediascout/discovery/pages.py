"""Key page discovery by classifying a homepage's links."""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from mediascout.core import diagnostics as ops
from mediascout.core.diagnostics import Diagnostics
from mediascout.core.exceptions import FetchError
from mediascout.core.models import KeyPage, KeyPageScan, PageType
from mediascout.core.scoring import DEFAULT_POLICY, ScoringPolicy
from mediascout.engine.fetcher import PageFetcher

logger = logging.getLogger(__name__)


def homepage_entry(site_url: str) -> KeyPage:
    return KeyPage(
        url=site_url,
        title="Homepage",
        description="Main landing page",
        page_type=PageType.HOMEPAGE,
        confidence=1.0,
    )


class PageClassifier:
    """Find a site's pricing, features, dashboard and demo pages."""

    def __init__(
        self,
        fetcher: PageFetcher,
        policy: ScoringPolicy = DEFAULT_POLICY,
        max_pages: int = 4,
    ) -> None:
        """Initialize the classifier.

        Args:
            fetcher: HTTP fetcher for the current call.
            policy: Keyword rules and confidence threshold.
            max_pages: Maximum key pages to keep, homepage included.
        """
        self._fetcher = fetcher
        self._policy = policy
        self._max_pages = max_pages

    async def find_key_pages(
        self, site_url: str, diagnostics: Optional[Diagnostics] = None
    ) -> list[KeyPage]:
        """Find key pages of a site. The homepage is always the first entry."""
        scan = await self.scan_site(site_url, diagnostics)
        return scan.pages

    async def scan_site(
        self, site_url: str, diagnostics: Optional[Diagnostics] = None
    ) -> KeyPageScan:
        """Fetch a site's homepage and classify its links.

        Args:
            site_url: Seed URL of the tool's website.
            diagnostics: Collector for this call.

        Returns:
            KeyPageScan with the key pages and whether the homepage was reachable.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        try:
            html = await self._fetcher.get_text(site_url)
        except FetchError as e:
            diagnostics.failed(ops.FETCH_HOMEPAGE, site_url, str(e))
            return KeyPageScan(pages=[homepage_entry(site_url)], reachable=False)

        diagnostics.success(ops.FETCH_HOMEPAGE, site_url)
        pages = self.classify_html(html, site_url, diagnostics)
        return KeyPageScan(pages=pages, reachable=True)

    def classify_html(
        self,
        html: str,
        site_url: str,
        diagnostics: Optional[Diagnostics] = None,
    ) -> list[KeyPage]:
        """Classify the links of an already fetched homepage.

        Args:
            html: Homepage HTML.
            site_url: Seed URL; links are resolved against it and must share its
                hostname.
            diagnostics: Collector for this call.

        Returns:
            Homepage entry followed by up to ``max_pages - 1`` key pages, in
            discovery order.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        pages = [homepage_entry(site_url)]

        try:
            seed_host = urlparse(site_url).hostname
            soup = BeautifulSoup(html, "html.parser")
            anchors = soup.find_all("a", href=True)

            for rule in self._policy.page_rules:
                for anchor in anchors:
                    if len(pages) >= self._max_pages:
                        break

                    href = str(anchor["href"])
                    if not rule.matches_href(href):
                        continue

                    text = anchor.get_text(" ", strip=True)
                    if not text:
                        continue

                    try:
                        full_url = urljoin(site_url, href)
                        if urlparse(full_url).hostname != seed_host:
                            continue
                    except ValueError:
                        continue

                    confidence = self._policy.page_confidence(text, rule)
                    if not self._policy.accepts_page(confidence):
                        continue
                    if any(p.url == full_url for p in pages):
                        continue

                    label = rule.page_type.value
                    pages.append(
                        KeyPage(
                            url=full_url,
                            title=text,
                            description=f"{label.capitalize()} page",
                            page_type=rule.page_type,
                            confidence=confidence,
                        )
                    )

        except Exception as e:
            diagnostics.failed(ops.CLASSIFY_LINKS, site_url, str(e))
            return pages[: self._max_pages]

        logger.debug("Key pages for %s: %s", site_url, [page.url for page in pages])
        diagnostics.success(
            ops.CLASSIFY_LINKS, site_url, f"{len(pages) - 1} key pages besides homepage"
        )
        return pages[: self._max_pages]
