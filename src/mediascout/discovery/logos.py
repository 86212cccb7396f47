"""Logo discovery from favicons, metadata, page elements and common paths."""

import logging
import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from mediascout.core import diagnostics as ops
from mediascout.core.diagnostics import Diagnostics
from mediascout.core.exceptions import FetchError
from mediascout.core.models import LogoCandidate, LogoSource
from mediascout.engine.fetcher import PageFetcher

logger = logging.getLogger(__name__)

FAVICON_SELECTORS = (
    'link[rel="icon"]',
    'link[rel="shortcut icon"]',
    'link[rel="apple-touch-icon"]',
    'link[rel="apple-touch-icon-precomposed"]',
)

META_SELECTORS = (
    'meta[name="logo"]',
    'meta[name="brand-logo"]',
    'meta[property="logo"]',
    'meta[itemprop="logo"]',
)

LOGO_ELEMENT_SELECTORS = (
    ".logo img",
    ".brand img",
    ".header-logo img",
    ".navbar-brand img",
    '[class*="logo"] img',
    '[id*="logo"] img',
    'img[alt*="logo" i]',
    'img[alt*="brand" i]',
    'img[src*="logo" i]',
)

COMMON_LOGO_PATHS = tuple(
    f"{directory}/logo.{ext}"
    for directory in ("", "/assets", "/images", "/static", "/media")
    for ext in ("png", "svg")
)

_SIZE_RE = re.compile(r"(\d+)x(\d+)")


def parse_sizes(sizes: Optional[str]) -> tuple[Optional[int], Optional[int]]:
    """Parse a ``sizes`` attribute such as "180x180"."""
    if not sizes:
        return None, None
    match = _SIZE_RE.search(sizes)
    if not match:
        return None, None
    return int(match.group(1)), int(match.group(2))


def favicon_confidence(selector: str, sizes: Optional[str]) -> float:
    confidence = 0.8 if "apple-touch-icon" in selector else 0.5

    width, _ = parse_sizes(sizes)
    if width is not None:
        if width >= 180:
            confidence += 0.2
        elif width >= 120:
            confidence += 0.1

    return min(confidence, 1.0)


def element_confidence(selector: str, alt: str) -> float:
    confidence = 0.7 if (".logo" in selector or ".brand" in selector) else 0.4

    alt = alt.lower()
    if "logo" in alt:
        confidence += 0.2
    if "brand" in alt:
        confidence += 0.1

    return min(confidence, 1.0)


def select_best_logo(logos: list[LogoCandidate]) -> Optional[LogoCandidate]:
    """Pick a logo: SVG first, then high resolution, then highest confidence.

    Args:
        logos: Candidates sorted by confidence, highest first.

    Returns:
        The chosen logo, or None if there are no candidates.
    """
    if not logos:
        return None

    usable = [logo for logo in logos if logo.confidence >= 0.4]
    if not usable:
        return logos[0]

    for logo in usable:
        if logo.url.lower().endswith(".svg"):
            return logo

    for logo in usable:
        if (logo.width or 0) >= 120 or (logo.height or 0) >= 120:
            return logo

    return usable[0]


class LogoDiscoverer:
    """Collect logo candidates for a tool's website."""

    def __init__(self, fetcher: PageFetcher, probe_common_paths: bool = True) -> None:
        self._fetcher = fetcher
        self._probe_common_paths = probe_common_paths

    async def discover_logos(
        self, site_url: str, diagnostics: Optional[Diagnostics] = None
    ) -> list[LogoCandidate]:
        """Find logo candidates for a site.

        Args:
            site_url: Seed URL of the tool's website.
            diagnostics: Collector for this call.

        Returns:
            Candidates sorted by confidence, one per URL.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        try:
            html = await self._fetcher.get_text(site_url)
        except FetchError as e:
            diagnostics.failed(ops.FETCH_HOMEPAGE, site_url, str(e))
            return []
        diagnostics.success(ops.FETCH_HOMEPAGE, site_url)

        logos = self.extract_from_html(html, site_url)
        if self._probe_common_paths:
            logos.extend(await self._probe_paths(site_url))

        logos.sort(key=lambda logo: -logo.confidence)

        unique: list[LogoCandidate] = []
        seen: set[str] = set()
        for logo in logos:
            if logo.url not in seen:
                seen.add(logo.url)
                unique.append(logo)
        return unique

    def extract_from_html(self, html: str, site_url: str) -> list[LogoCandidate]:
        """Collect logo candidates declared in a page's markup."""
        soup = BeautifulSoup(html, "html.parser")
        logos: list[LogoCandidate] = []

        for selector in FAVICON_SELECTORS:
            for link in soup.select(selector):
                href = link.get("href")
                if not href:
                    continue
                sizes = link.get("sizes")
                width, height = parse_sizes(sizes)
                logos.append(
                    LogoCandidate(
                        url=urljoin(site_url, str(href)),
                        confidence=favicon_confidence(selector, sizes),
                        source=LogoSource.FAVICON,
                        width=width,
                        height=height,
                    )
                )

        og_image = soup.select_one('meta[property="og:image"]')
        if og_image and og_image.get("content"):
            logos.append(
                LogoCandidate(
                    url=urljoin(site_url, str(og_image["content"])),
                    confidence=0.7,
                    source=LogoSource.OG,
                )
            )
        og_logo = soup.select_one('meta[property="og:logo"]')
        if og_logo and og_logo.get("content"):
            logos.append(
                LogoCandidate(
                    url=urljoin(site_url, str(og_logo["content"])),
                    confidence=0.9,
                    source=LogoSource.OG,
                )
            )

        for selector in META_SELECTORS:
            meta = soup.select_one(selector)
            if meta and meta.get("content"):
                logos.append(
                    LogoCandidate(
                        url=urljoin(site_url, str(meta["content"])),
                        confidence=0.8,
                        source=LogoSource.META,
                    )
                )

        for selector in LOGO_ELEMENT_SELECTORS:
            for img in soup.select(selector):
                src = img.get("src")
                if not src:
                    continue
                logos.append(
                    LogoCandidate(
                        url=urljoin(site_url, str(src)),
                        confidence=element_confidence(selector, str(img.get("alt") or "")),
                        source=LogoSource.LOGO_ELEMENT,
                    )
                )

        return logos

    async def _probe_paths(self, site_url: str) -> list[LogoCandidate]:
        logos: list[LogoCandidate] = []
        for path in COMMON_LOGO_PATHS:
            url = urljoin(site_url, path)
            content_type = await self._fetcher.head_content_type(url)
            if content_type and content_type.startswith("image/"):
                logos.append(
                    LogoCandidate(url=url, confidence=0.6, source=LogoSource.BRAND_ASSET)
                )
        return logos
