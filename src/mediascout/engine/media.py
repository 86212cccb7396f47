"""Media discovery engine.

This module ties the pipeline together: key pages are rendered into
screenshots while, concurrently, videos are searched for and collected from
the homepage. Every public method is fail-soft and returns an empty or partial
result instead of raising.
"""

import asyncio
import logging
from typing import Optional

import httpx

from mediascout.core import diagnostics as ops
from mediascout.core.diagnostics import Diagnostics
from mediascout.core.interfaces import ScreenshotRenderer, VideoSearchProvider
from mediascout.core.models import (
    DiscoveryResult,
    KeyPage,
    LogoDiscoveryResult,
    MediaConfig,
    PageType,
    ScreenshotCandidate,
    SelectionResult,
    VideoCandidate,
)
from mediascout.core.scoring import DEFAULT_POLICY, ScoringPolicy
from mediascout.discovery.logos import LogoDiscoverer, select_best_logo
from mediascout.discovery.names import extract_tool_name
from mediascout.discovery.pages import PageClassifier
from mediascout.discovery.videos import VideoDiscoverer
from mediascout.engine.fetcher import PageFetcher, build_client
from mediascout.engine.screenshots import ScreenshotCapturer
from mediascout.providers.factory import ProviderFactory

logger = logging.getLogger(__name__)

MAX_BEST_SCREENSHOTS = 3
MAX_BEST_VIDEOS = 2
MAX_LISTED_LOGOS = 5


def select_best_media(
    result: DiscoveryResult,
    max_screenshots: int = MAX_BEST_SCREENSHOTS,
    max_videos: int = MAX_BEST_VIDEOS,
) -> SelectionResult:
    """Pick a short list of media from a discovery result.

    Homepage screenshots come first, in their existing order; the remaining
    slots are filled from the other screenshots in order. Videos are taken
    from the top of the already sorted list.

    Args:
        result: Result of ``discover_media``.
        max_screenshots: Screenshots to keep.
        max_videos: Videos to keep.

    Returns:
        SelectionResult. ``result`` is not modified.
    """
    homepage = [s for s in result.screenshots if s.page_type is PageType.HOMEPAGE]
    others = [s for s in result.screenshots if s.page_type is not PageType.HOMEPAGE]

    best_screenshots = (homepage + others)[:max_screenshots]

    return SelectionResult(
        best_screenshots=best_screenshots,
        best_videos=list(result.videos[:max_videos]),
    )


class MediaDiscovery:
    """Discover screenshots, videos and logos for an AI tool's website."""

    def __init__(
        self,
        config: Optional[MediaConfig] = None,
        renderer: Optional[ScreenshotRenderer] = None,
        video_search: Optional[VideoSearchProvider] = None,
        policy: ScoringPolicy = DEFAULT_POLICY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Engine configuration. Defaults to ``MediaConfig()``.
            renderer: Screenshot renderer. Chosen from the config if omitted.
            video_search: Video search provider. Chosen from the config if omitted.
            policy: Scoring policy.
            transport: httpx transport for every outbound request (tests use
                ``httpx.MockTransport``).
        """
        self._config = config or MediaConfig()
        self._renderer = renderer or ProviderFactory.get_renderer(self._config)
        self._video_search = video_search or ProviderFactory.get_video_search(self._config)
        self._policy = policy
        self._transport = transport

    @property
    def config(self) -> MediaConfig:
        return self._config

    def _classifier(self, fetcher: PageFetcher) -> PageClassifier:
        return PageClassifier(
            fetcher, policy=self._policy, max_pages=self._config.max_key_pages
        )

    def _capturer(self, fetcher: PageFetcher) -> ScreenshotCapturer:
        return ScreenshotCapturer(
            self._classifier(fetcher),
            self._renderer,
            policy=self._policy,
            require_reachable_site=self._config.require_reachable_site,
        )

    def _video_discoverer(self, fetcher: PageFetcher) -> VideoDiscoverer:
        return VideoDiscoverer(
            fetcher,
            self._video_search,
            policy=self._policy,
            max_queries=self._config.max_search_queries,
            max_results_per_query=self._config.max_results_per_query,
            max_videos=self._config.max_videos,
        )

    async def discover_media(self, site_url: str) -> DiscoveryResult:
        """Find and rank screenshots and videos for a site.

        Args:
            site_url: URL of the tool's website.

        Returns:
            DiscoveryResult; empty lists if everything failed.
        """
        logger.info("Starting media discovery for %s", site_url)
        diagnostics = Diagnostics()

        try:
            async with build_client(self._config, self._transport) as client:
                fetcher = PageFetcher(client)
                outcomes = await asyncio.gather(
                    self._capturer(fetcher).capture_screenshots(site_url, diagnostics),
                    self._video_discoverer(fetcher).discover_videos(site_url, diagnostics),
                    return_exceptions=True,
                )
            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    raise outcome
            screenshots, videos = outcomes
        except Exception as e:
            logger.exception("Error in media discovery for %s", site_url)
            diagnostics.failed(ops.DISCOVER_MEDIA, site_url, str(e))
            return DiscoveryResult.empty(diagnostics.reports)

        result = DiscoveryResult(
            screenshots=screenshots,
            videos=videos,
            diagnostics=diagnostics.reports,
        )
        logger.info(
            "Found %d screenshots and %d videos for %s",
            len(result.screenshots),
            len(result.videos),
            site_url,
        )
        return result

    def select_best_media(self, result: DiscoveryResult) -> SelectionResult:
        return select_best_media(result)

    async def find_key_pages(self, site_url: str) -> list[KeyPage]:
        """Find the homepage plus up to three pricing/features/dashboard/demo pages."""
        async with build_client(self._config, self._transport) as client:
            return await self._classifier(PageFetcher(client)).find_key_pages(site_url)

    async def capture_screenshots(self, site_url: str) -> list[ScreenshotCandidate]:
        async with build_client(self._config, self._transport) as client:
            return await self._capturer(PageFetcher(client)).capture_screenshots(site_url)

    async def extract_tool_name(self, site_url: str) -> Optional[str]:
        async with build_client(self._config, self._transport) as client:
            return await extract_tool_name(PageFetcher(client), site_url)

    async def discover_videos(self, site_url: str) -> list[VideoCandidate]:
        async with build_client(self._config, self._transport) as client:
            return await self._video_discoverer(PageFetcher(client)).discover_videos(site_url)

    async def discover_logo(self, site_url: str) -> LogoDiscoveryResult:
        """Find logo candidates for a site and pick the best one.

        Args:
            site_url: URL of the tool's website.

        Returns:
            LogoDiscoveryResult listing the top candidates.
        """
        logger.info("Starting logo discovery for %s", site_url)
        diagnostics = Diagnostics()

        try:
            async with build_client(self._config, self._transport) as client:
                discoverer = LogoDiscoverer(PageFetcher(client))
                logos = await discoverer.discover_logos(site_url, diagnostics)
        except Exception as e:
            logger.exception("Error in logo discovery for %s", site_url)
            diagnostics.failed(ops.DISCOVER_LOGO, site_url, str(e))
            return LogoDiscoveryResult(diagnostics=diagnostics.reports)

        return LogoDiscoveryResult(
            logos=logos[:MAX_LISTED_LOGOS],
            best=select_best_logo(logos),
            total_found=len(logos),
            diagnostics=diagnostics.reports,
        )
