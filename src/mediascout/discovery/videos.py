"""Video discovery: platform search plus embeds found on the homepage."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from mediascout.core import diagnostics as ops
from mediascout.core.diagnostics import Diagnostics
from mediascout.core.exceptions import FetchError, SearchParseError
from mediascout.core.interfaces import VideoSearchProvider
from mediascout.core.models import SearchHit, VideoCandidate, VideoSource
from mediascout.core.scoring import DEFAULT_POLICY, ScoringPolicy
from mediascout.discovery.names import extract_name_from_html
from mediascout.engine.fetcher import PageFetcher

logger = logging.getLogger(__name__)

QUERY_TEMPLATES = (
    "{name} tutorial",
    "{name} demo",
    "{name} review",
    "{name} how to use",
    "{name} AI tool",
)

YOUTUBE_EMBED_RE = re.compile(
    r"(?:youtube(?:-nocookie)?\.com/embed/|youtu\.be/)([A-Za-z0-9_-]+)"
)
VIMEO_EMBED_RE = re.compile(r"vimeo\.com/(?:video/)?(\d+)")


def youtube_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def youtube_thumbnail(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def build_queries(name: str) -> list[str]:
    """Expand every query template for a tool name."""
    return [template.format(name=name) for template in QUERY_TEMPLATES]


class VideoDiscoverer:
    """Find tutorial and demo videos for a tool."""

    def __init__(
        self,
        fetcher: PageFetcher,
        search: VideoSearchProvider,
        policy: ScoringPolicy = DEFAULT_POLICY,
        max_queries: int = 2,
        max_results_per_query: int = 5,
        max_videos: int = 10,
    ) -> None:
        """Initialize the discoverer.

        Args:
            fetcher: HTTP fetcher for the current call.
            search: Video search provider.
            policy: Relevance weights and embedded confidences.
            max_queries: How many query templates are actually searched.
            max_results_per_query: Hits kept from each query.
            max_videos: Length of the final list.
        """
        self._fetcher = fetcher
        self._search = search
        self._policy = policy
        self._max_queries = max_queries
        self._max_results_per_query = max_results_per_query
        self._max_videos = max_videos

    async def discover_videos(
        self, site_url: str, diagnostics: Optional[Diagnostics] = None
    ) -> list[VideoCandidate]:
        """Search for videos about a tool and collect the ones its homepage embeds.

        Args:
            site_url: Seed URL of the tool's website.
            diagnostics: Collector for this call.

        Returns:
            Up to ``max_videos`` candidates, most confident first.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        try:
            html: Optional[str] = None
            try:
                html = await self._fetcher.get_text(site_url)
            except FetchError as e:
                diagnostics.failed(ops.FETCH_HOMEPAGE, site_url, str(e))

            name = extract_name_from_html(html) if html is not None else None
            if name:
                diagnostics.success(ops.EXTRACT_NAME, site_url, name)
            else:
                diagnostics.skipped(ops.EXTRACT_NAME, site_url, "no tool name found")

            videos: list[VideoCandidate] = []
            if name:
                videos.extend(await self.search_videos(name, diagnostics))
            else:
                diagnostics.skipped(ops.VIDEO_SEARCH, site_url, "no tool name to search for")

            if html is not None:
                embedded = self.find_embedded_videos(html)
                diagnostics.success(ops.EMBEDDED_VIDEOS, site_url, f"{len(embedded)} embeds")
                videos.extend(embedded)
            else:
                diagnostics.skipped(ops.EMBEDDED_VIDEOS, site_url, "homepage unavailable")

            return self.rank(videos)

        except Exception as e:
            logger.exception("Error discovering videos for %s", site_url)
            diagnostics.failed(ops.DISCOVER_VIDEOS, site_url, str(e))
            return []

    async def search_videos(
        self, name: str, diagnostics: Optional[Diagnostics] = None
    ) -> list[VideoCandidate]:
        """Run the first ``max_queries`` search queries for a tool name."""
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        candidates: list[VideoCandidate] = []

        for query in build_queries(name)[: self._max_queries]:
            try:
                hits = await self._search.search(self._fetcher, query)
            except NotImplementedError as e:
                diagnostics.not_implemented(ops.VIDEO_SEARCH, query, str(e))
                continue
            except (FetchError, SearchParseError) as e:
                diagnostics.failed(ops.VIDEO_SEARCH, query, str(e))
                continue
            except Exception as e:
                logger.exception("Unexpected error searching %r", query)
                diagnostics.failed(ops.VIDEO_SEARCH, query, str(e))
                continue

            kept = hits[: self._max_results_per_query]
            diagnostics.success(ops.VIDEO_SEARCH, query, f"{len(kept)} results")
            candidates.extend(self.score_hits(query, kept))

        return candidates

    def score_hits(self, query: str, hits: list[SearchHit]) -> list[VideoCandidate]:
        return [
            VideoCandidate(
                url=youtube_watch_url(hit.video_id),
                title=hit.title,
                description=hit.description,
                thumbnail=hit.thumbnail,
                duration=hit.duration,
                source=VideoSource.YOUTUBE,
                confidence=self._policy.video_relevance(query, hit.title, hit.description),
            )
            for hit in hits
        ]

    def find_embedded_videos(self, html: str) -> list[VideoCandidate]:
        """Collect YouTube and Vimeo players embedded in a page.

        Args:
            html: Page HTML.

        Returns:
            YouTube embeds in document order, followed by Vimeo embeds.
        """
        soup = BeautifulSoup(html, "html.parser")
        sources = [str(iframe["src"]) for iframe in soup.find_all("iframe", src=True)]

        videos: list[VideoCandidate] = []

        for src in sources:
            match = YOUTUBE_EMBED_RE.search(src)
            if match:
                video_id = match.group(1)
                videos.append(
                    VideoCandidate(
                        url=youtube_watch_url(video_id),
                        title="Embedded demo video",
                        description="Official demo or tutorial video",
                        thumbnail=youtube_thumbnail(video_id),
                        source=VideoSource.EMBEDDED,
                        confidence=self._policy.embedded_youtube_confidence,
                    )
                )

        for src in sources:
            match = VIMEO_EMBED_RE.search(src)
            if match:
                videos.append(
                    VideoCandidate(
                        url=f"https://vimeo.com/{match.group(1)}",
                        title="Vimeo demo video",
                        description="Product demonstration video",
                        source=VideoSource.VIMEO,
                        confidence=self._policy.embedded_vimeo_confidence,
                    )
                )

        return videos

    def rank(self, videos: list[VideoCandidate]) -> list[VideoCandidate]:
        """Deduplicate by URL (first wins), sort by confidence and truncate."""
        unique: list[VideoCandidate] = []
        seen: set[str] = set()
        for video in videos:
            if video.url not in seen:
                seen.add(video.url)
                unique.append(video)

        unique.sort(key=lambda v: -v.confidence)
        return unique[: self._max_videos]
