"""Video search providers.

The default provider scrapes YouTube's public results page, which carries its
result set as a JSON payload (``ytInitialData``) inside a script tag.
"""

import json
import re
from collections.abc import Iterator
from typing import Any

from mediascout.core.exceptions import SearchParseError
from mediascout.core.interfaces import VideoSearchProvider
from mediascout.core.models import SearchHit
from mediascout.engine.fetcher import PageFetcher

_INITIAL_DATA_RE = re.compile(
    r"(?:var\s+ytInitialData|window\[[\"']ytInitialData[\"']\])\s*=\s*(?=\{)"
)


def _text(node: Any) -> str:
    """Flatten a YouTube text node (``simpleText`` or a ``runs`` array)."""
    if not isinstance(node, dict):
        return ""
    if "simpleText" in node:
        return str(node["simpleText"]).strip()
    runs = node.get("runs") or []
    return "".join(str(run.get("text", "")) for run in runs if isinstance(run, dict)).strip()


def _iter_video_renderers(node: Any) -> Iterator[dict[str, Any]]:
    if isinstance(node, dict):
        renderer = node.get("videoRenderer")
        if isinstance(renderer, dict):
            yield renderer
        for value in node.values():
            yield from _iter_video_renderers(value)
    elif isinstance(node, list):
        for item in node:
            yield from _iter_video_renderers(item)


def _hit_from_renderer(renderer: dict[str, Any]) -> SearchHit | None:
    video_id = renderer.get("videoId")
    title = _text(renderer.get("title"))
    if not video_id or not title:
        return None

    description = _text(renderer.get("descriptionSnippet"))
    if not description:
        snippets = renderer.get("detailedMetadataSnippets") or []
        if snippets and isinstance(snippets[0], dict):
            description = _text(snippets[0].get("snippetText"))

    thumbnails = (renderer.get("thumbnail") or {}).get("thumbnails") or []
    thumbnail = thumbnails[-1].get("url", "") if thumbnails else ""

    return SearchHit(
        video_id=str(video_id),
        title=title,
        description=description,
        duration=_text(renderer.get("lengthText")),
        thumbnail=thumbnail,
    )


def parse_search_results(html: str) -> list[SearchHit]:
    """Extract search hits from a YouTube results page.

    Args:
        html: Raw results page.

    Returns:
        Hits in page order, without duplicates.

    Raises:
        SearchParseError: If the page has no parseable ``ytInitialData`` payload.
    """
    match = _INITIAL_DATA_RE.search(html)
    if not match:
        raise SearchParseError("No ytInitialData payload in results page")

    # decode only the first object; more assignments may follow in the same script
    try:
        data, _ = json.JSONDecoder().raw_decode(html, match.end())
    except json.JSONDecodeError as e:
        raise SearchParseError(f"Malformed ytInitialData payload: {e}") from e

    hits: list[SearchHit] = []
    seen: set[str] = set()
    for renderer in _iter_video_renderers(data):
        hit = _hit_from_renderer(renderer)
        if hit and hit.video_id not in seen:
            seen.add(hit.video_id)
            hits.append(hit)
    return hits


class YouTubeScrapeSearch(VideoSearchProvider):
    """Unauthenticated search through YouTube's results page."""

    RESULTS_URL = "https://www.youtube.com/results"

    @property
    def name(self) -> str:
        return "youtube_scrape"

    async def search(self, fetcher: PageFetcher, query: str) -> list[SearchHit]:
        html = await fetcher.get_text(self.RESULTS_URL, params={"search_query": query})
        return parse_search_results(html)


class YouTubeApiSearch(VideoSearchProvider):
    """Search through the YouTube Data API (keyed)."""

    def __init__(self, api_key: str) -> None:
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "youtube_api"

    async def search(self, fetcher: PageFetcher, query: str) -> list[SearchHit]:
        raise NotImplementedError("YouTube Data API search is not implemented")
