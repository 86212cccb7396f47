"""Screenshot rendering and video search providers."""

from mediascout.providers.factory import ProviderFactory
from mediascout.providers.screenshots import MShotsRenderer, UrlboxRenderer
from mediascout.providers.video_search import (
    YouTubeApiSearch,
    YouTubeScrapeSearch,
    parse_search_results,
)

__all__ = [
    "ProviderFactory",
    "MShotsRenderer",
    "UrlboxRenderer",
    "YouTubeApiSearch",
    "YouTubeScrapeSearch",
    "parse_search_results",
]
