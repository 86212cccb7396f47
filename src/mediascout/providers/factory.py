"""Factory for choosing screenshot and video search providers."""

from mediascout.core.interfaces import ScreenshotRenderer, VideoSearchProvider
from mediascout.core.models import MediaConfig


class ProviderFactory:
    """Builds the providers a MediaConfig asks for."""

    @classmethod
    def get_renderer(cls, config: MediaConfig) -> ScreenshotRenderer:
        """Get a screenshot renderer.

        Args:
            config: Engine configuration.

        Returns:
            Urlbox renderer when an API key is configured, public mshots otherwise.
        """
        from mediascout.providers.screenshots import MShotsRenderer, UrlboxRenderer

        if config.screenshot_api_key:
            return UrlboxRenderer(config.screenshot_api_key)
        return MShotsRenderer()

    @classmethod
    def get_video_search(cls, config: MediaConfig) -> VideoSearchProvider:
        """Get a video search provider.

        Args:
            config: Engine configuration.

        Returns:
            Keyed API provider when a video API key is configured, the
            results-page scraper otherwise.
        """
        from mediascout.providers.video_search import (
            YouTubeApiSearch,
            YouTubeScrapeSearch,
        )

        if config.video_api_key:
            return YouTubeApiSearch(config.video_api_key)
        return YouTubeScrapeSearch()
