"""Abstract interfaces for mediascout."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mediascout.core.models import SearchHit, Viewport

if TYPE_CHECKING:
    from mediascout.engine.fetcher import PageFetcher


class ScreenshotRenderer(ABC):
    """Abstract base class for screenshot rendering services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this renderer."""
        ...

    @abstractmethod
    async def render(self, page_url: str, viewport: Viewport) -> str:
        """Produce an embeddable screenshot URL for a page.

        Args:
            page_url: Absolute URL of the page to capture.
            viewport: Screen preset to render at.

        Returns:
            Image URL.

        Raises:
            ScreenshotError: If no screenshot can be produced.
        """
        ...


class VideoSearchProvider(ABC):
    """Abstract base class for video search surfaces."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this provider."""
        ...

    @abstractmethod
    async def search(self, fetcher: "PageFetcher", query: str) -> list[SearchHit]:
        """Search for videos matching a query.

        Args:
            fetcher: HTTP fetcher bound to the current call.
            query: Search query.

        Returns:
            Hits in the order the provider ranked them.

        Raises:
            FetchError: If the search surface cannot be reached.
            SearchParseError: If the response holds no usable payload.
            NotImplementedError: If the provider is not available yet.
        """
        ...
