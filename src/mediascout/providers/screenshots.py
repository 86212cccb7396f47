"""Screenshot renderers backed by URL-template thumbnail services."""

from urllib.parse import quote, urlparse

from mediascout.core.exceptions import ScreenshotError
from mediascout.core.interfaces import ScreenshotRenderer
from mediascout.core.models import Viewport


def _encoded_target(page_url: str) -> str:
    parsed = urlparse(page_url)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise ScreenshotError(f"Cannot render non-web URL: {page_url!r}")
    return quote(page_url, safe="")


class MShotsRenderer(ScreenshotRenderer):
    """Public thumbnail endpoint that needs no API key."""

    BASE_URL = "https://s.wordpress.com/mshots/v1"

    @property
    def name(self) -> str:
        return "mshots"

    async def render(self, page_url: str, viewport: Viewport) -> str:
        encoded = _encoded_target(page_url)
        return f"{self.BASE_URL}/{encoded}?w={viewport.width}&h={viewport.height}"


class UrlboxRenderer(ScreenshotRenderer):
    """Keyed rendering API, used when a screenshot API key is configured."""

    BASE_URL = "https://api.urlbox.io/v1"

    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ValueError("UrlboxRenderer requires an API key")
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "urlbox"

    async def render(self, page_url: str, viewport: Viewport) -> str:
        encoded = _encoded_target(page_url)
        return (
            f"{self.BASE_URL}/{self._api_key}/png?url={encoded}"
            f"&width={viewport.width}&height={viewport.height}"
            "&retina=false&full_page=false&delay=3000"
        )
