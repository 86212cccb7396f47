"""HTTP fetching on top of a shared httpx client."""

import logging
from typing import Any, Optional

import httpx

from mediascout.core.exceptions import FetchError
from mediascout.core.models import MediaConfig

logger = logging.getLogger(__name__)


def build_client(
    config: MediaConfig, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """Create the client used for one discovery call.

    Args:
        config: Engine configuration (timeout, User-Agent).
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        A new, unopened AsyncClient.
    """
    return httpx.AsyncClient(
        timeout=config.timeout,
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        transport=transport,
    )


class PageFetcher:
    """Fetches pages and turns every transport failure into FetchError."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def get_text(self, url: str, params: Optional[dict[str, Any]] = None) -> str:
        """GET a URL and return its body as text.

        Args:
            url: Absolute URL.
            params: Optional query parameters.

        Returns:
            Response body.

        Raises:
            FetchError: On network error, timeout, invalid URL or non-2xx status.
        """
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"HTTP {e.response.status_code} for {url}") from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise FetchError(f"{type(e).__name__} fetching {url}: {e}") from e

        return response.text

    async def head_content_type(self, url: str) -> Optional[str]:
        """HEAD a URL and return its content type, or None if it is not there."""
        try:
            response = await self._client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.debug("HEAD %s failed: %s", url, e)
            return None

        if not response.is_success:
            return None
        return response.headers.get("content-type", "")
