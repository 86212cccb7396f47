"""Tool name extraction from page metadata."""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from mediascout.core.exceptions import FetchError
from mediascout.engine.fetcher import PageFetcher

logger = logging.getLogger(__name__)

_DELIMITER_RE = re.compile(r"[|-]")


def normalize_name(text: Optional[str]) -> str:
    """Keep the part of a title before the first '|' or '-'."""
    if not text:
        return ""
    return _DELIMITER_RE.split(text, maxsplit=1)[0].strip()


def _meta_content(soup: BeautifulSoup, prop: str) -> Optional[str]:
    tag = soup.find("meta", attrs={"property": prop})
    if tag is None:
        return None
    content = tag.get("content")
    return str(content) if content else None


def extract_name_from_html(html: str) -> Optional[str]:
    """Pick the most likely display name of a tool from its homepage.

    Candidates, in order: og:site_name, og:title, <title>, first <h1>.

    Args:
        html: Homepage HTML.

    Returns:
        The first non-empty normalized candidate, or None.
    """
    soup = BeautifulSoup(html, "html.parser")

    title = soup.title.get_text() if soup.title else None
    h1 = soup.find("h1")

    candidates = [
        _meta_content(soup, "og:site_name"),
        _meta_content(soup, "og:title"),
        title,
        h1.get_text(" ", strip=True) if h1 else None,
    ]

    for candidate in candidates:
        name = normalize_name(candidate)
        if name:
            return name
    return None


async def extract_tool_name(fetcher: PageFetcher, site_url: str) -> Optional[str]:
    """Fetch a site's homepage and extract the tool name from it.

    Returns:
        The name, or None if the page cannot be fetched or has no usable title.
    """
    try:
        html = await fetcher.get_text(site_url)
    except FetchError as e:
        logger.debug("Cannot extract tool name: %s", e)
        return None
    return extract_name_from_html(html)
