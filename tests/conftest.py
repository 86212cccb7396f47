"""Pytest configuration and fixtures."""

import json

import httpx
import pytest

from mediascout.core.interfaces import VideoSearchProvider
from mediascout.core.models import SearchHit


class FakeSearch(VideoSearchProvider):
    """Video search provider returning canned hits and recording queries."""

    def __init__(self, hits=None, error=None):
        self.hits = hits or []
        self.error = error
        self.queries = []

    @property
    def name(self):
        return "fake"

    async def search(self, fetcher, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.hits)


def build_transport(routes):
    """Build an httpx.MockTransport from a mapping of URL to response.

    Keys are "scheme://host/path" (query string ignored), optionally prefixed
    with "HEAD " for HEAD requests. Values are HTML strings, status codes,
    httpx.Response objects or exceptions to raise. Anything else is a 404.
    """

    def handler(request):
        key = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if request.method == "HEAD":
            key = f"HEAD {key}"
        value = routes.get(key)

        if isinstance(value, Exception):
            raise value
        if isinstance(value, httpx.Response):
            return value
        if isinstance(value, int):
            return httpx.Response(value)
        if isinstance(value, str):
            return httpx.Response(
                200, text=value, headers={"content-type": "text/html; charset=utf-8"}
            )
        return httpx.Response(404)

    return httpx.MockTransport(handler)


def youtube_results_page(renderers):
    """Wrap videoRenderer dicts in a YouTube-like results page."""
    data = {
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {
                    "sectionListRenderer": {
                        "contents": [
                            {
                                "itemSectionRenderer": {
                                    "contents": [{"videoRenderer": r} for r in renderers]
                                }
                            }
                        ]
                    }
                }
            }
        }
    }
    return (
        "<html><head></head><body>"
        f"<script>var ytInitialData = {json.dumps(data)};</script>"
        "</body></html>"
    )


def video_renderer(video_id, title, description="", length="10:00"):
    return {
        "videoId": video_id,
        "title": {"runs": [{"text": title}]},
        "descriptionSnippet": {"runs": [{"text": description}]},
        "lengthText": {"simpleText": length},
        "thumbnail": {
            "thumbnails": [
                {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
                {"url": f"https://i.ytimg.com/vi/{video_id}/hq720.jpg"},
            ]
        },
    }


@pytest.fixture
def make_transport():
    """Factory fixture for mock HTTP transports."""
    return build_transport


@pytest.fixture
def fake_search():
    return FakeSearch(
        hits=[
            SearchHit(
                video_id="vid00000001",
                title="Acme official tutorial",
                description="Learn Acme step by step",
                duration="12:01",
                thumbnail="https://i.ytimg.com/vi/vid00000001/hq720.jpg",
            ),
            SearchHit(video_id="vid00000002", title="Random clip", description=""),
        ]
    )


@pytest.fixture
def sample_homepage():
    """Homepage of a fictional AI tool."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Acme AI | Write faster</title>
        <meta property="og:site_name" content="Acme">
        <meta property="og:title" content="Acme AI - the writing assistant">
    </head>
    <body>
        <nav>
            <a href="/pricing">Pricing Plans</a>
            <a href="/features">Features</a>
            <a href="https://app.acme.ai/dashboard">Dashboard</a>
            <a href="https://other.com/pricing">Pricing</a>
            <a href="/demo">Try the demo</a>
        </nav>
        <h1>Write faster with Acme</h1>
        <iframe src="https://www.youtube.com/embed/abc12345678"></iframe>
        <iframe src="https://player.vimeo.com/video/123456789"></iframe>
    </body>
    </html>
    """
