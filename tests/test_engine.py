"""Tests for the media discovery engine and media selection."""

import asyncio
import logging

import httpx

from conftest import FakeSearch
from mediascout.core.exceptions import ScreenshotError
from mediascout.core.interfaces import ScreenshotRenderer
from mediascout.core.models import (
    DiscoveryResult,
    MediaConfig,
    OperationStatus,
    PageType,
    ScreenshotCandidate,
    VideoCandidate,
    VideoSource,
    Viewport,
)
from mediascout.core.scoring import DEFAULT_POLICY
from mediascout.engine.media import MediaDiscovery, select_best_media

SITE = "https://acme.ai"


class FlakyRenderer(ScreenshotRenderer):
    """Renderer that fails for one viewport."""

    def __init__(self, failing=Viewport.MOBILE):
        self.failing = failing

    @property
    def name(self):
        return "flaky"

    async def render(self, page_url, viewport):
        if viewport is self.failing:
            raise ScreenshotError("renderer timed out")
        return f"https://shots.test/{viewport.label}?u={page_url}"


def _engine(transport, **kwargs):
    kwargs.setdefault("video_search", FakeSearch())
    return MediaDiscovery(MediaConfig(), transport=transport, **kwargs)


def _shot(page_type, viewport=Viewport.DESKTOP, confidence=1.0, name="s"):
    return ScreenshotCandidate(
        url=f"https://shots.test/{name}",
        title=name,
        description="",
        page_type=page_type,
        confidence=confidence,
        viewport=viewport,
    )


def _video(name, confidence):
    return VideoCandidate(
        url=f"https://www.youtube.com/watch?v={name}",
        title=name,
        description="",
        source=VideoSource.YOUTUBE,
        confidence=confidence,
    )


class TestDiscoverMedia:
    """Tests for MediaDiscovery.discover_media."""

    def test_unreachable_site_yields_empty_result(self, make_transport):
        """Test a homepage network error degrades to an empty result."""
        transport = make_transport({"https://acme.ai/": httpx.ConnectError("refused")})
        result = asyncio.run(_engine(transport).discover_media(SITE))

        assert result.screenshots == []
        assert result.videos == []
        assert result.total_found == 0
        skipped = [d for d in result.diagnostics if d.operation == "capture_screenshots"]
        assert skipped[0].status is OperationStatus.SKIPPED

    def test_malformed_url_does_not_raise(self, make_transport):
        """Test a malformed URL returns a result instead of raising."""
        result = asyncio.run(_engine(make_transport({})).discover_media("::::"))
        assert result.total_found >= 0

    def test_full_discovery(self, make_transport, sample_homepage, fake_search):
        """Test screenshots and videos are collected from a reachable site."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        result = asyncio.run(_engine(transport, video_search=fake_search).discover_media(SITE))

        # homepage, pricing, features, demo at three viewports each
        assert len(result.screenshots) == 12
        assert len(result.videos) == 4
        assert result.total_found == 16

        first = result.screenshots[0]
        assert first.page_type is PageType.HOMEPAGE
        assert first.viewport is Viewport.DESKTOP
        assert first.title == "Homepage - desktop"
        assert first.url.startswith("https://s.wordpress.com/mshots/v1/")

    def test_screenshots_sorted_by_composite_score(self, make_transport, sample_homepage):
        """Test screenshots are ordered by descending composite score."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        result = asyncio.run(_engine(transport).discover_media(SITE))

        scores = [DEFAULT_POLICY.screenshot_score(s) for s in result.screenshots]
        assert scores == sorted(scores, reverse=True)

    def test_at_most_one_screenshot_per_page_and_viewport(
        self, make_transport, sample_homepage
    ):
        """Test no page and viewport pair is rendered twice."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        result = asyncio.run(_engine(transport).discover_media(SITE))

        pairs = [(s.title, s.viewport) for s in result.screenshots]
        assert len(pairs) == len(set(pairs))

    def test_failed_render_is_skipped(self, make_transport, sample_homepage):
        """Test one failing viewport does not abort the other captures."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        engine = _engine(transport, renderer=FlakyRenderer())
        result = asyncio.run(engine.discover_media(SITE))

        assert len(result.screenshots) == 8
        assert all(s.viewport is not Viewport.MOBILE for s in result.screenshots)
        failed = [
            d
            for d in result.diagnostics
            if d.operation == "render_screenshot" and d.status is OperationStatus.FAILED
        ]
        assert len(failed) == 4

    def test_failed_render_logged_once(self, make_transport, sample_homepage, caplog):
        """Test each recovered render failure produces a single warning."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        engine = _engine(transport, renderer=FlakyRenderer())

        with caplog.at_level(logging.WARNING):
            asyncio.run(engine.discover_media(SITE))

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 4

    def test_uncaught_branch_error_degrades_to_empty(
        self, make_transport, sample_homepage, monkeypatch
    ):
        """Test an unexpected branch error yields an empty result and a report."""

        async def boom(self, site_url, diagnostics=None):
            raise RuntimeError("unexpected")

        monkeypatch.setattr(
            "mediascout.engine.media.ScreenshotCapturer.capture_screenshots", boom
        )
        transport = make_transport({"https://acme.ai/": sample_homepage})
        result = asyncio.run(_engine(transport).discover_media(SITE))

        assert result.total_found == 0
        assert result.diagnostics[-1].operation == "discover_media"
        assert result.diagnostics[-1].status is OperationStatus.FAILED

    def test_reachability_check_can_be_disabled(self, make_transport):
        """Test homepage screenshots are rendered for an unreachable site when allowed."""
        transport = make_transport({"https://acme.ai/": 500})
        config = MediaConfig(require_reachable_site=False)
        engine = MediaDiscovery(config, video_search=FakeSearch(), transport=transport)
        result = asyncio.run(engine.discover_media(SITE))

        assert len(result.screenshots) == 3
        assert {s.page_type for s in result.screenshots} == {PageType.HOMEPAGE}


class TestEngineOperations:
    """Tests for the single-step engine methods."""

    def test_find_key_pages(self, make_transport, sample_homepage):
        """Test the engine finds the homepage plus three key pages."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        pages = asyncio.run(_engine(transport).find_key_pages(SITE))
        assert len(pages) == 4

    def test_extract_tool_name(self, make_transport, sample_homepage):
        """Test the engine extracts the tool name from the homepage."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        assert asyncio.run(_engine(transport).extract_tool_name(SITE)) == "Acme"

    def test_capture_screenshots(self, make_transport, sample_homepage):
        """Test four pages at three viewports give twelve screenshots."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        shots = asyncio.run(_engine(transport).capture_screenshots(SITE))
        assert len(shots) == 12

    def test_discover_videos(self, make_transport, sample_homepage):
        """Test embedded videos are found without any search hits."""
        transport = make_transport({"https://acme.ai/": sample_homepage})
        videos = asyncio.run(_engine(transport).discover_videos(SITE))
        assert [v.source for v in videos] == [VideoSource.EMBEDDED, VideoSource.VIMEO]


class TestSelectBestMedia:
    """Tests for select_best_media."""

    def test_backfills_from_other_page_types(self):
        """Test two homepage shots are topped up with the next best shot."""
        result = DiscoveryResult(
            screenshots=[
                _shot(PageType.HOMEPAGE, name="h1"),
                _shot(PageType.FEATURES, name="f1"),
                _shot(PageType.HOMEPAGE, Viewport.TABLET, name="h2"),
                _shot(PageType.PRICING, name="p1"),
                _shot(PageType.DEMO, name="d1"),
            ],
            videos=[_video("a", 0.9), _video("b", 0.8), _video("c", 0.7), _video("d", 0.1)],
        )
        best = select_best_media(result)

        assert [s.title for s in best.best_screenshots] == ["h1", "h2", "f1"]
        assert [v.title for v in best.best_videos] == ["a", "b"]

    def test_homepage_priority(self):
        """Test three homepage shots crowd out every other page type."""
        result = DiscoveryResult(
            screenshots=[
                _shot(PageType.FEATURES, name="f1"),
                _shot(PageType.HOMEPAGE, name="h1"),
                _shot(PageType.HOMEPAGE, Viewport.TABLET, name="h2"),
                _shot(PageType.HOMEPAGE, Viewport.MOBILE, name="h3"),
            ]
        )
        best = select_best_media(result)
        assert [s.title for s in best.best_screenshots] == ["h1", "h2", "h3"]

    def test_small_pool(self):
        """Test a pool smaller than the limits is returned whole."""
        result = DiscoveryResult(screenshots=[_shot(PageType.DEMO)], videos=[])
        best = select_best_media(result)
        assert len(best.best_screenshots) == 1
        assert best.best_videos == []

    def test_pure(self):
        """Test selecting twice gives the same answer and leaves the input alone."""
        result = DiscoveryResult(
            screenshots=[_shot(PageType.PRICING, name="p"), _shot(PageType.HOMEPAGE, name="h")],
            videos=[_video("a", 0.5)],
        )
        before = result.to_dict()

        assert select_best_media(result) == select_best_media(result)
        assert result.to_dict() == before

    def test_engine_method_delegates(self):
        """Test the engine method matches the module-level selector."""
        result = DiscoveryResult(screenshots=[_shot(PageType.HOMEPAGE)])
        engine = MediaDiscovery()
        assert engine.select_best_media(result) == select_best_media(result)
