"""Tests for the data models."""

from mediascout.core.models import (
    DiscoveryResult,
    LogoCandidate,
    LogoSource,
    MediaConfig,
    OperationReport,
    OperationStatus,
    PageType,
    ScreenshotCandidate,
    VideoCandidate,
    VideoSource,
    Viewport,
)


class TestMediaConfig:
    """Tests for MediaConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = MediaConfig()
        assert config.screenshot_api_key is None
        assert config.video_api_key is None
        assert config.timeout == 8.0
        assert config.max_key_pages == 4
        assert config.max_videos == 10
        assert config.max_search_queries == 2
        assert config.require_reachable_site is True
        assert "Mozilla/5.0" in config.user_agent

    def test_from_env(self):
        """Test reading keys and timeout from an explicit mapping."""
        config = MediaConfig.from_env(
            {
                "MEDIASCOUT_SCREENSHOT_API_KEY": "shot-key",
                "MEDIASCOUT_VIDEO_API_KEY": "video-key",
                "MEDIASCOUT_TIMEOUT": "3.5",
            }
        )
        assert config.screenshot_api_key == "shot-key"
        assert config.video_api_key == "video-key"
        assert config.timeout == 3.5

    def test_from_env_empty_values(self):
        """Test that empty variables leave keys unset."""
        config = MediaConfig.from_env({"MEDIASCOUT_SCREENSHOT_API_KEY": ""})
        assert config.screenshot_api_key is None
        assert config.timeout == 8.0


class TestViewport:
    """Tests for the Viewport presets."""

    def test_dimensions(self):
        """Test the fixed pixel dimensions."""
        assert (Viewport.DESKTOP.width, Viewport.DESKTOP.height) == (1920, 1080)
        assert (Viewport.TABLET.width, Viewport.TABLET.height) == (768, 1024)
        assert (Viewport.MOBILE.width, Viewport.MOBILE.height) == (375, 667)

    def test_labels_in_order(self):
        """Test labels and iteration order."""
        assert [v.label for v in Viewport] == ["desktop", "tablet", "mobile"]


class TestDiscoveryResult:
    """Tests for DiscoveryResult."""

    def _screenshot(self):
        return ScreenshotCandidate(
            url="https://shots.example/1.png",
            title="Homepage - desktop",
            description="Main landing page",
            page_type=PageType.HOMEPAGE,
            confidence=1.0,
            viewport=Viewport.DESKTOP,
        )

    def _video(self):
        return VideoCandidate(
            url="https://www.youtube.com/watch?v=abc",
            title="Demo",
            description="",
            source=VideoSource.EMBEDDED,
            confidence=0.9,
        )

    def test_total_found(self):
        """Test total_found counts screenshots and videos."""
        result = DiscoveryResult(
            screenshots=[self._screenshot(), self._screenshot()], videos=[self._video()]
        )
        assert result.total_found == 3

    def test_empty(self):
        """Test the empty result keeps diagnostics only."""
        report = OperationReport("discover_media", "x", OperationStatus.FAILED, "boom")
        result = DiscoveryResult.empty([report])
        assert result.screenshots == []
        assert result.videos == []
        assert result.total_found == 0
        assert result.diagnostics == [report]

    def test_to_dict(self):
        """Test converting a result to a JSON-ready dictionary."""
        result = DiscoveryResult(screenshots=[self._screenshot()], videos=[self._video()])
        data = result.to_dict()

        assert data["total_found"] == 2
        assert data["screenshots"][0]["type"] == "homepage"
        assert data["screenshots"][0]["viewport"] == "desktop"
        assert data["videos"][0]["source"] == "embedded"
        assert data["videos"][0]["thumbnail"] == ""
        assert data["diagnostics"] == []


class TestLogoCandidate:
    """Tests for LogoCandidate."""

    def test_to_dict_with_size(self):
        """Test the size is serialized when both dimensions are known."""
        logo = LogoCandidate(
            url="https://a.ai/icon.png",
            confidence=1.0,
            source=LogoSource.FAVICON,
            width=180,
            height=180,
        )
        assert logo.to_dict()["size"] == {"width": 180, "height": 180}

    def test_to_dict_without_size(self):
        """Test the size is omitted when a dimension is missing."""
        logo = LogoCandidate(url="https://a.ai/og.png", confidence=0.7, source=LogoSource.OG)
        assert "size" not in logo.to_dict()
        assert logo.to_dict()["source"] == "og"


class TestOperationStatus:
    """Tests for OperationStatus enum."""

    def test_status_values(self):
        """Test status enum values."""
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.SKIPPED.value == "skipped"
        assert OperationStatus.FAILED.value == "failed"
        assert OperationStatus.NOT_IMPLEMENTED.value == "not_implemented"
