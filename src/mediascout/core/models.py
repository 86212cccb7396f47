"""Data models for mediascout."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


class PageType(Enum):
    """Kind of key page found on a tool's website."""

    HOMEPAGE = "homepage"
    PRICING = "pricing"
    FEATURES = "features"
    DASHBOARD = "dashboard"
    DEMO = "demo"


class Viewport(Enum):
    """Screen presets used when requesting screenshots."""

    DESKTOP = ("desktop", 1920, 1080)
    TABLET = ("tablet", 768, 1024)
    MOBILE = ("mobile", 375, 667)

    def __init__(self, label: str, width: int, height: int) -> None:
        self.label = label
        self.width = width
        self.height = height


class VideoSource(Enum):
    """Where a video candidate came from."""

    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    EMBEDDED = "embedded"


class LogoSource(Enum):
    """Where a logo candidate came from."""

    FAVICON = "favicon"
    META = "meta"
    OG = "og"
    LOGO_ELEMENT = "logo-element"
    BRAND_ASSET = "brand-asset"


class OperationStatus(Enum):
    """Outcome of a single sub-operation in a discovery call."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass
class MediaConfig:
    """Configuration for a media discovery engine."""

    screenshot_api_key: Optional[str] = None
    video_api_key: Optional[str] = None
    timeout: float = 8.0
    user_agent: str = DEFAULT_USER_AGENT
    max_key_pages: int = 4  # homepage included
    max_videos: int = 10
    max_search_queries: int = 2
    max_results_per_query: int = 5
    require_reachable_site: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MediaConfig":
        """Build a config from MEDIASCOUT_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new MediaConfig.
        """
        env = os.environ if environ is None else environ
        config = cls(
            screenshot_api_key=env.get("MEDIASCOUT_SCREENSHOT_API_KEY") or None,
            video_api_key=env.get("MEDIASCOUT_VIDEO_API_KEY") or None,
        )
        if env.get("MEDIASCOUT_TIMEOUT"):
            config.timeout = float(env["MEDIASCOUT_TIMEOUT"])
        return config


@dataclass(frozen=True)
class KeyPage:
    """A representative same-domain page of a tool's website."""

    url: str
    title: str
    description: str
    page_type: PageType
    confidence: float


@dataclass
class KeyPageScan:
    """Key pages found for a site, and whether its homepage could be fetched."""

    pages: list[KeyPage]
    reachable: bool


@dataclass
class ScreenshotCandidate:
    """A rendered screenshot of a key page at one viewport."""

    url: str
    title: str
    description: str
    page_type: PageType
    confidence: float
    viewport: Viewport

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "type": self.page_type.value,
            "confidence": self.confidence,
            "viewport": self.viewport.label,
        }


@dataclass
class SearchHit:
    """A raw result returned by a video search provider."""

    video_id: str
    title: str
    description: str = ""
    duration: str = ""
    thumbnail: str = ""


@dataclass
class VideoCandidate:
    """A tutorial, demo or embedded video related to a tool."""

    url: str
    title: str
    description: str
    source: VideoSource
    confidence: float
    thumbnail: str = ""
    duration: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "thumbnail": self.thumbnail,
            "duration": self.duration,
            "source": self.source.value,
            "confidence": self.confidence,
        }


@dataclass
class OperationReport:
    """Why a sub-operation did or did not contribute results."""

    operation: str
    target: str
    status: OperationStatus
    reason: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "target": self.target,
            "status": self.status.value,
            "reason": self.reason,
        }


@dataclass
class DiscoveryResult:
    """Everything found for a site in a single discovery call."""

    screenshots: list[ScreenshotCandidate] = field(default_factory=list)
    videos: list[VideoCandidate] = field(default_factory=list)
    diagnostics: list[OperationReport] = field(default_factory=list)

    @property
    def total_found(self) -> int:
        return len(self.screenshots) + len(self.videos)

    @classmethod
    def empty(
        cls, diagnostics: Optional[list[OperationReport]] = None
    ) -> "DiscoveryResult":
        return cls(diagnostics=list(diagnostics or []))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "screenshots": [s.to_dict() for s in self.screenshots],
            "videos": [v.to_dict() for v in self.videos],
            "total_found": self.total_found,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass
class SelectionResult:
    """Bounded shortlist of media picked from a DiscoveryResult."""

    best_screenshots: list[ScreenshotCandidate] = field(default_factory=list)
    best_videos: list[VideoCandidate] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_screenshots": [s.to_dict() for s in self.best_screenshots],
            "best_videos": [v.to_dict() for v in self.best_videos],
        }


@dataclass
class LogoCandidate:
    """A possible logo image for a tool."""

    url: str
    confidence: float
    source: LogoSource
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "url": self.url,
            "confidence": self.confidence,
            "source": self.source.value,
        }
        if self.width is not None and self.height is not None:
            data["size"] = {"width": self.width, "height": self.height}
        return data


@dataclass
class LogoDiscoveryResult:
    """Result of a logo discovery call."""

    logos: list[LogoCandidate] = field(default_factory=list)
    best: Optional[LogoCandidate] = None
    total_found: int = 0
    diagnostics: list[OperationReport] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "logos": [logo.to_dict() for logo in self.logos],
            "best_logo": self.best.to_dict() if self.best else None,
            "total_found": self.total_found,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
