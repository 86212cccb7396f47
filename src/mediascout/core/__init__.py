"""Core models and interfaces for mediascout."""

from mediascout.core.diagnostics import Diagnostics
from mediascout.core.exceptions import (
    FetchError,
    MediaScoutError,
    ScreenshotError,
    SearchParseError,
)
from mediascout.core.interfaces import ScreenshotRenderer, VideoSearchProvider
from mediascout.core.models import (
    DiscoveryResult,
    KeyPage,
    KeyPageScan,
    LogoCandidate,
    LogoDiscoveryResult,
    LogoSource,
    MediaConfig,
    OperationReport,
    OperationStatus,
    PageType,
    ScreenshotCandidate,
    SearchHit,
    SelectionResult,
    VideoCandidate,
    VideoSource,
    Viewport,
)
from mediascout.core.scoring import DEFAULT_POLICY, PageTypeRule, ScoringPolicy

__all__ = [
    "DiscoveryResult",
    "KeyPage",
    "KeyPageScan",
    "LogoCandidate",
    "LogoDiscoveryResult",
    "LogoSource",
    "MediaConfig",
    "OperationReport",
    "OperationStatus",
    "PageType",
    "ScreenshotCandidate",
    "SearchHit",
    "SelectionResult",
    "VideoCandidate",
    "VideoSource",
    "Viewport",
    "Diagnostics",
    "MediaScoutError",
    "FetchError",
    "ScreenshotError",
    "SearchParseError",
    "ScreenshotRenderer",
    "VideoSearchProvider",
    "DEFAULT_POLICY",
    "PageTypeRule",
    "ScoringPolicy",
]
