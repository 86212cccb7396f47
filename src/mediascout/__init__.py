"""
mediascout - Find screenshots, videos and logos for an AI tool's website.

A small engine used by a tool directory to enrich a tool's profile page:
it finds the site's key pages, renders them at several viewports, looks for
tutorial and demo videos, and ranks everything it finds.

Usage:
    mediascout https://example.ai
    mediascout discover https://example.ai --json
    mediascout logo https://example.ai
"""

__version__ = "0.1.0"

from mediascout.core.interfaces import ScreenshotRenderer, VideoSearchProvider
from mediascout.core.models import (
    DiscoveryResult,
    KeyPage,
    LogoCandidate,
    LogoDiscoveryResult,
    MediaConfig,
    OperationReport,
    OperationStatus,
    PageType,
    ScreenshotCandidate,
    SelectionResult,
    VideoCandidate,
    VideoSource,
    Viewport,
)
from mediascout.engine.media import MediaDiscovery, select_best_media

__all__ = [
    "__version__",
    # Engine
    "MediaDiscovery",
    "select_best_media",
    # Models
    "DiscoveryResult",
    "KeyPage",
    "LogoCandidate",
    "LogoDiscoveryResult",
    "MediaConfig",
    "OperationReport",
    "OperationStatus",
    "PageType",
    "ScreenshotCandidate",
    "SelectionResult",
    "VideoCandidate",
    "VideoSource",
    "Viewport",
    # Interfaces
    "ScreenshotRenderer",
    "VideoSearchProvider",
]
