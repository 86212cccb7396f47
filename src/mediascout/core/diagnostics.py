"""Per-call collection of sub-operation outcomes."""

import logging
from typing import Optional

from mediascout.core.models import OperationReport, OperationStatus

logger = logging.getLogger(__name__)

# Operation names used in reports
FETCH_HOMEPAGE = "fetch_homepage"
CLASSIFY_LINKS = "classify_links"
RENDER_SCREENSHOT = "render_screenshot"
CAPTURE_SCREENSHOTS = "capture_screenshots"
EXTRACT_NAME = "extract_name"
VIDEO_SEARCH = "video_search"
EMBEDDED_VIDEOS = "embedded_videos"
DISCOVER_VIDEOS = "discover_videos"
DISCOVER_MEDIA = "discover_media"
DISCOVER_LOGO = "discover_logo"


class Diagnostics:
    """Collects an OperationReport for every sub-operation of one call."""

    def __init__(self) -> None:
        self._reports: list[OperationReport] = []

    @property
    def reports(self) -> list[OperationReport]:
        return list(self._reports)

    def record(
        self,
        operation: str,
        target: str,
        status: OperationStatus,
        reason: Optional[str] = None,
    ) -> OperationReport:
        report = OperationReport(
            operation=operation, target=target, status=status, reason=reason
        )
        self._reports.append(report)
        if status is OperationStatus.FAILED:
            logger.warning("%s failed for %s: %s", operation, target, reason)
        else:
            logger.debug("%s %s for %s %s", operation, status.value, target, reason or "")
        return report

    def success(self, operation: str, target: str, reason: Optional[str] = None) -> None:
        self.record(operation, target, OperationStatus.SUCCESS, reason)

    def skipped(self, operation: str, target: str, reason: str) -> None:
        self.record(operation, target, OperationStatus.SKIPPED, reason)

    def failed(self, operation: str, target: str, reason: str) -> None:
        self.record(operation, target, OperationStatus.FAILED, reason)

    def not_implemented(self, operation: str, target: str, reason: str) -> None:
        self.record(operation, target, OperationStatus.NOT_IMPLEMENTED, reason)

    def for_operation(self, operation: str) -> list[OperationReport]:
        """Return reports recorded for one operation name."""
        return [r for r in self._reports if r.operation == operation]

    def __len__(self) -> int:
        return len(self._reports)
