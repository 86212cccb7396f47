"""Screenshot capture for a site's key pages."""

import logging
from typing import Optional

from mediascout.core import diagnostics as ops
from mediascout.core.diagnostics import Diagnostics
from mediascout.core.interfaces import ScreenshotRenderer
from mediascout.core.models import ScreenshotCandidate, Viewport
from mediascout.core.scoring import DEFAULT_POLICY, ScoringPolicy
from mediascout.discovery.pages import PageClassifier

logger = logging.getLogger(__name__)


class ScreenshotCapturer:
    """Render every key page of a site at every viewport."""

    def __init__(
        self,
        classifier: PageClassifier,
        renderer: ScreenshotRenderer,
        policy: ScoringPolicy = DEFAULT_POLICY,
        viewports: tuple[Viewport, ...] = tuple(Viewport),
        require_reachable_site: bool = True,
    ) -> None:
        """Initialize the capturer.

        Args:
            classifier: Finds the key pages to render.
            renderer: Screenshot rendering service.
            policy: Priorities used to order the screenshots.
            viewports: Screen presets to render at.
            require_reachable_site: Skip rendering when the homepage can't be
                fetched.
        """
        self._classifier = classifier
        self._renderer = renderer
        self._policy = policy
        self._viewports = viewports
        self._require_reachable_site = require_reachable_site

    async def capture_screenshots(
        self, site_url: str, diagnostics: Optional[Diagnostics] = None
    ) -> list[ScreenshotCandidate]:
        """Capture screenshots of a site's key pages.

        Args:
            site_url: Seed URL of the tool's website.
            diagnostics: Collector for this call.

        Returns:
            Screenshots sorted by page type, viewport and confidence, best first.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        screenshots: list[ScreenshotCandidate] = []

        try:
            scan = await self._classifier.scan_site(site_url, diagnostics)

            if not scan.reachable and self._require_reachable_site:
                diagnostics.skipped(
                    ops.CAPTURE_SCREENSHOTS, site_url, "site unreachable, nothing to render"
                )
                return []

            for page in scan.pages:
                for viewport in self._viewports:
                    target = f"{page.url} ({viewport.label})"
                    try:
                        image_url = await self._renderer.render(page.url, viewport)
                    except Exception as e:
                        diagnostics.failed(ops.RENDER_SCREENSHOT, target, str(e))
                        continue

                    diagnostics.success(ops.RENDER_SCREENSHOT, target)
                    screenshots.append(
                        ScreenshotCandidate(
                            url=image_url,
                            title=f"{page.title} - {viewport.label}",
                            description=page.description,
                            page_type=page.page_type,
                            confidence=page.confidence,
                            viewport=viewport,
                        )
                    )

            screenshots.sort(key=lambda s: -self._policy.screenshot_score(s))
            return screenshots

        except Exception as e:
            logger.exception("Error in screenshot capture for %s", site_url)
            diagnostics.failed(ops.CAPTURE_SCREENSHOTS, site_url, str(e))
            return []
