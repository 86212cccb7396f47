"""Exceptions raised inside the mediascout pipeline.

None of these escape the engine's public methods; they are caught at the
smallest scope and turned into diagnostics.
"""


class MediaScoutError(Exception):
    """Base class for mediascout errors."""


class FetchError(MediaScoutError):
    """A page could not be fetched (network error, timeout, non-2xx, bad URL)."""


class ScreenshotError(MediaScoutError):
    """A screenshot could not be produced for a page and viewport."""


class SearchParseError(MediaScoutError):
    """A video search response did not contain a usable result payload."""
