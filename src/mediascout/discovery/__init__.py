"""Discovery of key pages, tool names, videos and logos."""

from mediascout.discovery.logos import LogoDiscoverer, select_best_logo
from mediascout.discovery.names import extract_name_from_html, extract_tool_name
from mediascout.discovery.pages import PageClassifier
from mediascout.discovery.videos import VideoDiscoverer, build_queries

__all__ = [
    "LogoDiscoverer",
    "PageClassifier",
    "VideoDiscoverer",
    "build_queries",
    "extract_name_from_html",
    "extract_tool_name",
    "select_best_logo",
]
