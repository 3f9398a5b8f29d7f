"""
Models package for search results, generated pages and errors.
"""

from .errors import ConfigError, PageExtractionError, SearchEngineError, ShapeError, TransportError
from .search import (
    GeneratedPage,
    PageOutcome,
    PaginationData,
    ResultPageRequest,
    SearchPage,
    SearchResult,
)

__all__ = [
    "ConfigError",
    "GeneratedPage",
    "PageExtractionError",
    "PageOutcome",
    "PaginationData",
    "ResultPageRequest",
    "SearchEngineError",
    "SearchPage",
    "SearchResult",
    "ShapeError",
    "TransportError",
]
