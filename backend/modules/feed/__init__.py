"""
Feed module.

Public API:
- IFeedService: Interface for the home feed
- clamp_page: Pagination normalization used by the feed
"""

from .interfaces import IFeedService
from .service import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, clamp_page

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "IFeedService",
    "clamp_page",
]
