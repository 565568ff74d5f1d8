"""
Custom pagination classes.
"""
import math

from rest_framework.pagination import PageNumberPagination


class StandardPagination(PageNumberPagination):
    """Standard pagination with configurable page size."""
    page_size = 20
    page_size_query_param = 'limit'
    max_page_size = 100


def page_window(page: int, limit: int):
    """Translate 1-based page/limit query values into an (offset, limit) pair."""
    page = max(int(page or 1), 1)
    limit = min(max(int(limit or StandardPagination.page_size), 1), StandardPagination.max_page_size)
    return (page - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` rows at ``limit`` per page."""
    return math.ceil(total / limit) if limit else 0
