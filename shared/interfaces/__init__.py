# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import StandardPagination, page_window, total_pages

__all__ = ['custom_exception_handler', 'StandardPagination', 'page_window', 'total_pages']
