"""Pagination used by every list endpoint."""

from rest_framework.pagination import PageNumberPagination


class PageNumberWithSizePagination(PageNumberPagination):
    """
    Page-number pagination where the client may pick the page size.

    Query Parameters:
        - page: Page number (default: 1)
        - page_size: Items per page (default: PAGE_SIZE setting, max: 100)

    Example:
        GET /api/hrm/employee-exits/?page=2&page_size=50
    """

    page_size_query_param = "page_size"
    max_page_size = 100
