"""
Tests for custom pagination classes.
"""

import pytest
from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from libs.drf.pagination import PageNumberWithSizePagination


@pytest.fixture
def pagination_instance():
    return PageNumberWithSizePagination()


@pytest.fixture
def request_factory():
    return APIRequestFactory()


class TestPageNumberWithSizePagination:
    def test_default_page_size_comes_from_settings(self, pagination_instance):
        assert pagination_instance.page_size == 25

    def test_client_can_pick_page_size(self, pagination_instance, request_factory):
        request = Request(request_factory.get("/api/hrm/employee-exits/", {"page_size": 10}))

        page = pagination_instance.paginate_queryset(list(range(40)), request)

        assert page == list(range(10))
        assert pagination_instance.get_paginated_response(page).data["count"] == 40

    def test_page_size_is_capped(self, pagination_instance, request_factory):
        request = Request(request_factory.get("/api/hrm/employee-exits/", {"page_size": 500}))

        page = pagination_instance.paginate_queryset(list(range(250)), request)

        assert len(page) == 100

    def test_second_page(self, pagination_instance, request_factory):
        request = Request(request_factory.get("/api/hrm/employee-exits/", {"page": 2, "page_size": 15}))

        page = pagination_instance.paginate_queryset(list(range(20)), request)

        assert page == list(range(15, 20))
        assert pagination_instance.get_paginated_response(page).data["next"] is None
