"""Unit tests for the list response envelope."""

import pytest
from starlette.datastructures import URL

from domain.errors import ErrorKind, ManagementError
from presentation.api.v1.pagination import PaginationParams, create_list_response, paginate

URL_BASE = URL("http://testserver/portal/environments/DEFAULT/applications?order=name")


class TestPaginate:
    """Test cutting pages out of a list."""

    def test_first_page(self):
        page = paginate(list(range(25)), PaginationParams(page=1, size=10))
        assert page.items == list(range(10))
        assert (page.first, page.last, page.total_pages) == (1, 10, 3)

    def test_last_partial_page(self):
        page = paginate(list(range(25)), PaginationParams(page=3, size=10))
        assert page.items == [20, 21, 22, 23, 24]
        assert (page.first, page.last) == (21, 25)

    def test_page_beyond_the_end_is_invalid(self):
        with pytest.raises(ManagementError) as exc_info:
            paginate(list(range(5)), PaginationParams(page=2, size=5))
        assert exc_info.value.kind is ErrorKind.PAGINATION_INVALID

    def test_zero_size_is_invalid(self):
        with pytest.raises(ManagementError):
            paginate([1], PaginationParams(page=1, size=0))

    def test_empty_list_is_never_invalid(self):
        page = paginate([], PaginationParams(page=7, size=10))
        assert page.items == []
        assert page.paginated is False

    def test_minus_one_disables_pagination(self):
        page = paginate(list(range(25)), PaginationParams(page=1, size=-1))
        assert len(page.items) == 25
        assert page.paginated is False

    def test_with_pagination_false(self):
        page = paginate(list(range(25)), PaginationParams(page=2, size=10), with_pagination=False)
        assert len(page.items) == 25


class TestCreateListResponse:
    """Test the envelope."""

    def test_paginated_envelope(self):
        response = create_list_response(list(range(25)), PaginationParams(page=2, size=10), URL_BASE)

        assert response["data"] == list(range(10, 20))
        assert response["metadata"]["data"] == {"total": 25}
        assert response["metadata"]["pagination"] == {
            "current_page": 2,
            "size": 10,
            "first": 11,
            "last": 20,
            "total": 25,
            "total_pages": 3,
        }
        links = response["links"]
        assert links["self"] == str(URL_BASE)
        assert "page=1" in links["first"] and "size=10" in links["first"]
        assert "page=3" in links["last"]
        assert "page=1" in links["previous"]
        assert "page=3" in links["next"]
        assert "order=name" in links["next"]

    def test_first_page_has_no_previous(self):
        response = create_list_response([1, 2], PaginationParams(page=1, size=10), URL_BASE)
        assert "previous" not in response["links"]
        assert "next" not in response["links"]

    def test_metadata_is_merged(self):
        response = create_list_response(
            ["a"],
            PaginationParams(),
            URL_BASE,
            metadata={"subscriptions": {"app1": 3}},
        )
        assert response["metadata"]["subscriptions"] == {"app1": 3}
        assert response["metadata"]["data"] == {"total": 1}

    def test_unpaginated_envelope(self):
        response = create_list_response([1, 2, 3], PaginationParams(size=-1), URL_BASE)
        assert response["data"] == [1, 2, 3]
        assert "pagination" not in response["metadata"]
        assert response["links"] == {"self": str(URL_BASE)}
