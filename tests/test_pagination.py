"""Tests for the Page value and the PageResponse/ApiResponse envelopes."""

from app.repositories.work_entry_repository import Page
from app.schemas.common import ApiResponse, PageResponse


class TestPage:
    def test_middle_page(self):
        page = Page(content=["d", "e"], number=1, size=2, total_elements=5)
        assert page.total_pages == 3
        assert not page.is_first
        assert not page.is_last
        assert page.has_next
        assert page.has_previous

    def test_last_page(self):
        page = Page(content=["e"], number=2, size=2, total_elements=5)
        assert page.is_last
        assert not page.has_next
        assert page.number_of_elements == 1

    def test_empty(self):
        page = Page(content=[], number=0, size=20, total_elements=0)
        assert page.total_pages == 0
        assert page.is_first and page.is_last and page.is_empty

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2], number=0, size=2, total_elements=3).map(lambda x: x * 10)
        assert page.content == [10, 20]
        assert page.total_elements == 3
        assert page.total_pages == 2


class TestPageResponse:
    def test_from_page_with_mapper(self):
        page = Page(content=[1, 2, 3], number=0, size=3, total_elements=5)
        response = PageResponse.from_page(page, mapper=str)
        dumped = response.model_dump(by_alias=True)
        assert dumped == {
            "content": ["1", "2", "3"],
            "pageNumber": 0,
            "pageSize": 3,
            "totalElements": 5,
            "totalPages": 2,
            "first": True,
            "last": False,
            "hasNext": True,
            "hasPrevious": False,
            "numberOfElements": 3,
            "empty": False,
        }

    def test_empty_page(self):
        response = PageResponse.empty_page()
        assert response.empty and response.first and response.last
        assert response.content == []


class TestApiResponse:
    def test_ok(self):
        response = ApiResponse.ok({"a": 1}, "done")
        assert response.success is True
        assert response.data == {"a": 1}
        assert response.timestamp is not None

    def test_error_omits_data_on_wire(self):
        dumped = ApiResponse.error("boom", {"errors": ["boom"]}).model_dump(exclude_none=True)
        assert dumped["success"] is False
        assert "data" not in dumped
        assert dumped["metadata"] == {"errors": ["boom"]}

    def test_no_content_default_message(self):
        assert ApiResponse.no_content().message == "Operation completed successfully"
