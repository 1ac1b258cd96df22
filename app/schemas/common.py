"""Response envelopes shared by every endpoint."""
from datetime import datetime
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.repositories.work_entry_repository import Page

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Standard wrapper: {success, message, data, timestamp, metadata?}."""
    success: bool
    message: Optional[str] = None
    data: Optional[T] = None
    timestamp: datetime = Field(default_factory=datetime.now)
    metadata: Optional[Any] = None

    @classmethod
    def ok(cls, data: Any = None, message: str = None, metadata: Any = None) -> "ApiResponse":
        return cls(success=True, data=data, message=message, metadata=metadata)

    @classmethod
    def created(cls, data: Any, message: str = "Resource created successfully") -> "ApiResponse":
        return cls(success=True, data=data, message=message)

    @classmethod
    def no_content(cls, message: str = "Operation completed successfully") -> "ApiResponse":
        return cls(success=True, message=message)

    @classmethod
    def error(cls, message: str, metadata: Any = None) -> "ApiResponse":
        return cls(success=False, message=message, metadata=metadata)


class PageResponse(CamelModel, Generic[T]):
    content: List[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    has_next: bool
    has_previous: bool
    number_of_elements: int
    empty: bool

    @classmethod
    def from_page(cls, page: Page, mapper: Optional[Callable[[Any], Any]] = None) -> "PageResponse":
        if mapper is not None:
            page = page.map(mapper)
        return cls(
            content=page.content,
            page_number=page.number,
            page_size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.is_first,
            last=page.is_last,
            has_next=page.has_next,
            has_previous=page.has_previous,
            number_of_elements=page.number_of_elements,
            empty=page.is_empty,
        )

    @classmethod
    def empty_page(cls) -> "PageResponse":
        return cls(
            content=[],
            page_number=0,
            page_size=0,
            total_elements=0,
            total_pages=0,
            first=True,
            last=True,
            has_next=False,
            has_previous=False,
            number_of_elements=0,
            empty=True,
        )
