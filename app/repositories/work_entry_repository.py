from dataclasses import dataclass
from datetime import date
from math import ceil
from typing import Any, Callable, List, Optional

from sqlalchemy import asc, desc, func
from sqlalchemy.orm import Query, Session

from app.exceptions import BusinessValidationError
from app.models.work_entry import WorkEntry, WorkEntryStatus


@dataclass
class Page:
    """One page of a larger result set. `number` is zero-based."""
    content: List[Any]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size) if self.size > 0 else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def is_empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[Any], Any]) -> "Page":
        return Page(
            content=[fn(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
        )


# API sort names (camelCase and snake_case) -> columns
SORTABLE_COLUMNS = {
    "id": WorkEntry.id,
    "workDate": WorkEntry.work_date,
    "work_date": WorkEntry.work_date,
    "programType": WorkEntry.program_type,
    "program_type": WorkEntry.program_type,
    "programReference": WorkEntry.program_reference,
    "program_reference": WorkEntry.program_reference,
    "hoursSpent": WorkEntry.hours_spent,
    "hours_spent": WorkEntry.hours_spent,
    "status": WorkEntry.status,
    "createdAt": WorkEntry.created_at,
    "created_at": WorkEntry.created_at,
    "updatedAt": WorkEntry.updated_at,
    "updated_at": WorkEntry.updated_at,
}


class WorkEntryRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, entry: WorkEntry) -> WorkEntry:
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def find_by_id(self, entry_id: int) -> Optional[WorkEntry]:
        return self.db.get(WorkEntry, entry_id)

    def delete(self, entry: WorkEntry) -> None:
        self.db.delete(entry)
        self.db.commit()

    def find_all(self, page: int, size: int, sort_by: str = "workDate", direction: str = "DESC") -> Page:
        query = self.db.query(WorkEntry)
        return self._paginate(query, page, size, sort_by, direction)

    def find_by_work_date_between(self, start: date, end: date, page: int, size: int) -> Page:
        query = self.db.query(WorkEntry).filter(WorkEntry.work_date.between(start, end))
        return self._paginate(query, page, size, "workDate", "DESC")

    def find_by_status(self, status: WorkEntryStatus, page: int, size: int) -> Page:
        query = self.db.query(WorkEntry).filter(WorkEntry.status == status)
        return self._paginate(query, page, size, "workDate", "DESC")

    def find_by_work_date(self, work_date: date) -> List[WorkEntry]:
        return (
            self.db.query(WorkEntry)
            .filter(WorkEntry.work_date == work_date)
            .order_by(WorkEntry.id)
            .all()
        )

    def sum_hours_by_date_range(self, start: date, end: date) -> Optional[float]:
        """SUM over the inclusive range; None when no rows match."""
        return (
            self.db.query(func.sum(WorkEntry.hours_spent))
            .filter(WorkEntry.work_date.between(start, end))
            .scalar()
        )

    def _paginate(self, query: Query, page: int, size: int, sort_by: str, direction: str) -> Page:
        column = SORTABLE_COLUMNS.get(sort_by)
        if column is None:
            raise BusinessValidationError(f"Cannot sort by unknown field '{sort_by}'")

        normalized = (direction or "").upper()
        if normalized not in ("ASC", "DESC"):
            raise BusinessValidationError(
                f"Invalid sort direction '{direction}'. Expected ASC or DESC"
            )
        order = asc if normalized == "ASC" else desc

        total = query.order_by(None).count()
        content = (
            query.order_by(order(column), order(WorkEntry.id))
            .offset(page * size)
            .limit(size)
            .all()
        )
        return Page(content=content, number=page, size=size, total_elements=total)
