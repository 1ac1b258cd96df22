from datetime import date
from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain import state_machine
from app.exceptions import InvalidStateError, ResourceNotFoundError
from app.models.work_entry import WorkEntry, WorkEntryStatus
from app.repositories.work_entry_repository import Page, WorkEntryRepository
from app.schemas.work_entry import (
    CreateWorkEntryRequest,
    UpdateWorkEntryRequest,
    WorkEntryResponse,
    WorkEntrySummary,
)
from app.utils import dates
from app.utils.validation import (
    require_at_least_one_non_null,
    require_non_empty,
    require_non_null,
    validate_date_range,
    validate_description,
    validate_hours_spent,
    validate_pagination_params,
    validate_ticket_id,
    validate_work_date,
)

logger = logging.getLogger(__name__)


def validate_work_entry_fields(
    work_date: Optional[date] = None,
    hours_spent: Optional[float] = None,
    ticket_id: Optional[str] = None,
    description: Optional[str] = None,
    partial: bool = False,
) -> None:
    """Shared field rules for create and update.

    With partial=True only the supplied (non-None) work date and hours are checked.
    """
    if not partial or work_date is not None:
        validate_work_date(work_date)
    if not partial or hours_spent is not None:
        validate_hours_spent(hours_spent)
    validate_ticket_id(ticket_id)
    validate_description(description)


class WorkEntryService:
    """Use cases for work entries: CRUD, lifecycle transitions and hour totals."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = WorkEntryRepository(db)

    def create_work_entry(self, request: CreateWorkEntryRequest) -> WorkEntryResponse:
        require_non_null(request, "CreateWorkEntryRequest")
        logger.debug(f"Creating work entry: {request}")

        require_non_empty(request.program_reference, "Program reference")
        validate_work_entry_fields(
            work_date=request.work_date,
            hours_spent=request.hours_spent,
            ticket_id=request.ticket_id,
            description=request.description,
        )

        entry = WorkEntry(
            work_date=request.work_date,
            program_type=request.program_type,
            program_reference=request.program_reference,
            ticket_id=request.ticket_id,
            description=request.description,
            hours_spent=request.hours_spent,
            status=request.status or WorkEntryStatus.DRAFT,
        )
        saved = self._save(entry)

        logger.info(f"✅ Created work entry {saved.id} ({saved.hours_spent}h on {saved.work_date})")
        return WorkEntryResponse.model_validate(saved)

    def update_work_entry(self, entry_id: int, request: UpdateWorkEntryRequest) -> WorkEntryResponse:
        require_non_null(request, "UpdateWorkEntryRequest")
        logger.debug(f"Updating work entry {entry_id}")

        changes = request.patch_fields()
        require_at_least_one_non_null(
            "At least one field must be provided for update",
            *changes.values(),
        )

        # Status gate first: a LOCKED entry reports InvalidState whatever the patch holds
        entry = self._find_work_entry_by_id(entry_id)
        state_machine.can_modify(entry.status)

        validate_work_entry_fields(
            work_date=request.work_date,
            hours_spent=request.hours_spent,
            ticket_id=request.ticket_id,
            description=request.description,
            partial=True,
        )

        for name, value in changes.items():
            setattr(entry, name, value)
        updated = self._save(entry)

        logger.info(f"✅ Updated work entry {entry_id}: {sorted(changes)}")
        return WorkEntryResponse.model_validate(updated)

    def get_work_entry_by_id(self, entry_id: int) -> WorkEntryResponse:
        logger.debug(f"Fetching work entry {entry_id}")
        return WorkEntryResponse.model_validate(self._find_work_entry_by_id(entry_id))

    def get_all_work_entries(
        self,
        page: int = 0,
        size: int = 20,
        sort_by: str = "workDate",
        direction: str = "DESC",
    ) -> Page:
        logger.debug(f"Fetching all work entries - page: {page}, size: {size}, sort: {sort_by} {direction}")
        validate_pagination_params(page, size)

        return self.repository.find_all(page, size, sort_by, direction).map(WorkEntrySummary.model_validate)

    def get_work_entries_by_date_range(self, start_date: date, end_date: date, page: int = 0, size: int = 20) -> Page:
        logger.debug(f"Fetching work entries between {start_date} and {end_date}")
        validate_pagination_params(page, size)
        validate_date_range(start_date, end_date)

        return self.repository.find_by_work_date_between(start_date, end_date, page, size).map(
            WorkEntrySummary.model_validate
        )

    def get_work_entries_by_status(self, status: WorkEntryStatus, page: int = 0, size: int = 20) -> Page:
        logger.debug(f"Fetching work entries with status {status.value}")
        validate_pagination_params(page, size)

        return self.repository.find_by_status(status, page, size).map(WorkEntrySummary.model_validate)

    def get_work_entries_by_date(self, work_date: date) -> List[WorkEntrySummary]:
        logger.debug(f"Fetching work entries for date {work_date}")
        return [WorkEntrySummary.model_validate(e) for e in self.repository.find_by_work_date(work_date)]

    def submit_work_entry(self, entry_id: int) -> WorkEntryResponse:
        logger.debug(f"Submitting work entry {entry_id}")
        entry = self._find_work_entry_by_id(entry_id)

        entry.status = state_machine.submit(entry.status)
        updated = self._save(entry)

        logger.info(f"Submitted work entry {entry_id}")
        return WorkEntryResponse.model_validate(updated)

    def lock_work_entry(self, entry_id: int) -> WorkEntryResponse:
        logger.debug(f"Locking work entry {entry_id}")
        entry = self._find_work_entry_by_id(entry_id)

        entry.status = state_machine.lock(entry.status)
        updated = self._save(entry)

        logger.info(f"🔒 Locked work entry {entry_id}")
        return WorkEntryResponse.model_validate(updated)

    def delete_work_entry(self, entry_id: int) -> None:
        logger.debug(f"Deleting work entry {entry_id}")
        entry = self._find_work_entry_by_id(entry_id)
        state_machine.can_modify(entry.status)

        try:
            self.repository.delete(entry)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error deleting work entry {entry_id}: {str(e)}")
            self.db.rollback()
            raise

        logger.info(f"🗑️ Deleted work entry {entry_id}")

    def calculate_total_hours(self, start_date: date, end_date: date) -> float:
        """Sum of hours_spent with work_date in [start_date, end_date]; 0.0 when nothing matches."""
        logger.debug(f"Calculating total hours between {start_date} and {end_date}")
        validate_date_range(start_date, end_date)

        total = self.repository.sum_hours_by_date_range(start_date, end_date)
        return float(total) if total is not None else 0.0

    def calculate_weekly_hours(self) -> float:
        return self.calculate_total_hours(dates.start_of_week(), dates.end_of_week())

    def calculate_monthly_hours(self) -> float:
        return self.calculate_total_hours(dates.start_of_month(), dates.end_of_month())

    def can_modify_work_entry(self, entry_id: int) -> bool:
        entry = self._find_work_entry_by_id(entry_id)
        try:
            state_machine.can_modify(entry.status)
        except InvalidStateError:
            return False
        return True

    def _find_work_entry_by_id(self, entry_id: int) -> WorkEntry:
        require_non_null(entry_id, "Work entry id")
        entry = self.repository.find_by_id(entry_id)
        if entry is None:
            logger.warning(f"Work entry {entry_id} not found")
            raise ResourceNotFoundError("WorkEntry", "id", entry_id)
        return entry

    def _save(self, entry: WorkEntry) -> WorkEntry:
        try:
            return self.repository.save(entry)
        except SQLAlchemyError as e:
            logger.error(f"❌ Error saving work entry {entry.id}: {str(e)}")
            self.db.rollback()
            raise
