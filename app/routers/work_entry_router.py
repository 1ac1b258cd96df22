from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
import logging

from app.config import get_settings
from app.database import get_db
from app.models.work_entry import WorkEntryStatus
from app.schemas.common import ApiResponse, PageResponse
from app.schemas.work_entry import (
    CreateWorkEntryRequest,
    UpdateWorkEntryRequest,
    WorkEntryResponse,
    WorkEntrySummary,
)
from app.services.work_entry_service import WorkEntryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/work-entries", tags=["work-entries"])
settings = get_settings()


def get_work_entry_service(db: Session = Depends(get_db)) -> WorkEntryService:
    return WorkEntryService(db)


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[WorkEntryResponse],
    response_model_exclude_none=True,
)
def create_work_entry(
    request: CreateWorkEntryRequest,
    service: WorkEntryService = Depends(get_work_entry_service),
):
    """Create a new work entry. Status defaults to DRAFT."""
    logger.info(f"Creating new work entry for date: {request.work_date}")
    response = service.create_work_entry(request)
    return ApiResponse.created(response, "Work entry created successfully")


@router.get(
    "",
    response_model=ApiResponse[PageResponse[WorkEntrySummary]],
    response_model_exclude_none=True,
)
def get_all_work_entries(
    page: int = Query(0, description="Page number (0-indexed)"),
    size: int = Query(settings.default_page_size, description="Page size"),
    sort_by: str = Query("workDate", alias="sortBy", description="Sort field"),
    direction: str = Query("DESC", description="Sort direction (ASC/DESC)"),
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Fetching all work entries - page: {page}, size: {size}, sort: {sort_by} {direction}")
    result = service.get_all_work_entries(page, size, sort_by, direction)
    return ApiResponse.ok(PageResponse.from_page(result), "Response with pagination")


@router.get(
    "/date-range",
    response_model=ApiResponse[PageResponse[WorkEntrySummary]],
    response_model_exclude_none=True,
)
def get_work_entries_by_date_range(
    start_date: date = Query(..., alias="startDate", description="Start date (yyyy-MM-dd)"),
    end_date: date = Query(..., alias="endDate", description="End date (yyyy-MM-dd)"),
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Fetching work entries for date range: {start_date} to {end_date}")
    result = service.get_work_entries_by_date_range(start_date, end_date, page, size)
    return ApiResponse.ok(PageResponse.from_page(result), "Response with pagination")


@router.get(
    "/date/{work_date}",
    response_model=ApiResponse[List[WorkEntrySummary]],
    response_model_exclude_none=True,
)
def get_work_entries_by_date(
    work_date: date,
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Fetching work entries for date: {work_date}")
    return ApiResponse.ok(service.get_work_entries_by_date(work_date), "Response in a list")


@router.get(
    "/status/{status}",
    response_model=ApiResponse[PageResponse[WorkEntrySummary]],
    response_model_exclude_none=True,
)
def get_work_entries_by_status(
    status: WorkEntryStatus,
    page: int = Query(0),
    size: int = Query(settings.default_page_size),
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Fetching work entries with status: {status.value}")
    result = service.get_work_entries_by_status(status, page, size)
    return ApiResponse.ok(PageResponse.from_page(result), "Response with pagination")


@router.get(
    "/hours/total",
    response_model=ApiResponse[float],
    response_model_exclude_none=True,
)
def calculate_total_hours(
    start_date: date = Query(..., alias="startDate", description="Start date (yyyy-MM-dd)"),
    end_date: date = Query(..., alias="endDate", description="End date (yyyy-MM-dd)"),
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Calculating total hours for date range: {start_date} to {end_date}")
    total = service.calculate_total_hours(start_date, end_date)
    return ApiResponse.ok(total, f"Total hours: {total:.2f}")


@router.get("/hours/week", response_model=ApiResponse[float], response_model_exclude_none=True)
def calculate_weekly_hours(service: WorkEntryService = Depends(get_work_entry_service)):
    total = service.calculate_weekly_hours()
    return ApiResponse.ok(total, f"Total hours this week: {total:.2f}")


@router.get("/hours/month", response_model=ApiResponse[float], response_model_exclude_none=True)
def calculate_monthly_hours(service: WorkEntryService = Depends(get_work_entry_service)):
    total = service.calculate_monthly_hours()
    return ApiResponse.ok(total, f"Total hours this month: {total:.2f}")


@router.get(
    "/{entry_id}",
    response_model=ApiResponse[WorkEntryResponse],
    response_model_exclude_none=True,
)
def get_work_entry(entry_id: int, service: WorkEntryService = Depends(get_work_entry_service)):
    return ApiResponse.ok(service.get_work_entry_by_id(entry_id), "Work entry retrieved successfully")


@router.put(
    "/{entry_id}",
    response_model=ApiResponse[WorkEntryResponse],
    response_model_exclude_none=True,
)
def update_work_entry(
    entry_id: int,
    request: UpdateWorkEntryRequest,
    service: WorkEntryService = Depends(get_work_entry_service),
):
    logger.info(f"Updating work entry with id: {entry_id}")
    response = service.update_work_entry(entry_id, request)
    return ApiResponse.ok(response, "Work entry updated successfully")


@router.get(
    "/{entry_id}/can-modify",
    response_model=ApiResponse[bool],
    response_model_exclude_none=True,
)
def can_modify_work_entry(entry_id: int, service: WorkEntryService = Depends(get_work_entry_service)):
    return ApiResponse.ok(service.can_modify_work_entry(entry_id))


@router.patch(
    "/{entry_id}/submit",
    response_model=ApiResponse[WorkEntryResponse],
    response_model_exclude_none=True,
)
def submit_work_entry(entry_id: int, service: WorkEntryService = Depends(get_work_entry_service)):
    logger.info(f"Submitting work entry with id: {entry_id}")
    response = service.submit_work_entry(entry_id)
    return ApiResponse.ok(response, "Work entry submitted successfully")


@router.patch(
    "/{entry_id}/lock",
    response_model=ApiResponse[WorkEntryResponse],
    response_model_exclude_none=True,
)
def lock_work_entry(entry_id: int, service: WorkEntryService = Depends(get_work_entry_service)):
    logger.info(f"Locking work entry with id: {entry_id}")
    response = service.lock_work_entry(entry_id)
    return ApiResponse.ok(response, "Work entry locked successfully")


@router.delete(
    "/{entry_id}",
    response_model=ApiResponse,
    response_model_exclude_none=True,
)
def delete_work_entry(entry_id: int, service: WorkEntryService = Depends(get_work_entry_service)):
    logger.info(f"Deleting work entry with id: {entry_id}")
    service.delete_work_entry(entry_id)
    return ApiResponse.no_content("Work entry deleted successfully")
