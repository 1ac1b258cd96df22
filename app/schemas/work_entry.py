from datetime import date, datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from app.models.work_entry import ProgramType, WorkEntryStatus
from app.schemas.common import CamelModel

# Request-level ceiling. The shared validator separately enforces a 24h bound.
MAX_REQUEST_HOURS = 9.0


class CreateWorkEntryRequest(CamelModel):
    work_date: date
    program_type: ProgramType
    program_reference: str = Field(max_length=255)
    ticket_id: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None, max_length=2000)
    hours_spent: float = Field(gt=0, le=MAX_REQUEST_HOURS)
    status: Optional[WorkEntryStatus] = None

    @field_validator("program_reference")
    @classmethod
    def program_reference_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Program reference is required")
        return v


class UpdateWorkEntryRequest(CamelModel):
    """Partial update. Only fields that are present and non-null are applied."""
    work_date: Optional[date] = None
    program_type: Optional[ProgramType] = None
    program_reference: Optional[str] = Field(default=None, max_length=255)
    ticket_id: Optional[str] = Field(default=None, max_length=50)
    description: Optional[str] = Field(default=None, max_length=2000)
    hours_spent: Optional[float] = Field(default=None, gt=0, le=MAX_REQUEST_HOURS)

    @field_validator("program_reference")
    @classmethod
    def program_reference_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Program reference cannot be blank")
        return v

    def patch_fields(self) -> Dict[str, Any]:
        return {name: value for name, value in self.model_dump().items() if value is not None}


class WorkEntryResponse(CamelModel):
    id: int
    work_date: date
    program_type: ProgramType
    program_reference: str
    ticket_id: Optional[str] = None
    description: Optional[str] = None
    hours_spent: float
    status: WorkEntryStatus
    created_at: datetime
    updated_at: datetime


class WorkEntrySummary(CamelModel):
    id: int
    work_date: date
    program_type: ProgramType
    program_reference: str
    hours_spent: float
    status: WorkEntryStatus
