from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Enum as SAEnum
from app.database import Base
from app.utils.dates import now
import enum


class ProgramType(str, enum.Enum):
    CLIENT = "CLIENT"
    INTERNAL = "INTERNAL"
    SELF_LEARNING = "SELF_LEARNING"


class WorkEntryStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    LOCKED = "LOCKED"


class WorkEntry(Base):
    __tablename__ = "work_entries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    work_date = Column(Date, nullable=False, index=True)
    program_type = Column(SAEnum(ProgramType, name="program_type"), nullable=False)
    program_reference = Column(String(255), nullable=False)
    ticket_id = Column(String(50), nullable=True)
    description = Column(String(2000), nullable=True)
    hours_spent = Column(Float, nullable=False)
    status = Column(
        SAEnum(WorkEntryStatus, name="work_entry_status"),
        nullable=False,
        default=WorkEntryStatus.DRAFT,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=now)
    updated_at = Column(DateTime, nullable=False, default=now, onupdate=now)

    def __repr__(self):
        return f"<WorkEntry(id={self.id}, date={self.work_date}, program={self.program_reference}, hours={self.hours_spent}, status={self.status})>"
