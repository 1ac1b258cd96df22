"""
Work entry lifecycle: DRAFT -> SUBMITTED -> LOCKED.

Pure functions over WorkEntryStatus. Callers assign the returned status to the
entity only after a transition succeeds, so a rejected transition leaves the
entity untouched.
"""
import enum
from typing import Dict, FrozenSet, Tuple

from app.exceptions import InvalidStateError
from app.models.work_entry import WorkEntryStatus


class WorkEntryEvent(str, enum.Enum):
    SUBMIT = "SUBMIT"
    LOCK = "LOCK"


MODIFIABLE_STATES: FrozenSet[WorkEntryStatus] = frozenset(
    {WorkEntryStatus.DRAFT, WorkEntryStatus.SUBMITTED}
)

# (from_status, event) -> to_status. Anything not listed is rejected.
_TRANSITIONS: Dict[Tuple[WorkEntryStatus, WorkEntryEvent], WorkEntryStatus] = {
    (WorkEntryStatus.DRAFT, WorkEntryEvent.SUBMIT): WorkEntryStatus.SUBMITTED,
    (WorkEntryStatus.SUBMITTED, WorkEntryEvent.LOCK): WorkEntryStatus.LOCKED,
}

_REJECTION_MESSAGES = {
    WorkEntryEvent.SUBMIT: "Only DRAFT work entries can be submitted",
    WorkEntryEvent.LOCK: "Only SUBMITTED work entries can be locked",
}

_REQUIRED_STATES = {
    WorkEntryEvent.SUBMIT: WorkEntryStatus.DRAFT,
    WorkEntryEvent.LOCK: WorkEntryStatus.SUBMITTED,
}


def is_modifiable(status: WorkEntryStatus) -> bool:
    return status in MODIFIABLE_STATES


def can_modify(status: WorkEntryStatus) -> None:
    """Raise InvalidStateError if an entry in this status may not be changed or deleted."""
    if not is_modifiable(status):
        raise InvalidStateError(
            f"Cannot modify work entry in {status.value} status",
            current_state=status.value,
            expected_state="DRAFT or SUBMITTED",
        )


def transition(status: WorkEntryStatus, event: WorkEntryEvent) -> WorkEntryStatus:
    try:
        return _TRANSITIONS[(status, event)]
    except KeyError:
        raise InvalidStateError(
            _REJECTION_MESSAGES[event],
            current_state=status.value,
            expected_state=_REQUIRED_STATES[event].value,
        ) from None


def submit(status: WorkEntryStatus) -> WorkEntryStatus:
    return transition(status, WorkEntryEvent.SUBMIT)


def lock(status: WorkEntryStatus) -> WorkEntryStatus:
    return transition(status, WorkEntryEvent.LOCK)
