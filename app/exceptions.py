"""
Error kinds raised by the work entry service.

The HTTP layer maps each kind to a status code; nothing here knows about HTTP.
"""
from typing import Any, List, Optional, Union


class WorkLedgerError(Exception):
    """Base class for all domain errors."""


class BusinessValidationError(WorkLedgerError):
    """Input is malformed or violates a business rule."""

    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            self.validation_errors = [errors]
            super().__init__(errors)
        else:
            self.validation_errors = list(errors)
            super().__init__("Business validation failed")


class ResourceNotFoundError(WorkLedgerError):
    def __init__(self, resource_name: str, field_name: str, field_value: Any):
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"{resource_name} not found with {field_name}: '{field_value}'")


class InvalidStateError(WorkLedgerError):
    """An operation is not allowed in the entity's current status."""

    def __init__(
        self,
        message: str,
        current_state: Optional[str] = None,
        expected_state: Optional[str] = None,
    ):
        self.current_state = current_state
        self.expected_state = expected_state
        super().__init__(message)
