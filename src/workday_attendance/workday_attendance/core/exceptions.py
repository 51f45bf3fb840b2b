class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested entity or result set does not exist."""


class AlreadyCheckedIn(ValidationError):
    """The employee already has a record for the day."""


class NotCheckedIn(ValidationError):
    """Checkout was requested without a prior check-in."""


class AlreadyCheckedOut(ValidationError):
    """The record for the day is already completed."""


class InvalidTimeOrdering(ValidationError):
    """Checkout instant is not strictly after the check-in instant."""


class InvalidDateRange(ValidationError):
    """A date or month argument is malformed, or end precedes start."""


class EmployeeNotFound(NotFoundError):
    """Lookup by employee code or id failed."""


class EmptyExportRange(NotFoundError):
    """No attendance records match an export query."""
