class ChildcareError(Exception):
    """Base exception for all childcare-related errors."""


class ReferenceDataError(ChildcareError):
    """Term or bank holiday tables are malformed."""


class ScheduleError(ChildcareError):
    """A schedule is structurally impossible (negative hours, > 7 days, ...)."""
