class DomainError(Exception):
    """Base exception for shift schedule errors."""


class ConfigError(DomainError):
    """Raised when shift configuration cannot be loaded or a time field is malformed."""


class EmptyScheduleError(DomainError):
    """Raised when an operation needs at least one shift but the schedule is empty."""
