"""Error types for schedule generation and plan management.

Every ScheduleError is fatal to the call that raised it: the scheduler never
returns a partial schedule.
"""


class ScheduleError(Exception):
    """Base exception for schedule generation failures."""

    pass


class InvalidRangeError(ScheduleError):
    """Raised when a Monthly date range is empty (end date before start date)."""

    pass


class InvalidWindowError(ScheduleError):
    """Raised when the working window ends at or before it starts."""

    pass


class EmptyScheduleError(ScheduleError):
    """Raised when no day produced any blocks."""

    pass


class NoSkillsError(ScheduleError):
    """Raised when generation is requested for a plan without skills."""

    pass


class FormatError(ValueError):
    """Raised when a time string is not a valid HH:MM value."""

    pass


class DuplicateSkillError(ValueError):
    """Raised when adding a skill whose name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A skill named '{name}' already exists")
