class SWOTError(Exception):
    """Base class for user-facing errors of the SWOT builder."""


class EmptyInputError(SWOTError):
    """All four SWOT categories were empty when generating."""

    def __init__(self, message: str = "Please enter at least one item in any category.") -> None:
        super().__init__(message)


class LoadFailure(SWOTError):
    """An initial-state document could not be read or validated."""
