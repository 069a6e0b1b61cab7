"""Errors raised by the energy signature engine."""


class SignatureError(Exception):
    """Base class for errors that abort a signature computation."""


class InvalidAreaError(SignatureError, ValueError):
    """Raised when the conditioned area is missing, non-numeric or not positive."""

    def __init__(self, value: object) -> None:
        """Initialize with the rejected area value."""
        super().__init__("Please enter a valid, positive number for the area.")
        self.value = value


class InsufficientDataError(SignatureError):
    """Raised when too few monthly rows survive validation."""

    def __init__(self, valid_rows: int, min_rows: int) -> None:
        """Initialize with the number of valid rows and the required minimum."""
        super().__init__(
            f"At least {min_rows} valid data rows are required for a meaningful "
            f"analysis ({valid_rows} found)."
        )
        self.valid_rows = valid_rows
        self.min_rows = min_rows
