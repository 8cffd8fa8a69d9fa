"""Custom exceptions for projdash."""


class ProjdashError(Exception):
    """Base exception for all projdash errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class DataSourceError(ProjdashError):
    """The project data source could not be read or decoded."""
