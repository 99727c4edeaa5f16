"""
Domain errors raised by the job store.

The API layer translates these into HTTP status codes:
- JobValidationError -> 400
- InvalidIdentifier -> 400

A well-formed identifier that matches nothing is not an error at the store
level (lookups return None), and becomes a 404 at the API boundary.
"""

from typing import Any, List, Optional


class JobStoreError(Exception):
    """Base class for job store errors."""


class JobValidationError(JobStoreError):
    """A job is missing a required field or carries an invalid value."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class InvalidIdentifier(JobStoreError):
    """A job id does not have the store's identifier syntax (a UUID)."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid job id: {value!r}")
        self.value = value
