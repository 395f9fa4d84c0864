"""Error kinds raised by the kanban services.

Each error carries the HTTP status the API layer answers with, so that
callers can tell bad input from a missing entity, a forbidden action and a
transient storage failure.
"""
from fastapi import status


class KanbanError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(KanbanError):
    """Malformed or incomplete id list, parent mismatch, cross-board move."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(KanbanError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthorizationError(KanbanError):
    status_code = status.HTTP_403_FORBIDDEN


class StorageFault(KanbanError):
    """The transaction or connection failed; the whole unit of work was rolled back."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
