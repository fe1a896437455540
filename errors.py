# errors.py
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class TodoError(Exception):
    """Base class for failures reported to HTTP clients as plain text."""
    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(TodoError):
    status_code = HTTP_400_BAD_REQUEST


class NotFound(TodoError):
    status_code = HTTP_404_NOT_FOUND


class MethodNotAllowed(TodoError):
    status_code = HTTP_405_METHOD_NOT_ALLOWED


class PersistenceFailed(TodoError):
    """The task file could not be written; the in-memory list was left untouched."""
    status_code = HTTP_500_INTERNAL_SERVER_ERROR
