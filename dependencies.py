# dependencies.py
from fastapi import Request

from errors import InvalidInput
from storage import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """
    Returns the TaskStore the application was created with.
    Tests build apps around their own isolated stores.
    """
    return request.app.state.store


def parse_task_id(task_id: str) -> int:
    """Path ids are taken as strings so a non-numeric id is a 400, not a validation error."""
    try:
        return int(task_id)
    except ValueError:
        raise InvalidInput("Invalid task ID")
