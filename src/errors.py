"""Exceptions raised by the todo store and bootstrap code."""


class TodoError(Exception):
    """Base class for todo API errors."""


class ValidationError(TodoError):
    """Required input is missing or empty."""


class NotFoundError(TodoError):
    """The referenced task does not exist."""

    def __init__(self, task_id):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StoreError(TodoError):
    """The underlying database operation failed."""


class StartupError(TodoError):
    """The service cannot start, e.g. the database is unreachable."""
