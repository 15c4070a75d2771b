"""Database connection and task persistence."""

from .connection import DatabaseManager
from .store import TaskStore, TaskRecord, parse_task_id

__all__ = ["DatabaseManager", "TaskStore", "TaskRecord", "parse_task_id"]
