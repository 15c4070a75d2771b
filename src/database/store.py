"""Persistence operations for tasks."""

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
import logging

from errors import NotFoundError, StoreError, ValidationError
from models import Task
from .connection import DatabaseManager

logger = logging.getLogger(__name__)

MAX_TASK_ID = 2 ** 63 - 1


@dataclass
class TaskRecord:
    """Detached copy of a stored task."""
    id: int
    title: str
    done: bool
    created_at: datetime

    @classmethod
    def from_model(cls, task: Task) -> "TaskRecord":
        return cls(
            id=task.id,
            title=task.title,
            done=bool(task.done),
            created_at=task.created_at
        )


def parse_task_id(task_id) -> Optional[int]:
    """Return the integer key for task_id, or None if it cannot name a task.

    Strings must be the exact form serialized to clients, so "01", "+1" or
    " 1 " never alias task 1.
    """
    if isinstance(task_id, bool):
        return None
    if isinstance(task_id, int):
        value = task_id
    elif isinstance(task_id, str):
        if not (task_id.isascii() and task_id.isdecimal()):
            return None
        value = int(task_id)
        if str(value) != task_id:
            return None
    else:
        return None
    if value < 1 or value > MAX_TASK_ID:
        return None
    return value


class TaskStore:
    """Create, find, update and delete tasks.

    Every operation runs in its own session and is committed before it
    returns. Database failures are re-raised as StoreError.
    """

    def __init__(self, db: DatabaseManager):
        self.db = db

    @contextmanager
    def _session(self, action: str):
        try:
            with self.db.get_session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}: {e}")
            raise StoreError(f"Failed to {action}") from e

    def list_tasks(self) -> List[TaskRecord]:
        """Return all tasks, newest first."""
        with self._session("list tasks") as session:
            tasks = (
                session.query(Task)
                .order_by(Task.created_at.desc(), Task.id.desc())
                .all()
            )
            return [TaskRecord.from_model(task) for task in tasks]

    def create_task(self, title) -> TaskRecord:
        if not title or not isinstance(title, str):
            raise ValidationError("Title is required")

        with self._session("create task") as session:
            task = Task(title=title, done=False)
            session.add(task)
            session.flush()
            record = TaskRecord.from_model(task)

        logger.info(f"Created task '{record.title}' (ID: {record.id})")
        return record

    def get_task_by_id(self, task_id) -> Optional[TaskRecord]:
        pk = parse_task_id(task_id)
        if pk is None:
            return None

        with self._session("fetch task") as session:
            task = session.get(Task, pk)
            return TaskRecord.from_model(task) if task else None

    def update_task_done(self, task_id, done: Optional[bool] = None) -> TaskRecord:
        """Set done to the given value, or flip it when done is None."""
        pk = parse_task_id(task_id)
        if pk is None:
            raise NotFoundError(task_id)

        with self._session("update task") as session:
            task = session.get(Task, pk)
            if not task:
                raise NotFoundError(task_id)

            task.done = done if done is not None else not task.done
            session.flush()
            record = TaskRecord.from_model(task)

        logger.info(f"Updated task {record.id}: done={record.done}")
        return record

    def delete_task(self, task_id) -> bool:
        pk = parse_task_id(task_id)
        if pk is None:
            raise NotFoundError(task_id)

        with self._session("delete task") as session:
            task = session.get(Task, pk)
            if not task:
                raise NotFoundError(task_id)
            session.delete(task)

        logger.info(f"Deleted task {pk}")
        return True
