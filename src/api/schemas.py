"""Request bodies and response serialization for the task API."""

from typing import Any, Dict, Optional
from pydantic import BaseModel

from database import TaskRecord


class TaskCreate(BaseModel):
    # Presence is checked by the store so a missing title maps to 400, not 422
    title: Optional[str] = None


class TaskDoneUpdate(BaseModel):
    done: Optional[bool] = None


def serialize_task(task: TaskRecord) -> Dict[str, Any]:
    """Public JSON form of a task: string id, camelCase timestamp."""
    return {
        "id": str(task.id),
        "title": task.title,
        "done": bool(task.done),
        "createdAt": task.created_at.isoformat(timespec="milliseconds") + "Z"
    }
