"""API endpoints for task management."""

from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
import logging

from database import TaskStore
from errors import NotFoundError, StoreError, ValidationError
from .schemas import TaskCreate, TaskDoneUpdate, serialize_task

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    """Task store attached to the running app."""
    return request.app.state.store


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/tasks")
def list_tasks(store: TaskStore = Depends(get_store)):
    """List all tasks, newest first."""
    try:
        tasks = store.list_tasks()
    except StoreError:
        return error_response(500, "Failed to fetch tasks")

    return [serialize_task(task) for task in tasks]


@router.post("/tasks", status_code=201)
def create_task(task: Optional[TaskCreate] = None, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    title = task.title if task else None
    try:
        created = store.create_task(title)
    except ValidationError:
        return error_response(400, "Title is required")
    except StoreError:
        return error_response(500, "Failed to add task")

    return serialize_task(created)


@router.put("/tasks/{task_id}")
def update_task(
    task_id: str,
    task_update: Optional[TaskDoneUpdate] = None,
    store: TaskStore = Depends(get_store)
):
    """Set a task's done flag, or toggle it when no value is sent."""
    done = task_update.done if task_update else None
    try:
        updated = store.update_task_done(task_id, done)
    except NotFoundError:
        return error_response(404, "Task not found")
    except StoreError:
        return error_response(500, "Failed to update task")

    return serialize_task(updated)


@router.delete("/tasks/{task_id}")
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    try:
        store.delete_task(task_id)
    except NotFoundError:
        return error_response(404, "Task not found")
    except StoreError:
        return error_response(500, "Failed to delete task")

    return {"success": True}
