# routers/tasks.py
import logging
import uuid
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from starlette.status import (
    HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from schemas import Message, Task, TaskCreate, TaskUpdate
from storage import find_task, read_tasks, write_tasks

logger = logging.getLogger(__name__)

# --- Router Setup ---
router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)

# Fields a client may overwrite on an existing task
UPDATABLE_FIELDS = ("status", "text", "details")


def new_task_id() -> str:
    return f"task-{uuid.uuid4().hex}"


def storage_error(message: str) -> HTTPException:
    return HTTPException(status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# --- Endpoints ---

@router.get("", response_model=List[Dict])
async def list_tasks():
    """Get the list of all tasks in insertion order."""
    try:
        return read_tasks()
    except OSError:
        logger.exception("Error reading tasks")
        raise storage_error("Failed to retrieve tasks.")


@router.post("", response_model=Task, status_code=HTTP_201_CREATED)
async def create_task(payload: Optional[TaskCreate] = None):
    """Adds a new task to the end of the list."""
    if payload is None or not payload.text:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Task text is required.")

    new_task = {
        "id": new_task_id(),
        "text": payload.text,
        "details": payload.details or "",
        "status": payload.status or "todo",
    }
    try:
        tasks = read_tasks()
        tasks.append(new_task)
        write_tasks(tasks)
    except OSError:
        logger.exception("Error adding task")
        raise storage_error("Failed to add task.")
    return new_task


@router.put("/{task_id}")
async def update_task(task_id: str, payload: Optional[TaskUpdate] = None):
    """Overwrites the fields sent in the body; the rest are left as they are."""
    try:
        tasks = read_tasks()
    except OSError:
        logger.exception("Error updating task %s", task_id)
        raise storage_error("Failed to update task.")

    index = find_task(tasks, task_id)
    if index == -1:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Task not found.")

    task = tasks[index]
    changes = payload.model_dump(exclude_unset=True, exclude_none=True) if payload else {}
    for field in UPDATABLE_FIELDS:
        if field not in changes:
            continue
        # empty status is ignored
        if field == "status" and not changes[field]:
            continue
        task[field] = changes[field]

    try:
        write_tasks(tasks)
    except OSError:
        logger.exception("Error updating task %s", task_id)
        raise storage_error("Failed to update task.")
    return task


@router.delete("/{task_id}", response_model=Message)
async def delete_task(task_id: str):
    """Deletes a task."""
    try:
        tasks = read_tasks()
    except OSError:
        logger.exception("Error deleting task %s", task_id)
        raise storage_error("Failed to delete task.")

    remaining_tasks = [t for t in tasks if t.get("id") != task_id]
    if len(remaining_tasks) == len(tasks):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Task not found.")

    try:
        write_tasks(remaining_tasks)
    except OSError:
        logger.exception("Error deleting task %s", task_id)
        raise storage_error("Failed to delete task.")
    return {"message": "Task deleted successfully."}
