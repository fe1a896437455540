# routers/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.status import HTTP_201_CREATED

from dependencies import get_task_store, parse_task_id
from errors import MethodNotAllowed
from models import Task, TaskCreate, TaskUpdate
from storage import TaskStore

# --- Router Setup ---
router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)

# --- Endpoints ---
# Handlers are plain functions so they run on the server's thread pool;
# the store's read/write lock serialises access to the shared list.

@router.get("")
def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List every task in insertion order."""
    tasks = store.list_all()
    return {"tasks": tasks, "count": len(tasks)}


@router.post("", status_code=HTTP_201_CREATED)
def create_task(payload: TaskCreate, store: TaskStore = Depends(get_task_store)):
    task = store.create(payload.title, payload.priority, payload.deadline)
    return {"message": "Task created successfully", "task": task}


# Registered before /{task_id} so "search" is never parsed as an id.
@router.get("/search")
def search_tasks(q: Optional[str] = None, store: TaskStore = Depends(get_task_store)):
    """Case-insensitive title search."""
    results: List[Task] = store.search(q)
    return {"query": q, "results": results, "count": len(results)}


@router.api_route("/search", methods=["POST", "PUT", "DELETE", "PATCH"], include_in_schema=False)
def search_wrong_method():
    raise MethodNotAllowed("Method not allowed")


@router.get("/{task_id}", response_model=Task)
def get_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_task_store)):
    return store.get(task_id)


@router.put("/{task_id}")
def update_task(
    payload: TaskUpdate,
    task_id: int = Depends(parse_task_id),
    store: TaskStore = Depends(get_task_store),
):
    """Partial update: empty title/deadline and zero priority keep the stored values. Status is always set."""
    task = store.update(
        task_id,
        title=payload.title,
        priority=payload.priority,
        deadline=payload.deadline,
        status=payload.status,
    )
    return {"message": "Task updated successfully", "task": task}


@router.delete("/{task_id}")
def delete_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_task_store)):
    task = store.delete(task_id)
    return JSONResponse(content={"message": "Task deleted successfully", "task": task.model_dump()})


@router.put("/{task_id}/done")
def mark_task_done(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_task_store)):
    task = store.mark_done(task_id)
    return {"message": "Task marked as done", "task": task}
