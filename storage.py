# storage.py
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from errors import InvalidInput, NotFound, PersistenceFailed
from locks import ReadWriteLock
from models import Task

logger = logging.getLogger(__name__)


def read_tasks(path: Path) -> List[Dict]:
    if not path.exists():
        return []
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f) or []


def write_tasks(path: Path, tasks: List[Dict]):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(tasks, f, indent=2, ensure_ascii=False)


class TaskStore:
    """
    The HTTP variant's task list and id counter, backed by a single JSON file.

    Reads share the lock. Every mutation holds it exclusively across both the
    in-memory change and the file write, and only commits the change once the
    write succeeded.
    """

    def __init__(self, path: Union[str, Path] = "tasks.json"):
        self.path = Path(path)
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = ReadWriteLock()

    # --- Persistence ---

    def load(self):
        """Replace the in-memory list with the file contents. A missing file means no tasks."""
        try:
            tasks = [Task.model_validate(item) for item in read_tasks(self.path)]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            logger.warning("Could not load tasks from %s, starting empty: %s", self.path, e)
            tasks = []

        with self._lock.write():
            self._tasks = tasks
            self._next_id = max((t.id for t in tasks), default=0) + 1
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)

    def _save(self, tasks: List[Task]):
        try:
            write_tasks(self.path, [t.model_dump() for t in tasks])
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing %s: %s", self.path, e)
            raise PersistenceFailed(f"Failed to save tasks: {e}") from e

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise NotFound("Task not found")

    # --- Reads ---

    def list_all(self) -> List[Task]:
        with self._lock.read():
            return list(self._tasks)

    def get(self, task_id: int) -> Task:
        with self._lock.read():
            return self._tasks[self._index_of(task_id)]

    def search(self, query: Optional[str]) -> List[Task]:
        """Case-insensitive substring match against titles only."""
        if not query:
            raise InvalidInput("Query parameter 'q' is required")
        needle = query.lower()
        with self._lock.read():
            return [t for t in self._tasks if needle in t.title.lower()]

    # --- Mutations ---

    def create(self, title: str, priority: int = 0, deadline: str = "") -> Task:
        if not title:
            raise InvalidInput("Title is required")

        with self._lock.write():
            task = Task(id=self._next_id, title=title, status=False, priority=priority, deadline=deadline)
            self._save(self._tasks + [task])
            self._tasks = self._tasks + [task]
            self._next_id += 1
        logger.debug("Created task %d", task.id)
        return task

    def update(self, task_id: int, title: str = "", priority: int = 0,
               deadline: str = "", status: bool = False) -> Task:
        with self._lock.write():
            i = self._index_of(task_id)
            changes = {"status": status}
            if title:
                changes["title"] = title
            if priority != 0:
                changes["priority"] = priority
            if deadline:
                changes["deadline"] = deadline
            return self._replace(i, self._tasks[i].model_copy(update=changes))

    def mark_done(self, task_id: int) -> Task:
        with self._lock.write():
            i = self._index_of(task_id)
            return self._replace(i, self._tasks[i].model_copy(update={"status": True}))

    def delete(self, task_id: int) -> Task:
        with self._lock.write():
            i = self._index_of(task_id)
            removed = self._tasks[i]
            remaining = self._tasks[:i] + self._tasks[i + 1:]
            self._save(remaining)
            self._tasks = remaining
        logger.debug("Deleted task %d", task_id)
        return removed

    def _replace(self, i: int, task: Task) -> Task:
        # Caller holds the write lock.
        updated = list(self._tasks)
        updated[i] = task
        self._save(updated)
        self._tasks = updated
        return task
