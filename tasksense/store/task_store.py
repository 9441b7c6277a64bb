"""In-memory task store for tasksense."""

import logging
import threading
import uuid
from typing import Dict, List, Optional

from tasksense.models.task import Task

logger = logging.getLogger(__name__)


def normalize_task_id(task_id) -> str:
    """Canonical form of a task id.

    UUIDs compare case-insensitively, so "ABC..." and "abc..." name the same
    task. Anything that is not a UUID is returned unchanged and simply never
    matches a stored task.
    """
    try:
        return str(uuid.UUID(str(task_id)))
    except ValueError:
        return str(task_id)


class DuplicateTaskError(ValueError):
    """Raised when inserting a task whose id is already stored."""


class TaskStore:
    """Lock-guarded, in-memory collection of live tasks.

    Every operation, reads included, holds the single store lock for its
    whole duration. Tasks going in and coming out are copies, so callers can
    never mutate stored state behind the lock.

    Missing ids are a normal outcome: get/update return None and delete
    returns False.
    """

    def __init__(self):
        self._lock = threading.Lock()
        # dict preserves insertion order
        self._tasks: Dict[str, Task] = {}

    def create(self, title: str) -> Task:
        """Build a draft task with a fresh id. The draft is not inserted."""
        task = Task(id=str(uuid.uuid4()), title=title)
        logger.debug(f"Allocated task {task.id}: {title[:50]}")
        return task

    def insert(self, task: Task) -> Task:
        """Add a fully-formed task."""
        key = normalize_task_id(task.id)
        stored = task.model_copy(update={"id": key})
        with self._lock:
            if key in self._tasks:
                raise DuplicateTaskError(f"Task {key} already exists")
            self._tasks[key] = stored
        logger.debug(f"Inserted task {key}")
        return stored.model_copy()

    def list(self) -> List[Task]:
        """Snapshot of all live tasks in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(normalize_task_id(task_id))
            return task.model_copy() if task else None

    def update(self, task_id: str, new_task: Task) -> Optional[Task]:
        """Replace every field of the stored task. The stored id stays task_id (canonical form)."""
        key = normalize_task_id(task_id)
        replacement = new_task.model_copy(update={"id": key})
        with self._lock:
            if key not in self._tasks:
                return None
            self._tasks[key] = replacement
        logger.debug(f"Updated task {key}")
        return replacement.model_copy()

    def delete(self, task_id: str) -> bool:
        with self._lock:
            removed = self._tasks.pop(normalize_task_id(task_id), None)
        if removed is None:
            return False
        logger.debug(f"Deleted task {task_id}")
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.count()
