"""Task storage for tasksense."""

from tasksense.store.task_store import TaskStore, DuplicateTaskError, normalize_task_id

__all__ = [
    "TaskStore",
    "DuplicateTaskError",
    "normalize_task_id",
]
