"""Data models for tasksense."""

from tasksense.models.task import Task, TaskCreate, TaskUpdate, Priority
from tasksense.models.enrichment import EnrichmentResult

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "Priority",
    "EnrichmentResult",
]
