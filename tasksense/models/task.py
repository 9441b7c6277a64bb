"""Task data model for tasksense."""

import uuid
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class Priority(str, Enum):
    """AI-suggested priority label."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., min_length=1, description="Task title")
    completed: bool = Field(False, description="Whether the task is done")
    priority: Optional[Priority] = Field(None, description="Priority suggested by enrichment")
    estimated_time: Optional[str] = Field(None, description="Free-text time estimate (e.g. '3 hours')")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class TaskCreate(BaseModel):
    """Request body for POST /tasks."""
    title: str = Field(..., min_length=1, description="Task title")


class TaskUpdate(BaseModel):
    """Request body for PATCH /tasks/{task_id}.

    This is a full replacement: any optional field left out of the body is
    cleared on the stored task.
    """
    id: Optional[uuid.UUID] = Field(None, description="Must match the path id when present")
    title: str = Field(..., min_length=1, description="Task title")
    completed: bool = Field(False, description="Whether the task is done")
    priority: Optional[Priority] = Field(None, description="Priority label")
    estimated_time: Optional[str] = Field(None, description="Free-text time estimate")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True

    def to_task(self, task_id: str) -> Task:
        """Build the replacement Task stored under task_id."""
        return Task(
            id=task_id,
            title=self.title,
            completed=self.completed,
            priority=self.priority,
            estimated_time=self.estimated_time,
        )
