"""Enrichment result model for tasksense."""

from typing import Optional
from pydantic import BaseModel, Field

from tasksense.models.task import Priority


class EnrichmentResult(BaseModel):
    """Attributes scraped from a completion response.

    Either field may be missing; an empty result is still a successful call.
    """
    priority: Optional[Priority] = Field(None, description="First recognised priority keyword")
    estimated_time: Optional[str] = Field(None, description="Time estimate in the form '<n> hours'")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True

    def is_empty(self) -> bool:
        return self.priority is None and self.estimated_time is None
