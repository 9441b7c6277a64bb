"""FastAPI dependencies for tasksense.

The store and the enrichment client are owned by the application object
(`app.state`) and handed to each route through `Depends`.
"""

from fastapi import Request

from tasksense.store.task_store import TaskStore
from tasksense.engine.enrichment import EnrichmentClient


def get_task_store(request: Request) -> TaskStore:
    """Get the process-wide task store."""
    return request.app.state.task_store


def get_enrichment_client(request: Request) -> EnrichmentClient:
    """Get the enrichment client built at startup."""
    return request.app.state.enrichment_client
