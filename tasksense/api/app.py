"""FastAPI web application for tasksense."""

import logging
from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Response, status
from fastapi.concurrency import run_in_threadpool

from tasksense.config import Settings
from tasksense.models.task import Task, TaskCreate, TaskUpdate
from tasksense.models.constants import APP_VERSION
from tasksense.store.task_store import TaskStore, normalize_task_id
from tasksense.integrations.claude_client import ClaudeClient
from tasksense.engine.enrichment import EnrichmentClient, enrich_task
from tasksense.api.dependencies import get_task_store, get_enrichment_client

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(task_id: str) -> HTTPException:
    logger.debug(f"Task {task_id} not found")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


@router.get("/tasks", response_model=List[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List all live tasks."""
    return store.list()


@router.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskCreate,
    store: TaskStore = Depends(get_task_store),
    client: EnrichmentClient = Depends(get_enrichment_client),
):
    """Create a task, enriching it with an AI priority and time estimate when possible."""
    draft = store.create(body.title)

    # The completion call blocks on the network; keep it off the event loop
    # and outside the store lock.
    task = await run_in_threadpool(enrich_task, draft, client)

    created = store.insert(task)
    logger.info(f"Created task {created.id} (priority={created.priority})")
    return created


@router.get("/tasks/{task_id}", response_model=Task)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a single task by ID."""
    task = store.get(task_id)
    if task is None:
        raise _not_found(task_id)
    return task


@router.patch("/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    body: TaskUpdate,
    store: TaskStore = Depends(get_task_store),
):
    """Replace a task wholesale with the request body.

    Fields missing from the body are reset to their defaults. A body id that
    disagrees with the path id is rejected.
    """
    if body.id is not None and normalize_task_id(body.id) != normalize_task_id(task_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Body id {body.id} does not match path id {task_id}",
        )

    updated = store.update(task_id, body.to_task(task_id))
    if updated is None:
        raise _not_found(task_id)
    return updated


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task by ID."""
    if not store.delete(task_id):
        raise _not_found(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
    enrichment_client: Optional[EnrichmentClient] = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to use (defaults to Settings.from_env())
        store: Task store (defaults to a fresh empty TaskStore)
        enrichment_client: Enrichment client. When omitted, a ClaudeClient is
            built at startup, which fails if CLAUDE_API_KEY is missing.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.enrichment_client is None:
            # Raises ConfigurationError without an API key, aborting startup
            app.state.enrichment_client = ClaudeClient(settings)
            logger.info(f"Enrichment via {settings.claude_api_url} (model={settings.claude_model})")
        yield

    app = FastAPI(
        title="tasksense API",
        description="Task tracking with AI-suggested priorities and time estimates",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.task_store = store if store is not None else TaskStore()
    app.state.enrichment_client = enrichment_client
    app.include_router(router)
    return app


if __name__ == "__main__":
    import uvicorn
    app = create_app()
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
