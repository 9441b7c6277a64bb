"""AI enrichment of newly created tasks.

Enrichment is strictly additive:
1. Ask the client for a priority and time estimate
2. Merge whatever it found into the draft task
3. On EnrichmentError, keep the draft as it is (task creation must not fail)
"""

import logging
from typing import Protocol

from tasksense.models.task import Task
from tasksense.models.enrichment import EnrichmentResult
from tasksense.integrations.claude_client import EnrichmentError

logger = logging.getLogger(__name__)


class EnrichmentClient(Protocol):
    """Anything that can analyze a task title."""

    def analyze(self, title: str) -> EnrichmentResult:
        ...


def apply_enrichment(draft: Task, result: EnrichmentResult) -> Task:
    """Return a copy of draft carrying the enrichment fields."""
    return draft.model_copy(
        update={
            "priority": result.priority,
            "estimated_time": result.estimated_time,
        }
    )


def enrich_task(draft: Task, client: EnrichmentClient) -> Task:
    """Enrich a draft task, falling back to the draft when the client fails.

    Only EnrichmentError is handled here. Anything else is a bug and propagates.

    Args:
        draft: Freshly created task, not yet visible to other readers
        client: Enrichment client

    Returns:
        Enriched copy of the draft, or the draft itself on failure
    """
    try:
        result = client.analyze(draft.title)
    except EnrichmentError as e:
        # Message carries only status codes and exception type names
        logger.warning(f"Enrichment failed for task {draft.id}, keeping unenriched task: {e}")
        return draft

    if result.is_empty():
        logger.debug(f"Task {draft.id} enrichment found nothing recognisable")

    enriched = apply_enrichment(draft, result)
    logger.debug(
        f"Task {draft.id} enriched: priority={enriched.priority} estimated_time={enriched.estimated_time}"
    )
    return enriched
