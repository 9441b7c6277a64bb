"""Task enrichment engine for tasksense."""

from tasksense.engine.enrichment import enrich_task, apply_enrichment, EnrichmentClient

__all__ = [
    "enrich_task",
    "apply_enrichment",
    "EnrichmentClient",
]
