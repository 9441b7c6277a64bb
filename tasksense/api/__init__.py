"""HTTP API for tasksense."""
