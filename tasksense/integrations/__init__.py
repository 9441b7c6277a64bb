"""Third-party service integrations for tasksense."""
