"""tasksense: task tracking with AI-suggested priorities and time estimates."""
