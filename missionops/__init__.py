"""Mission lifecycle orchestration and task-state engine."""
