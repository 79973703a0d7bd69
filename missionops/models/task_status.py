# missionops/models/task_status.py
from enum import IntEnum


class TaskStatus(IntEnum):
    """Task lifecycle states. Integer ids match the status_types rows."""

    NEW = 1
    IN_PROGRESS = 2
    PAUSED = 3
    COMPLETED = 4

    @property
    def label(self) -> str:
        return {
            TaskStatus.NEW: "New",
            TaskStatus.IN_PROGRESS: "In Progress",
            TaskStatus.PAUSED: "Paused",
            TaskStatus.COMPLETED: "Completed",
        }[self]
