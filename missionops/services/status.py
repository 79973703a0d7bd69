# missionops/services/status.py
from __future__ import annotations

from enum import Enum
from typing import Iterable

from missionops.models.task_status import TaskStatus


class MissionStatus(str, Enum):
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"


def _status_of(task) -> TaskStatus:
    if isinstance(task, int):
        return TaskStatus(task)
    return TaskStatus(task.status_id)


def derive_status(tasks: Iterable) -> MissionStatus:
    """
    Live projection of a mission's tasks, never stored:
    no tasks -> red, all completed -> green, any progress -> orange, else red.
    Accepts MissionTask rows or bare status values.
    """
    states = [_status_of(t) for t in tasks]
    if not states:
        return MissionStatus.RED
    if all(s == TaskStatus.COMPLETED for s in states):
        return MissionStatus.GREEN
    if any(s != TaskStatus.NEW for s in states):
        return MissionStatus.ORANGE
    return MissionStatus.RED
