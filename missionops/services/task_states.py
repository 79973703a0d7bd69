# missionops/services/task_states.py
"""
Task lifecycle rules, no I/O.

    New -> InProgress -> Paused -> InProgress -> Completed
    Paused -> Completed

Each transition writes one stamp. Paused -> InProgress records the resume
on unpause_stamp; only the latest pause/resume pair is kept.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional

from missionops.errors import InvalidTransitionError, ValidationError
from missionops.models.task_status import TaskStatus

STAMP_FIELDS = ("start_stamp", "pause_stamp", "unpause_stamp", "stop_stamp")

TRANSITIONS: Dict[tuple, str] = {
    (TaskStatus.NEW, TaskStatus.IN_PROGRESS): "start_stamp",
    (TaskStatus.IN_PROGRESS, TaskStatus.PAUSED): "pause_stamp",
    (TaskStatus.PAUSED, TaskStatus.IN_PROGRESS): "unpause_stamp",
    (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED): "stop_stamp",
    (TaskStatus.PAUSED, TaskStatus.COMPLETED): "stop_stamp",
}


def coerce_status(value) -> TaskStatus:
    """Accept a TaskStatus, its integer id, or its name ('in_progress', 'PAUSED')."""
    if isinstance(value, TaskStatus):
        return value
    try:
        if isinstance(value, str) and not value.isdigit():
            return TaskStatus[value.strip().upper().replace(" ", "_")]
        return TaskStatus(int(value))
    except (KeyError, ValueError, TypeError):
        raise ValidationError(f"Unknown task status: {value!r}")


def can_transition(source: TaskStatus, target: TaskStatus) -> bool:
    return (source, target) in TRANSITIONS


def _aware(ts: datetime) -> datetime:
    # sqlite hands back naive datetimes; everything we write is UTC
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def plan_transition(task, target, now: Optional[datetime] = None) -> dict:
    """
    Column values that move `task` to `target`, or {} for the trivial no-op
    of asking for the state it is already in. InProgress -> InProgress is not
    a no-op, it is rejected like every other pair outside TRANSITIONS.
    """
    source = coerce_status(task.status_id)
    target = coerce_status(target)

    if source == target and source != TaskStatus.IN_PROGRESS:
        return {}
    stamp_field = TRANSITIONS.get((source, target))
    if stamp_field is None:
        raise InvalidTransitionError(f"Cannot move a task from {source.label} to {target.label}")

    now = _aware(now or datetime.now(timezone.utc))
    written = [_aware(s) for s in (getattr(task, f, None) for f in STAMP_FIELDS) if s is not None]
    if written:
        # stamps never go backwards, even with a skewed clock
        now = max(now, max(written))

    return {"status_id": int(target), stamp_field: now}
