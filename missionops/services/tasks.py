# missionops/services/tasks.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from missionops.errors import ConflictError, NotFoundError
from missionops.models.mission import Mission
from missionops.models.mission_task import MissionTask
from missionops.models.task_status import TaskStatus
from missionops.services._helpers import share_mission_type, write_scope
from missionops.services.task_states import coerce_status, plan_transition

logger = logging.getLogger(__name__)


def get_task(db: Session, task_id: int) -> MissionTask:
    task = db.get(MissionTask, task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


def transition_task(
    db: Session,
    task_id: int,
    target,
    expected_status=None,
    now: Optional[datetime] = None,
) -> MissionTask:
    """
    Move one task through the state machine.

    The write is a compare-and-set on the state we validated against, so two
    racing callers cannot both succeed: the loser gets ConflictError and the
    row keeps the winner's state. `expected_status` lets a caller pin the
    state it showed to the user.
    """
    target = coerce_status(target)
    task = get_task(db, task_id)
    observed = coerce_status(task.status_id)

    if expected_status is not None and coerce_status(expected_status) != observed:
        raise ConflictError(
            f"Task is {observed.label}, not {coerce_status(expected_status).label}; reload and retry"
        )

    values = plan_transition(task, target, now)
    if not values:
        return task

    with write_scope(db, "tasks"):
        if target == TaskStatus.IN_PROGRESS:
            # template deletes check for running tasks under FOR UPDATE on this row
            mission_type_id = db.scalar(
                select(Mission.mission_type_id).where(Mission.id == task.mission_id)
            )
            share_mission_type(db, mission_type_id)
        res = db.execute(
            update(MissionTask)
            .where(MissionTask.id == task_id, MissionTask.status_id == int(observed))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if res.rowcount != 1:
            logger.warning(f"[tasks] lost race on task {task_id}: {observed.label} -> {target.label}")
            raise ConflictError("Task status changed concurrently; reload and retry")

    db.refresh(task)
    logger.info(f"[tasks] task {task_id}: {observed.label} -> {target.label}")
    return task
