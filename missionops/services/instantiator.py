# missionops/services/instantiator.py
from __future__ import annotations

from typing import Iterable, List

from sqlalchemy.orm import Session

from missionops.models.mission_task import MissionTask
from missionops.models.task_status import TaskStatus
from missionops.models.task_template import TaskTemplate
from missionops.services.catalog import list_templates


def clone_templates(mission_id: int, templates: Iterable[TaskTemplate]) -> List[MissionTask]:
    """
    Snapshot templates into unsaved mission tasks, ascending ord, status New.
    Later template edits never reach these copies.
    """
    return [
        MissionTask(
            mission_id=mission_id,
            ord=t.ord,
            description=t.description,
            estimated_duration=t.estimated_duration,
            status_id=int(TaskStatus.NEW),
        )
        for t in sorted(templates, key=lambda t: t.ord)
    ]


def instantiate(db: Session, mission_id: int, mission_type_id: int) -> List[MissionTask]:
    """Read the mission type's templates and clone them. Writes nothing; persisting is the caller's job."""
    return clone_templates(mission_id, list_templates(db, mission_type_id))
