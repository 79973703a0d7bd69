# missionops/services/catalog.py
"""
Template catalog: mission types and their ordered task templates.

Every mutation leaves the templates of a mission type numbered 1..N.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, distinct, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from missionops.errors import ConflictError, NotFoundError, ValidationError
from missionops.models.mission import Mission
from missionops.models.mission_task import MissionTask
from missionops.models.mission_type import MissionType
from missionops.models.task_status import TaskStatus
from missionops.models.task_template import TaskTemplate
from missionops.services._helpers import hold_store_write_lock, lock_mission_type, write_scope
from missionops.services.ordering import ordered_templates, renumber_in_tx

logger = logging.getLogger(__name__)

NAME_MAX = 100
DURATION_MIN, DURATION_MAX = 1, 1440


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required")
    if len(name) > NAME_MAX:
        raise ValidationError(f"Name must be at most {NAME_MAX} characters")
    return name


def _check_type_duration(minutes: int) -> int:
    if not isinstance(minutes, int) or not (DURATION_MIN <= minutes <= DURATION_MAX):
        raise ValidationError(
            f"Duration must be between {DURATION_MIN} and {DURATION_MAX} minutes"
        )
    return minutes


def _clean_description(description: Optional[str]) -> str:
    description = (description or "").strip()
    if not description:
        raise ValidationError("Task description is required")
    return description


def _check_task_duration(minutes: int) -> int:
    if not isinstance(minutes, int) or minutes < 0:
        raise ValidationError("Task duration must be a non-negative number of minutes")
    return minutes


def _flush_unique_name(db: Session) -> None:
    try:
        db.flush()
    except IntegrityError as e:
        raise ConflictError("Mission type name already exists") from e


# ----------------------------------------------------------------------
# Mission types
# ----------------------------------------------------------------------
def list_mission_types(db: Session) -> List[MissionType]:
    return list(db.scalars(select(MissionType).order_by(MissionType.name)).all())


def get_mission_type(db: Session, mission_type_id: int) -> MissionType:
    mission_type = db.get(MissionType, mission_type_id)
    if mission_type is None:
        raise NotFoundError("Mission type not found")
    return mission_type


def create_mission_type(db: Session, name: str, estimated_duration: int) -> MissionType:
    mission_type = MissionType(
        name=_clean_name(name),
        estimated_duration=_check_type_duration(estimated_duration),
    )
    with write_scope(db, "catalog"):
        db.add(mission_type)
        _flush_unique_name(db)
    logger.info(f"[catalog] created mission type {mission_type.id} '{mission_type.name}'")
    return mission_type


def update_mission_type(
    db: Session,
    mission_type_id: int,
    name: Optional[str] = None,
    estimated_duration: Optional[int] = None,
) -> MissionType:
    """Existing missions keep the duration they were created with."""
    values = {}
    if name is not None:
        values["name"] = _clean_name(name)
    if estimated_duration is not None:
        values["estimated_duration"] = _check_type_duration(estimated_duration)

    mission_type = get_mission_type(db, mission_type_id)
    if not values:
        return mission_type
    with write_scope(db, "catalog"):
        for k, v in values.items():
            setattr(mission_type, k, v)
        _flush_unique_name(db)
    return get_mission_type(db, mission_type_id)


# ----------------------------------------------------------------------
# Task templates
# ----------------------------------------------------------------------
def list_templates(db: Session, mission_type_id: int) -> List[TaskTemplate]:
    get_mission_type(db, mission_type_id)
    return ordered_templates(db, mission_type_id)


def _next_ord(db: Session, mission_type_id: int) -> int:
    max_ord = db.scalar(
        select(func.max(TaskTemplate.ord)).where(TaskTemplate.mission_type_id == mission_type_id)
    )
    return (max_ord or 0) + 1


def add_template(
    db: Session, mission_type_id: int, description: str, estimated_duration: int
) -> TaskTemplate:
    description = _clean_description(description)
    estimated_duration = _check_task_duration(estimated_duration)

    with write_scope(db, "catalog"):
        lock_mission_type(db, mission_type_id)
        tpl = TaskTemplate(
            mission_type_id=mission_type_id,
            ord=_next_ord(db, mission_type_id),
            description=description,
            estimated_duration=estimated_duration,
        )
        db.add(tpl)
        try:
            db.flush()
        except IntegrityError as e:
            logger.warning(f"[catalog] ord clash adding to mission type {mission_type_id}")
            raise ConflictError("Task list changed concurrently; reload and retry") from e
    logger.info(f"[catalog] added template {tpl.id} at ord {tpl.ord} to mission type {mission_type_id}")
    return tpl


def update_template(
    db: Session,
    template_id: int,
    description: Optional[str] = None,
    estimated_duration: Optional[int] = None,
) -> TaskTemplate:
    """Edit a template in place. Never touches ord, never touches existing missions."""
    tpl = db.get(TaskTemplate, template_id)
    if tpl is None:
        raise NotFoundError("Task template not found")

    values = {}
    if description is not None:
        values["description"] = _clean_description(description)
    if estimated_duration is not None:
        values["estimated_duration"] = _check_task_duration(estimated_duration)
    if not values:
        return tpl

    with write_scope(db, "catalog"):
        for k, v in values.items():
            setattr(tpl, k, v)
        db.flush()
    return tpl


def count_active_missions(db: Session, mission_type_id: int) -> int:
    """Missions of this type with at least one task in progress."""
    return db.scalar(
        select(func.count(distinct(Mission.id)))
        .select_from(Mission)
        .join(MissionTask, MissionTask.mission_id == Mission.id)
        .where(
            Mission.mission_type_id == mission_type_id,
            MissionTask.status_id == int(TaskStatus.IN_PROGRESS),
        )
    ) or 0


def delete_template(db: Session, template_id: int) -> List[TaskTemplate]:
    """
    Delete a template and close the gap, in one transaction. The active
    mission check runs under the mission type lock, right before the delete;
    a transition into InProgress takes a shared lock on the same row, so it
    either lands before the check or waits until the delete commits.
    Returns the remaining templates.
    """
    tpl = db.get(TaskTemplate, template_id)
    if tpl is None:
        raise NotFoundError("Task template not found")
    mission_type_id = tpl.mission_type_id

    with write_scope(db, "catalog"):
        lock_mission_type(db, mission_type_id)
        hold_store_write_lock(db, mission_type_id)
        active = count_active_missions(db, mission_type_id)
        if active:
            logger.warning(
                f"[catalog] refused to delete template {template_id}: {active} active mission(s)"
            )
            raise ConflictError(
                f"Cannot delete task - there are {active} active mission(s) of this type"
            )
        res = db.execute(
            delete(TaskTemplate)
            .where(TaskTemplate.id == template_id)
            .execution_options(synchronize_session=False)
        )
        if res.rowcount == 0:
            raise NotFoundError("Task template not found")
        db.expunge(tpl)
        renumber_in_tx(db, mission_type_id)

    logger.info(f"[catalog] deleted template {template_id} from mission type {mission_type_id}")
    return ordered_templates(db, mission_type_id)
