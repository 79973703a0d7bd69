# missionops/services/missions.py
"""
Mission composer.

A mission, its employee links and its task list are written as one unit:
either all of it is visible or none of it is.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from missionops.errors import NotFoundError, ValidationError
from missionops.models.employee import Employee
from missionops.models.mission import Mission
from missionops.models.mission_employee import MissionEmployee
from missionops.models.project import Project
from missionops.services._helpers import write_scope
from missionops.services.catalog import get_mission_type
from missionops.services.instantiator import instantiate
from missionops.services.status import MissionStatus, derive_status

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _mission_query():
    return (
        select(Mission)
        .options(
            selectinload(Mission.tasks),
            selectinload(Mission.employee_links).joinedload(MissionEmployee.employee),
        )
        .execution_options(populate_existing=True)
    )


def _link_employees(db: Session, mission_id: int, employee_ids: List[int], team_leader_id: int) -> None:
    db.add_all(
        MissionEmployee(
            mission_id=mission_id,
            employee_id=eid,
            is_team_leader=(eid == team_leader_id),
        )
        for eid in employee_ids
    )
    db.flush()


# ----------------------------------------------------------------------
# Composer
# ----------------------------------------------------------------------
def create_mission(
    db: Session,
    date: date,
    mission_type_id: int,
    project_id: int,
    employee_ids: Iterable[int],
    team_leader_id: int,
    description: Optional[str] = None,
) -> Mission:
    # everything is checked before the first write
    ids = list(dict.fromkeys(employee_ids or []))
    if not ids:
        raise ValidationError("At least one employee must be assigned")
    if team_leader_id not in ids:
        raise ValidationError("Team leader must be one of the assigned employees")

    mission_type = get_mission_type(db, mission_type_id)
    if db.get(Project, project_id) is None:
        raise NotFoundError("Project not found")
    known = set(db.scalars(select(Employee.id).where(Employee.id.in_(ids))).all())
    missing = [eid for eid in ids if eid not in known]
    if missing:
        raise NotFoundError(f"Unknown employee id(s): {missing}")

    description = (description or "").strip() or None

    with write_scope(db, "missions"):
        mission = Mission(
            date=date,
            mission_type_id=mission_type_id,
            project_id=project_id,
            description=description,
            estimated_duration=mission_type.estimated_duration,
        )
        db.add(mission)
        db.flush()

        _link_employees(db, mission.id, ids, team_leader_id)

        tasks = instantiate(db, mission.id, mission_type_id)
        db.add_all(tasks)
        db.flush()
        mission_id = mission.id

    logger.info(
        f"[missions] created mission {mission_id} ({mission_type.name}) on {date}: "
        f"{len(ids)} employee(s), {len(tasks)} task(s)"
    )
    return get_mission(db, mission_id)


def get_mission(db: Session, mission_id: int) -> Mission:
    mission = db.execute(_mission_query().where(Mission.id == mission_id)).scalar_one_or_none()
    if mission is None:
        raise NotFoundError("Mission not found")
    return mission


def list_missions(db: Session, day: Optional[date] = None) -> List[Mission]:
    """Newest first, like the console's mission list."""
    q = _mission_query().order_by(Mission.date.desc(), Mission.id.desc())
    if day is not None:
        q = q.where(Mission.date == day)
    return list(db.execute(q).scalars().unique().all())


def delete_mission(db: Session, mission_id: int) -> None:
    with write_scope(db, "missions"):
        res = db.execute(
            delete(Mission)
            .where(Mission.id == mission_id)
            .execution_options(synchronize_session="fetch")
        )
        if res.rowcount == 0:
            raise NotFoundError("Mission not found")
    logger.info(f"[missions] deleted mission {mission_id}")


def mission_status(db: Session, mission_id: int) -> MissionStatus:
    return derive_status(get_mission(db, mission_id).tasks)
