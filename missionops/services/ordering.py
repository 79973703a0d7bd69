# missionops/services/ordering.py
"""
Dense 1..N ordering of a mission type's task templates.

Moves are adjacent swaps. Writes park rows on negative ords first so the
(mission_type_id, ord) unique constraint holds after every statement, and
each parking write is a compare-and-set on the ord we read.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Tuple

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from missionops.errors import ConflictError, NotFoundError, ValidationError
from missionops.models.task_template import TaskTemplate
from missionops.services._helpers import lock_mission_type, write_scope

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


def ordered_templates(db: Session, mission_type_id: int) -> List[TaskTemplate]:
    return list(
        db.scalars(
            select(TaskTemplate)
            .where(TaskTemplate.mission_type_id == mission_type_id)
            .order_by(TaskTemplate.ord, TaskTemplate.id)
            .execution_options(populate_existing=True)
        ).all()
    )


def _write_ords(db: Session, changes: Dict[int, Tuple[int, int]]) -> None:
    """changes maps template id -> (ord read, ord wanted)."""
    for tid, (old, new) in changes.items():
        res = db.execute(
            update(TaskTemplate)
            .where(TaskTemplate.id == tid, TaskTemplate.ord == old)
            .values(ord=-new)
            .execution_options(synchronize_session=False)
        )
        if res.rowcount != 1:
            raise ConflictError("Task order changed concurrently; reload and retry")
    for tid, (_old, new) in changes.items():
        db.execute(
            update(TaskTemplate)
            .where(TaskTemplate.id == tid)
            .values(ord=new)
            .execution_options(synchronize_session=False)
        )


def renumber_in_tx(db: Session, mission_type_id: int) -> List[TaskTemplate]:
    """Rewrite ords to 1..N keeping relative order. Caller owns the transaction and the lock."""
    rows = ordered_templates(db, mission_type_id)
    changes = {t.id: (t.ord, i) for i, t in enumerate(rows, start=1) if t.ord != i}
    if changes:
        _write_ords(db, changes)
        logger.info(f"[ordering] renumbered {len(changes)} template(s) of mission type {mission_type_id}")
    return ordered_templates(db, mission_type_id)


def renumber(db: Session, mission_type_id: int) -> List[TaskTemplate]:
    with write_scope(db, "ordering"):
        lock_mission_type(db, mission_type_id)
        renumber_in_tx(db, mission_type_id)
    return ordered_templates(db, mission_type_id)


def move(db: Session, template_id: int, direction: Direction | str) -> List[TaskTemplate]:
    """
    Swap a template with its neighbour. Already first (up) or last (down) is a
    no-op. Returns the mission type's templates in their new order.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        raise ValidationError(f"direction must be 'up' or 'down', got {direction!r}")

    tpl = db.get(TaskTemplate, template_id)
    if tpl is None:
        raise NotFoundError("Task template not found")
    mission_type_id = tpl.mission_type_id

    with write_scope(db, "ordering"):
        lock_mission_type(db, mission_type_id)
        rows = ordered_templates(db, mission_type_id)
        idx = next((i for i, t in enumerate(rows) if t.id == template_id), None)
        if idx is None:
            raise NotFoundError("Task template not found")

        target = idx - 1 if direction is Direction.UP else idx + 1
        if 0 <= target < len(rows):
            cur, nb = rows[idx], rows[target]
            _write_ords(db, {cur.id: (cur.ord, nb.ord), nb.id: (nb.ord, cur.ord)})
            logger.info(
                f"[ordering] moved template {cur.id} {direction.value}: ord {cur.ord} <-> {nb.ord}"
            )

    return ordered_templates(db, mission_type_id)
