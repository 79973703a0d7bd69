# missionops/services/_helpers.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from missionops.errors import NotFoundError, PersistenceError
from missionops.models.mission_type import MissionType

logger = logging.getLogger(__name__)


@contextmanager
def write_scope(db: Session, component: str) -> Iterator[Session]:
    """
    One transactional unit: commit on success, roll back on any failure.
    Store failures surface as PersistenceError with the driver error as cause.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"[{component}] write rolled back: {e}")
        raise PersistenceError(f"{component}: store failure, nothing was written") from e
    except Exception:
        # MissionOpsError included: validation inside the scope undoes earlier writes
        db.rollback()
        raise


def lock_mission_type(db: Session, mission_type_id: int) -> MissionType:
    """Row lock on one mission type; serializes edits to its template set only."""
    mission_type = db.execute(
        select(MissionType)
        .where(MissionType.id == mission_type_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()
    if mission_type is None:
        raise NotFoundError("Mission type not found")
    return mission_type


def share_mission_type(db: Session, mission_type_id: int) -> None:
    """FOR SHARE on a mission type: waits while a template delete holds FOR UPDATE on it."""
    db.execute(
        select(MissionType.id)
        .where(MissionType.id == mission_type_id)
        .with_for_update(read=True)
    )


def hold_store_write_lock(db: Session, mission_type_id: int) -> None:
    """
    SQLite has no row locks and pysqlite only opens a transaction at the first
    write. Touching the mission type row takes the database write lock now, so
    no other writer can commit until this transaction ends. Other backends
    rely on lock_mission_type alone.
    """
    if db.get_bind().dialect.name != "sqlite":
        return
    db.execute(
        update(MissionType)
        .where(MissionType.id == mission_type_id)
        .values(name=MissionType.name)
        .execution_options(synchronize_session=False)
    )
