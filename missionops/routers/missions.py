# missionops/routers/missions.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from missionops import services
from missionops.db import get_db
from missionops.schemas.mission import MissionCreate, MissionOut, MissionTaskOut, TransitionRequest

router = APIRouter(tags=["missions"])

# ----------------------------------------------------------------------
# Missions
# ----------------------------------------------------------------------
@router.get("/missions", response_model=List[MissionOut])
def list_missions(
    day: Optional[date] = Query(None, description="Calendar day in YYYY-MM-DD"),
    db: Session = Depends(get_db),
):
    """Newest first; status is derived from the tasks on every read."""
    return [MissionOut.from_mission(m) for m in services.list_missions(db, day)]


@router.post("/missions", response_model=MissionOut, status_code=201)
def create_mission(payload: MissionCreate, db: Session = Depends(get_db)):
    mission = services.create_mission(
        db,
        date=payload.date,
        mission_type_id=payload.mission_type_id,
        project_id=payload.project_id,
        employee_ids=payload.employee_ids,
        team_leader_id=payload.team_leader_id,
        description=payload.description,
    )
    return MissionOut.from_mission(mission)


@router.get("/missions/{mission_id}", response_model=MissionOut)
def get_mission(mission_id: int, db: Session = Depends(get_db)):
    return MissionOut.from_mission(services.get_mission(db, mission_id))


@router.delete("/missions/{mission_id}", status_code=204)
def delete_mission(mission_id: int, db: Session = Depends(get_db)):
    services.delete_mission(db, mission_id)
    return None


# ----------------------------------------------------------------------
# Mission tasks
# ----------------------------------------------------------------------
@router.post("/mission-tasks/{task_id}/transition", response_model=MissionTaskOut)
def transition_task(task_id: int, payload: TransitionRequest, db: Session = Depends(get_db)):
    return services.transition_task(
        db, task_id, payload.status, expected_status=payload.expected_status
    )
