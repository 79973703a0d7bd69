# missionops/routers/mission_types.py
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from missionops import services
from missionops.db import get_db
from missionops.schemas.mission_type import (
    MissionTypeCreate,
    MissionTypeUpdate,
    MissionTypeOut,
    TaskTemplateCreate,
    TaskTemplateUpdate,
    TaskTemplateOut,
    MoveRequest,
)

router = APIRouter(tags=["mission-types"])

# ----------------------------------------------------------------------
# Mission types
# ----------------------------------------------------------------------
@router.get("/mission-types", response_model=List[MissionTypeOut])
def list_mission_types(db: Session = Depends(get_db)):
    return services.list_mission_types(db)


@router.post("/mission-types", response_model=MissionTypeOut, status_code=201)
def create_mission_type(payload: MissionTypeCreate, db: Session = Depends(get_db)):
    return services.create_mission_type(db, payload.name, payload.estimated_duration)


@router.patch("/mission-types/{mission_type_id}", response_model=MissionTypeOut)
def update_mission_type(mission_type_id: int, payload: MissionTypeUpdate, db: Session = Depends(get_db)):
    return services.update_mission_type(db, mission_type_id, **payload.model_dump(exclude_unset=True))


# ----------------------------------------------------------------------
# Task templates
# ----------------------------------------------------------------------
@router.get("/mission-types/{mission_type_id}/tasks", response_model=List[TaskTemplateOut])
def list_templates(mission_type_id: int = Path(ge=1), db: Session = Depends(get_db)):
    return services.list_templates(db, mission_type_id)


@router.post("/mission-types/{mission_type_id}/tasks", response_model=TaskTemplateOut, status_code=201)
def add_template(mission_type_id: int, payload: TaskTemplateCreate, db: Session = Depends(get_db)):
    return services.add_template(db, mission_type_id, payload.description, payload.estimated_duration)


@router.patch("/task-templates/{template_id}", response_model=TaskTemplateOut)
def update_template(template_id: int, payload: TaskTemplateUpdate, db: Session = Depends(get_db)):
    return services.update_template(db, template_id, **payload.model_dump(exclude_unset=True))


@router.delete("/task-templates/{template_id}", response_model=List[TaskTemplateOut])
def delete_template(template_id: int, db: Session = Depends(get_db)):
    """Returns the remaining templates, renumbered."""
    return services.delete_template(db, template_id)


@router.post("/task-templates/{template_id}/move", response_model=List[TaskTemplateOut])
def move_template(template_id: int, payload: MoveRequest, db: Session = Depends(get_db)):
    return services.move(db, template_id, payload.direction)
