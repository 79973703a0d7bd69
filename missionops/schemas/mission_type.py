# missionops/schemas/mission_type.py
from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict

from missionops.services.ordering import Direction


class MissionTypeCreate(BaseModel):
    name: str
    estimated_duration: int = 60

class MissionTypeUpdate(BaseModel):
    name: Optional[str] = None
    estimated_duration: Optional[int] = None

class MissionTypeOut(BaseModel):
    id: int
    name: str
    estimated_duration: int

    model_config = ConfigDict(from_attributes=True)


class TaskTemplateCreate(BaseModel):
    description: str
    estimated_duration: int = 30

    @field_validator("description")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

class TaskTemplateUpdate(BaseModel):
    description: Optional[str] = None
    estimated_duration: Optional[int] = None

class TaskTemplateOut(BaseModel):
    id: int
    mission_type_id: int
    ord: int
    description: str
    estimated_duration: int

    model_config = ConfigDict(from_attributes=True)


class MoveRequest(BaseModel):
    direction: Direction
