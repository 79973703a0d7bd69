# missionops/schemas/mission.py
from __future__ import annotations

import datetime as dt
from typing import List, Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from missionops.services.status import MissionStatus, derive_status


class MissionCreate(BaseModel):
    date: dt.date
    mission_type_id: int
    project_id: int
    description: Optional[str] = None
    employee_ids: List[int] = Field(default_factory=list)
    team_leader_id: int


class MissionTaskOut(BaseModel):
    id: int
    mission_id: int
    ord: int
    description: str
    estimated_duration: int
    status_id: int
    start_stamp: Optional[dt.datetime] = None
    pause_stamp: Optional[dt.datetime] = None
    unpause_stamp: Optional[dt.datetime] = None
    stop_stamp: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class MissionEmployeeOut(BaseModel):
    employee_id: int
    first_name: str
    last_name: str
    is_team_leader: bool


class MissionOut(BaseModel):
    id: int
    date: dt.date
    mission_type_id: int
    project_id: int
    description: Optional[str] = None
    estimated_duration: int
    status: MissionStatus
    employees: List[MissionEmployeeOut]
    tasks: List[MissionTaskOut]

    @classmethod
    def from_mission(cls, m) -> "MissionOut":
        """Status is computed here on every read; it is never stored."""
        return cls(
            id=m.id,
            date=m.date,
            mission_type_id=m.mission_type_id,
            project_id=m.project_id,
            description=m.description,
            estimated_duration=m.estimated_duration,
            status=derive_status(m.tasks),
            employees=[
                MissionEmployeeOut(
                    employee_id=link.employee_id,
                    first_name=link.employee.first_name,
                    last_name=link.employee.last_name,
                    is_team_leader=link.is_team_leader,
                )
                for link in sorted(m.employee_links, key=lambda l: (not l.is_team_leader, l.employee_id))
            ],
            tasks=[MissionTaskOut.model_validate(t) for t in m.tasks],
        )


class TransitionRequest(BaseModel):
    # status id (1-4) or name ("in_progress")
    status: Union[int, str]
    expected_status: Optional[Union[int, str]] = None
