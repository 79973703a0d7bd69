# missionops/schemas/__init__.py

# Mission types and their task templates
from .mission_type import (
    MissionTypeCreate,
    MissionTypeUpdate,
    MissionTypeOut,
    TaskTemplateCreate,
    TaskTemplateUpdate,
    TaskTemplateOut,
    MoveRequest,
)

# Missions
from .mission import (
    MissionCreate,
    MissionOut,
    MissionTaskOut,
    MissionEmployeeOut,
    TransitionRequest,
)

# Employees / clients / projects
from .directory import (
    EmployeeIn,
    EmployeeUpdate,
    EmployeeOut,
    ClientIn,
    ClientOut,
    ProjectIn,
    ProjectUpdate,
    ProjectOut,
)

__all__ = [
    "MissionTypeCreate", "MissionTypeUpdate", "MissionTypeOut",
    "TaskTemplateCreate", "TaskTemplateUpdate", "TaskTemplateOut", "MoveRequest",
    "MissionCreate", "MissionOut", "MissionTaskOut", "MissionEmployeeOut", "TransitionRequest",
    "EmployeeIn", "EmployeeUpdate", "EmployeeOut", "ClientIn", "ClientOut",
    "ProjectIn", "ProjectUpdate", "ProjectOut",
]
