# missionops/models/__init__.py
from missionops.db import Base

# import all model modules so tables get registered on Base.metadata
from .task_status import TaskStatus
from .mission_type import MissionType
from .task_template import TaskTemplate
from .client import Client
from .project import Project
from .employee import Employee
from .mission import Mission
from .mission_employee import MissionEmployee
from .mission_task import MissionTask


__all__ = [
    "Base",
    "TaskStatus",
    "MissionType",
    "TaskTemplate",
    "Client",
    "Project",
    "Employee",
    "Mission",
    "MissionEmployee",
    "MissionTask",
]
