# missionops/services/__init__.py
from .catalog import (
    list_mission_types,
    get_mission_type,
    create_mission_type,
    update_mission_type,
    list_templates,
    add_template,
    update_template,
    delete_template,
)
from .ordering import Direction, move, renumber
from .instantiator import instantiate, clone_templates
from .task_states import can_transition, plan_transition
from .tasks import get_task, transition_task
from .status import MissionStatus, derive_status
from .missions import create_mission, get_mission, list_missions, delete_mission, mission_status
from .directory import (
    list_employees,
    get_employee,
    create_employee,
    update_employee,
    delete_employee,
    list_clients,
    get_client,
    create_client,
    delete_client,
    list_projects,
    get_project,
    create_project,
    update_project,
    delete_project,
)

__all__ = [
    "list_mission_types", "get_mission_type", "create_mission_type", "update_mission_type",
    "list_templates", "add_template", "update_template", "delete_template",
    "Direction", "move", "renumber",
    "instantiate", "clone_templates",
    "can_transition", "plan_transition",
    "get_task", "transition_task",
    "MissionStatus", "derive_status",
    "create_mission", "get_mission", "list_missions", "delete_mission", "mission_status",
    "list_employees", "get_employee", "create_employee", "update_employee", "delete_employee",
    "list_clients", "get_client", "create_client", "delete_client",
    "list_projects", "get_project", "create_project", "update_project", "delete_project",
]
