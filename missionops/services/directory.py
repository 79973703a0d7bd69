# missionops/services/directory.py
"""Employees, projects and clients: the rows missions point at."""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from missionops.errors import ConflictError, NotFoundError, ValidationError
from missionops.models.client import Client
from missionops.models.employee import Employee
from missionops.models.mission import Mission
from missionops.models.mission_employee import MissionEmployee
from missionops.models.project import Project
from missionops.services._helpers import write_scope

logger = logging.getLogger(__name__)

PROJECT_FIELDS = ("name", "description", "client_id")


def _required(value: Optional[str], field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def _optional(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


# ----------------------------------------------------------------------
# Employees
# ----------------------------------------------------------------------
def list_employees(db: Session) -> List[Employee]:
    return list(db.scalars(select(Employee).order_by(Employee.last_name, Employee.first_name)).all())


def get_employee(db: Session, employee_id: int) -> Employee:
    employee = db.get(Employee, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


def create_employee(db: Session, first_name: str, last_name: str) -> Employee:
    employee = Employee(
        first_name=_required(first_name, "First name"),
        last_name=_required(last_name, "Last name"),
    )
    with write_scope(db, "directory"):
        db.add(employee)
        db.flush()
    return employee


def update_employee(
    db: Session,
    employee_id: int,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
) -> Employee:
    """Rename an employee. Mission links are by id, so assignments follow."""
    values = {}
    if first_name is not None:
        values["first_name"] = _required(first_name, "First name")
    if last_name is not None:
        values["last_name"] = _required(last_name, "Last name")

    employee = get_employee(db, employee_id)
    if not values:
        return employee
    with write_scope(db, "directory"):
        for k, v in values.items():
            setattr(employee, k, v)
        db.flush()
    return employee


def delete_employee(db: Session, employee_id: int) -> None:
    """Refused while the employee is on any mission."""
    with write_scope(db, "directory"):
        in_use = db.scalar(
            select(func.count())
            .select_from(MissionEmployee)
            .where(MissionEmployee.employee_id == employee_id)
        )
        if in_use:
            raise ConflictError("Cannot delete employee - they are assigned to one or more missions")
        res = db.execute(delete(Employee).where(Employee.id == employee_id))
        if res.rowcount == 0:
            raise NotFoundError("Employee not found")
    logger.info(f"[directory] deleted employee {employee_id}")


# ----------------------------------------------------------------------
# Clients
# ----------------------------------------------------------------------
def list_clients(db: Session) -> List[Client]:
    return list(db.scalars(select(Client).order_by(Client.name)).all())


def get_client(db: Session, client_id: int) -> Client:
    client = db.get(Client, client_id)
    if client is None:
        raise NotFoundError("Client not found")
    return client


def create_client(
    db: Session,
    name: str,
    logo: Optional[str] = None,
    city: Optional[str] = None,
    country: Optional[str] = None,
) -> Client:
    client = Client(
        name=_required(name, "Client name"),
        logo=_optional(logo),
        city=_optional(city),
        country=_optional(country),
    )
    with write_scope(db, "directory"):
        db.add(client)
        try:
            db.flush()
        except IntegrityError as e:
            raise ConflictError("Client name already exists") from e
    return client


def delete_client(db: Session, client_id: int) -> None:
    """Refused while any project belongs to the client."""
    with write_scope(db, "directory"):
        in_use = db.scalar(
            select(func.count()).select_from(Project).where(Project.client_id == client_id)
        )
        if in_use:
            raise ConflictError(f"Cannot delete client - {in_use} project(s) belong to it")
        res = db.execute(delete(Client).where(Client.id == client_id))
        if res.rowcount == 0:
            raise NotFoundError("Client not found")
    logger.info(f"[directory] deleted client {client_id}")


# ----------------------------------------------------------------------
# Projects
# ----------------------------------------------------------------------
def list_projects(db: Session) -> List[Project]:
    return list(db.scalars(select(Project).order_by(Project.name)).all())


def get_project(db: Session, project_id: int) -> Project:
    project = db.get(Project, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


def create_project(
    db: Session,
    name: str,
    description: Optional[str] = None,
    client_id: Optional[int] = None,
) -> Project:
    if client_id is not None:
        get_client(db, client_id)
    project = Project(
        name=_required(name, "Project name"),
        description=description,
        client_id=client_id,
    )
    with write_scope(db, "directory"):
        db.add(project)
        db.flush()
    return project


def update_project(db: Session, project_id: int, **changes) -> Project:
    """
    Patch a project. Only the keys passed are written, so `client_id=None`
    detaches the project from its client while omitting it leaves it alone.
    """
    unknown = set(changes) - set(PROJECT_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown project field(s): {', '.join(sorted(unknown))}")
    if "name" in changes:
        changes["name"] = _required(changes["name"], "Project name")
    if changes.get("client_id") is not None:
        get_client(db, changes["client_id"])

    project = get_project(db, project_id)
    if not changes:
        return project
    with write_scope(db, "directory"):
        for k, v in changes.items():
            setattr(project, k, v)
        db.flush()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int) -> None:
    """Refused while a mission references the project."""
    with write_scope(db, "directory"):
        in_use = db.scalar(
            select(func.count()).select_from(Mission).where(Mission.project_id == project_id)
        )
        if in_use:
            raise ConflictError(f"Cannot delete project - {in_use} mission(s) reference it")
        res = db.execute(delete(Project).where(Project.id == project_id))
        if res.rowcount == 0:
            raise NotFoundError("Project not found")
    logger.info(f"[directory] deleted project {project_id}")
