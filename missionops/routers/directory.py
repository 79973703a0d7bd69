# missionops/routers/directory.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from missionops import services
from missionops.db import get_db
from missionops.schemas.directory import (
    ClientIn,
    ClientOut,
    EmployeeIn,
    EmployeeOut,
    EmployeeUpdate,
    ProjectIn,
    ProjectOut,
    ProjectUpdate,
)

router = APIRouter(tags=["directory"])


@router.get("/employees", response_model=List[EmployeeOut])
def list_employees(db: Session = Depends(get_db)):
    return services.list_employees(db)


@router.post("/employees", response_model=EmployeeOut, status_code=201)
def create_employee(payload: EmployeeIn, db: Session = Depends(get_db)):
    return services.create_employee(db, payload.first_name, payload.last_name)


@router.patch("/employees/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: int, payload: EmployeeUpdate, db: Session = Depends(get_db)):
    return services.update_employee(db, employee_id, payload.first_name, payload.last_name)


@router.delete("/employees/{employee_id}", status_code=204)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    services.delete_employee(db, employee_id)
    return None


@router.get("/clients", response_model=List[ClientOut])
def list_clients(db: Session = Depends(get_db)):
    return services.list_clients(db)


@router.post("/clients", response_model=ClientOut, status_code=201)
def create_client(payload: ClientIn, db: Session = Depends(get_db)):
    return services.create_client(db, payload.name, payload.logo, payload.city, payload.country)


@router.delete("/clients/{client_id}", status_code=204)
def delete_client(client_id: int, db: Session = Depends(get_db)):
    services.delete_client(db, client_id)
    return None


@router.get("/projects", response_model=List[ProjectOut])
def list_projects(db: Session = Depends(get_db)):
    return services.list_projects(db)


@router.post("/projects", response_model=ProjectOut, status_code=201)
def create_project(payload: ProjectIn, db: Session = Depends(get_db)):
    return services.create_project(db, payload.name, payload.description, payload.client_id)


@router.get("/projects/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return services.get_project(db, project_id)


@router.patch("/projects/{project_id}", response_model=ProjectOut)
def update_project(project_id: int, payload: ProjectUpdate, db: Session = Depends(get_db)):
    return services.update_project(db, project_id, **payload.model_dump(exclude_unset=True))


@router.delete("/projects/{project_id}", status_code=204)
def delete_project(project_id: int, db: Session = Depends(get_db)):
    services.delete_project(db, project_id)
    return None
