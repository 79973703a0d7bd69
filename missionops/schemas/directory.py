# missionops/schemas/directory.py
from typing import Optional
from pydantic import BaseModel
from pydantic.config import ConfigDict


class EmployeeIn(BaseModel):
    first_name: str
    last_name: str

class EmployeeUpdate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class EmployeeOut(BaseModel):
    id: int
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)


class ClientIn(BaseModel):
    name: str
    logo: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

class ClientOut(BaseModel):
    id: int
    name: str
    logo: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ProjectIn(BaseModel):
    name: str
    description: Optional[str] = None
    client_id: Optional[int] = None

class ProjectUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    client_id: Optional[int] = None

class ProjectOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    client_id: Optional[int] = None
    client: Optional[ClientOut] = None

    model_config = ConfigDict(from_attributes=True)
