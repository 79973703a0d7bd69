# missionops/models/mission_employee.py
from sqlalchemy import Boolean, Column, Integer, ForeignKey, Index
from sqlalchemy.orm import relationship
from missionops.db import Base

class MissionEmployee(Base):
    __tablename__ = "mission_employees"

    mission_id = Column(Integer, ForeignKey("missions.id", ondelete="CASCADE"), primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="RESTRICT"), primary_key=True)
    is_team_leader = Column(Boolean, nullable=False, default=False)

    mission = relationship("Mission", back_populates="employee_links")
    employee = relationship("Employee", lazy="joined")

    __table_args__ = (
        Index("ix_mission_employees_employee", "employee_id"),
    )
