# missionops/models/mission.py
from __future__ import annotations

import datetime as dt
from typing import Optional

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from missionops.db import Base


class Mission(Base):
    __tablename__ = "missions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    mission_type_id: Mapped[int] = mapped_column(ForeignKey("mission_types.id"), nullable=False)
    project_id: Mapped[int] = mapped_column(ForeignKey("projects.id"), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    # snapshot of MissionType.estimated_duration at creation time
    estimated_duration: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_missions_type_date", "mission_type_id", "date"),
    )

    mission_type = relationship("MissionType")
    project = relationship("Project")
    tasks = relationship(
        "MissionTask",
        back_populates="mission",
        order_by="MissionTask.ord",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    employee_links = relationship(
        "MissionEmployee",
        back_populates="mission",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def team_leader_id(self) -> Optional[int]:
        for link in self.employee_links or []:
            if link.is_team_leader:
                return link.employee_id
        return None
