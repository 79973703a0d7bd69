# missionops/models/mission_task.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from missionops.db import Base
from missionops.models.task_status import TaskStatus


class MissionTask(Base):
    __tablename__ = "mission_tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mission_id: Mapped[int] = mapped_column(
        ForeignKey("missions.id", ondelete="CASCADE"), nullable=False
    )
    # copied from the template at creation, never renumbered
    ord: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    estimated_duration: Mapped[int] = mapped_column(Integer, nullable=False)
    status_id: Mapped[int] = mapped_column(Integer, nullable=False, default=int(TaskStatus.NEW))

    start_stamp: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    pause_stamp: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    unpause_stamp: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    stop_stamp: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_mission_tasks_mission_ord", "mission_id", "ord"),
        Index("ix_mission_tasks_status", "status_id"),
    )

    mission = relationship("Mission", back_populates="tasks")

    @property
    def status(self) -> TaskStatus:
        return TaskStatus(self.status_id)
