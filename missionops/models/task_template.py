# missionops/models/task_template.py
from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from missionops.db import Base


class TaskTemplate(Base):
    __tablename__ = "mission_types_tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mission_type_id: Mapped[int] = mapped_column(
        ForeignKey("mission_types.id", ondelete="CASCADE"), nullable=False
    )
    # 1-based, dense within a mission type
    ord: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    estimated_duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("mission_type_id", "ord", name="uq_mission_type_task_ord"),
        Index("ix_mission_types_tasks_type_ord", "mission_type_id", "ord"),
    )

    mission_type = relationship("MissionType", back_populates="templates")
