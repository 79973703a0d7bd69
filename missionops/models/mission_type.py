# missionops/models/mission_type.py
from sqlalchemy import String, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from missionops.db import Base


class MissionType(Base):
    __tablename__ = "mission_types"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    # minutes
    estimated_duration: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "estimated_duration BETWEEN 1 AND 1440", name="chk_mission_type_duration"
        ),
    )

    templates = relationship(
        "TaskTemplate",
        back_populates="mission_type",
        order_by="TaskTemplate.ord",
        cascade="all, delete-orphan",
    )
