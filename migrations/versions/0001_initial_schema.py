"""initial mission ops schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "mission_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("estimated_duration", sa.Integer(), nullable=False),
        sa.CheckConstraint("estimated_duration BETWEEN 1 AND 1440", name="chk_mission_type_duration"),
    )
    op.create_index("ix_mission_types_name", "mission_types", ["name"], unique=True)

    op.create_table(
        "mission_types_tasks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("mission_type_id", sa.Integer(), sa.ForeignKey("mission_types.id", ondelete="CASCADE"), nullable=False),
        sa.Column("ord", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("estimated_duration", sa.Integer(), nullable=False),
        sa.UniqueConstraint("mission_type_id", "ord", name="uq_mission_type_task_ord"),
    )
    op.create_index("ix_mission_types_tasks_type_ord", "mission_types_tasks", ["mission_type_id", "ord"])

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(64), nullable=False),
        sa.Column("last_name", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "missions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("mission_type_id", sa.Integer(), sa.ForeignKey("mission_types.id"), nullable=False),
        sa.Column("project_id", sa.Integer(), sa.ForeignKey("projects.id"), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("estimated_duration", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_missions_type_date", "missions", ["mission_type_id", "date"])

    op.create_table(
        "mission_employees",
        sa.Column("mission_id", sa.Integer(), sa.ForeignKey("missions.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("employees.id", ondelete="RESTRICT"), primary_key=True),
        sa.Column("is_team_leader", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_mission_employees_employee", "mission_employees", ["employee_id"])

    op.create_table(
        "mission_tasks",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("mission_id", sa.Integer(), sa.ForeignKey("missions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("ord", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("estimated_duration", sa.Integer(), nullable=False),
        sa.Column("status_id", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("start_stamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("pause_stamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("unpause_stamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("stop_stamp", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_mission_tasks_mission_ord", "mission_tasks", ["mission_id", "ord"])
    op.create_index("ix_mission_tasks_status", "mission_tasks", ["status_id"])


def downgrade() -> None:
    op.drop_index("ix_mission_tasks_status", table_name="mission_tasks")
    op.drop_index("ix_mission_tasks_mission_ord", table_name="mission_tasks")
    op.drop_table("mission_tasks")
    op.drop_index("ix_mission_employees_employee", table_name="mission_employees")
    op.drop_table("mission_employees")
    op.drop_index("ix_missions_type_date", table_name="missions")
    op.drop_table("missions")
    op.drop_table("employees")
    op.drop_table("projects")
    op.drop_index("ix_mission_types_tasks_type_ord", table_name="mission_types_tasks")
    op.drop_table("mission_types_tasks")
    op.drop_index("ix_mission_types_name", table_name="mission_types")
    op.drop_table("mission_types")
