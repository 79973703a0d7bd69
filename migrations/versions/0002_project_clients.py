"""clients table and projects.client_id

Revision ID: 0002_project_clients
Revises: 0001_initial_schema
Create Date: 2026-10-18 15:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002_project_clients'
down_revision: Union[str, None] = '0001_initial_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("logo", sa.String(), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.UniqueConstraint("name", name="uq_clients_name"),
    )

    # batch mode so SQLite can rebuild the table; plain ALTERs elsewhere
    with op.batch_alter_table("projects") as batch:
        batch.add_column(sa.Column("client_id", sa.Integer(), nullable=True))
        batch.create_foreign_key(
            "fk_projects_client_id_clients",
            "clients",
            ["client_id"], ["id"],
            ondelete="RESTRICT",
        )
        batch.create_index("ix_projects_client_id", ["client_id"])


def downgrade() -> None:
    with op.batch_alter_table("projects") as batch:
        batch.drop_index("ix_projects_client_id")
        batch.drop_constraint("fk_projects_client_id_clients", type_="foreignkey")
        batch.drop_column("client_id")
    op.drop_table("clients")
