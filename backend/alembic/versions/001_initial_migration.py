"""Initial migration: create user, node_type, filter_format, node tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create user table (id 0 is the anonymous account)
    op.create_table(
        "user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("mail", sa.String(), nullable=True),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_name", "user", ["name"], unique=True)

    # Create node_type table
    op.create_table(
        "node_type",
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("has_body", sa.Boolean(), nullable=False),
        sa.Column("body_label", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("type"),
    )

    # Create filter_format table
    op.create_table(
        "filter_format",
        sa.Column("format", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("format"),
    )

    # Create node table
    op.create_table(
        "node",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("uuid", sa.String(), nullable=False),
        sa.Column("vid", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("uid", sa.Integer(), nullable=False),
        sa.Column("status", sa.Boolean(), nullable=False),
        sa.Column("promote", sa.Boolean(), nullable=False),
        sa.Column("sticky", sa.Boolean(), nullable=False),
        sa.Column("body", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["type"], ["node_type.type"]),
        sa.ForeignKeyConstraint(["uid"], ["user.id"]),
    )
    op.create_index("ix_node_uuid", "node", ["uuid"], unique=True)
    op.create_index("ix_node_type", "node", ["type"], unique=False)
    op.create_index("ix_node_title", "node", ["title"], unique=False)
    op.create_index("ix_node_uid", "node", ["uid"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_node_uid", table_name="node")
    op.drop_index("ix_node_title", table_name="node")
    op.drop_index("ix_node_type", table_name="node")
    op.drop_index("ix_node_uuid", table_name="node")
    op.drop_table("node")
    op.drop_table("filter_format")
    op.drop_table("node_type")
    op.drop_index("ix_user_name", table_name="user")
    op.drop_table("user")
