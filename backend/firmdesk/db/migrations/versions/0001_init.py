"""init

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    ]

def upgrade():
    op.create_table(
        "client",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("gstin", sa.String(length=32), nullable=True),
        sa.Column("pan", sa.String(length=16), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_client_name", "client", ["name"])

    op.create_table(
        "task",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("client_name", sa.String(length=256), nullable=False),
        sa.Column("task_category", sa.String(length=128), nullable=False),
        sa.Column("sub_category", sa.String(length=128), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("assigned_name", sa.String(length=256), nullable=True),
        sa.Column("due_date", sa.BigInteger(), nullable=True),
        sa.Column("assignment_date", sa.BigInteger(), nullable=True),
        sa.Column("completion_date", sa.BigInteger(), nullable=True),
        sa.Column("bill", sa.Float(), nullable=True),
        sa.Column("advance_received", sa.Float(), nullable=True),
        sa.Column("outstanding_amount", sa.Float(), nullable=True),
        sa.Column("payment_status", sa.String(length=64), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_task_client_name", "task", ["client_name"])
    op.create_index("ix_task_task_category", "task", ["task_category"])
    op.create_index("ix_task_status", "task", ["status"])

    op.create_table(
        "assignee",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=256), nullable=False),
        sa.Column("captain", sa.String(length=256), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_assignee_name", "assignee", ["name"])

    op.create_table(
        "todo",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=512), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("priority", sa.Integer(), nullable=True),
        sa.Column("due_date", sa.BigInteger(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "import_run",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("entity", sa.String(length=32), nullable=False),
        sa.Column("file_name", sa.String(length=512), nullable=False),
        sa.Column("file_hash", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("finished_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rows_total", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rows_loaded", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_import_run_entity", "import_run", ["entity"])
    op.create_index("ix_import_run_file_hash", "import_run", ["file_hash"])

    op.create_table(
        "import_error",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("import_run_id", sa.Integer(), sa.ForeignKey("import_run.id", ondelete="CASCADE"), nullable=False),
        sa.Column("stage", sa.String(length=16), nullable=False, server_default="parse"),
        sa.Column("row_num", sa.Integer(), nullable=True),
        sa.Column("column", sa.String(length=128), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_import_error_import_run_id", "import_error", ["import_run_id"])

def downgrade():
    op.drop_table("import_error")
    op.drop_table("import_run")
    op.drop_table("todo")
    op.drop_table("assignee")
    op.drop_table("task")
    op.drop_table("client")
