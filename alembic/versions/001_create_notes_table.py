"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `notes` table: one row per note document.
Why:   `seq` preserves insertion order for the list endpoint; `id` is the
       public identifier the API exposes.

Rollback: downgrade() drops the table entirely (destructive — all notes lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column(
            "seq",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Insertion sequence; defines the natural retrieval order",
        ),
        sa.Column(
            "id",
            sa.String(36),
            nullable=False,
            comment="Public note identifier (UUID string)",
        ),
        sa.Column(
            "description",
            sa.Text(),
            nullable=False,
            comment="Note body text",
        ),
        sa.Column(
            "date_time",
            sa.TIMESTAMP(timezone=True),
            nullable=True,
            comment="When the note was created (UTC); not refreshed on update",
        ),
        sa.PrimaryKeyConstraint("seq"),
    )

    # Lookups by id back get, update and delete
    op.create_index("ix_notes_id", "notes", ["id"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_notes_id", table_name="notes")
    op.drop_table("notes")
